"""Batch run orchestration.

Configures logging, builds the sample source from config and hands it to
the BatchProcessor. One batch per invocation; nothing is persisted.
"""

import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from thermvisc.pipeline.outcome import RunOutcome
from thermvisc.pipeline.processor import BatchProcessor
from thermvisc.processing.property_table import PropertyTable
from thermvisc.processing.sources import SampleSource, source_from_config

if TYPE_CHECKING:
    from thermvisc.schemas import InternalConfig

__all__ = ['BatchOrchestrator']

logger = logging.getLogger(__name__)


class BatchOrchestrator:
    """Entry point for running one ``thermvisc`` batch.

    **Logging:**

    Output goes to the console and, when ``config.logging.log_file`` is
    set, to that file as well. Level comes from ``config.logging.level``.

    Example usage::

        from thermvisc.schemas import provide_config
        from thermvisc.pipeline.orchestrator import BatchOrchestrator

        config = provide_config({"DECAY_FACTOR": 0.0, "SOURCE_PATH": "readings.txt"})
        outcome = BatchOrchestrator(config).start()
    """

    def __init__(self, config: "InternalConfig",
                 property_table: Optional[PropertyTable] = None,
                 configure_logging: bool = True):
        """Initialize orchestrator.

        Parameters
        ----------
        config : InternalConfig
            Fully validated runtime configuration.

        property_table : PropertyTable, optional
            Injected lookup table (default: the built-in table).

        configure_logging : bool, optional
            Install root log handlers on ``start()`` (default True). Library
            callers that manage logging themselves pass False.
        """
        self.config = config
        self.configure_logging = configure_logging
        self.processor = BatchProcessor(config, property_table=property_table)

    def _setup_logging(self):
        """Configure root logger with console and optional file handlers."""
        log_level = getattr(logging, self.config.logging.level.upper(), logging.INFO)

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Clear existing handlers and add new ones
        root = logging.getLogger()
        root.setLevel(log_level)
        for handler in root.handlers[:]:
            root.removeHandler(handler)

        # Console handler
        ch = logging.StreamHandler()
        ch.setLevel(log_level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

        # File handler
        log_file = self.config.logging.log_file
        if log_file:
            log_path = Path(log_file).expanduser()
            log_path.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_path)
            fh.setLevel(log_level)
            fh.setFormatter(formatter)
            root.addHandler(fh)
            logger.info("Logging: level=%s, file=%s", self.config.logging.level, log_path)
        else:
            logger.info("Logging: level=%s", self.config.logging.level)

    def start(self, source: Optional[SampleSource] = None) -> RunOutcome:
        """Run exactly one batch and return its outcome.

        Parameters
        ----------
        source : SampleSource, optional
            Explicit source. If None, built from ``config.source``
            (a file path, or stdin).
        """
        if self.configure_logging:
            self._setup_logging()

        if source is None:
            source = source_from_config(self.config)

        logger.info("Starting batch: gain=%s, offset=%s, decay_factor=%s",
                    self.config.conditioning.gain,
                    self.config.conditioning.offset,
                    self.config.reduction.decay_factor)

        outcome = self.processor.run(source)

        if outcome.ok:
            logger.info("Batch complete: average=%s, viscosity=%s",
                        outcome.average, outcome.viscosity)
        return outcome
