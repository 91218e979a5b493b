"""Single-batch processing pipeline.

Runs one batch through conditioning, reshaping, lookup, reduction and
averaging, and returns exactly one RunOutcome.
"""

import logging
from typing import Optional, TYPE_CHECKING

from thermvisc.contracts import ContractViolation, assert_formatted, assert_reduced
from thermvisc.errors import ErrorKind, ThermviscError
from thermvisc.pipeline.outcome import RunOutcome
from thermvisc.processing.conditioner import SignalConditioner
from thermvisc.processing.property_table import PropertyTable, SENTINEL, THERMAL_TO_VISCOSITY
from thermvisc.processing.reducer import WeightedReducer
from thermvisc.processing.reshaper import MatrixReshaper
from thermvisc.processing.sources import SampleSource
from thermvisc.processing.summarizer import average

if TYPE_CHECKING:
    from thermvisc.schemas import InternalConfig

__all__ = ['BatchProcessor']

logger = logging.getLogger(__name__)


class BatchProcessor:
    """Processes one batch of sensor readings through the numeric pipeline.

    **Processing Pipeline:**

    1. **Read & Condition**: Pulls raw readings from the source and applies
       ``gain``/``offset`` to each one as it arrives.

    2. **Reshape**: Square ``floor(sqrt(N))`` matrix, row-major; trailing
       samples are dropped.

    3. **Lookup**: Resolves the configured conductivity against the
       property table using the configured policy. Independent of the
       pipeline data.

    4. **Reduce**: Decay-weighted reduction of every column.

    5. **Average**: Mean of the reduced values.

    The run is terminal on the first failure. Every failure is turned into
    a tagged ``RunOutcome`` instead of propagating, so callers branch on
    ``outcome.ok`` and ``outcome.error_kind``.

    Example usage::

        processor = BatchProcessor(config)
        outcome = processor.run(FileSource("readings.txt"))
        if outcome.ok:
            print(outcome.average)
    """

    def __init__(self, config: "InternalConfig",
                 property_table: Optional[PropertyTable] = None):
        """Initialize processor with validated configuration.

        Parameters
        ----------
        config : InternalConfig
            Fully validated runtime configuration.

        property_table : PropertyTable, optional
            Shared read-only table. Defaults to ``THERMAL_TO_VISCOSITY``.
        """
        self.config = config
        self.property_table = property_table if property_table is not None else THERMAL_TO_VISCOSITY

        self.conditioner = SignalConditioner(config)
        self.reshaper = MatrixReshaper()
        self.reducer = WeightedReducer(config)

    def run(self, source: SampleSource) -> RunOutcome:
        """Process a single batch from ``source``.

        Returns
        -------
        RunOutcome
            Success with all results, or a failure tagged with its ErrorKind.
            Never raises for pipeline, transport or contract failures.
        """
        try:
            return self._run(source)

        except ContractViolation as e:
            logger.critical("CRITICAL: Pipeline contract violated: %s", e)
            logger.critical("This indicates a bug in pipeline logic. Run aborted.")
            return RunOutcome.failure(ErrorKind.CONTRACT_VIOLATION, str(e))

        except ThermviscError as e:
            logger.error("Run failed (%s): %s", e.kind.value, e)
            return RunOutcome.failure(e.kind, str(e))

    def _run(self, source: SampleSource) -> RunOutcome:
        # Step 1: Read and condition, sample by sample
        samples = list(self.conditioner.condition_stream(source.iter_raw()))
        logger.info("Read %d sample(s)", len(samples))

        # Step 2: Reshape
        matrix = self.reshaper.reshape(samples)
        assert_formatted(matrix, len(samples))
        size = matrix.sizes["row"]
        logger.info("Formatted %dx%d matrix", size, size)

        # Step 3: Lookup
        viscosity = self._lookup_viscosity()

        # Step 4: Reduce
        result = self.reducer.reduce(matrix)
        assert_reduced(result, matrix)

        # Step 5: Average
        mean = average(result)
        logger.info("Average: %s", mean)

        return RunOutcome(
            ok=True,
            average=mean,
            viscosity=viscosity,
            conductivity=self.config.lookup.conductivity,
            lookup_policy=self.config.lookup.policy,
            matrix_size=size,
            samples_read=matrix.attrs["samples_read"],
            samples_dropped=matrix.attrs["samples_dropped"],
            column_results=tuple(float(v) for v in result.values),
        )

    def _lookup_viscosity(self) -> float:
        conductivity = self.config.lookup.conductivity
        policy = self.config.lookup.policy

        viscosity = self.property_table.lookup(conductivity, policy)
        if viscosity == SENTINEL and policy == "sentinel":
            logger.warning("No viscosity for conductivity %s; reporting sentinel %s",
                           conductivity, SENTINEL)
        else:
            logger.info("Viscosity for conductivity %s: %s", conductivity, viscosity)
        return viscosity
