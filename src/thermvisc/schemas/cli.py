"""CLIConfig: Command-line operational overrides.

Highest priority in config resolution. Built from argparse results with
``None`` values already filtered out.
"""

from typing import Literal, Optional
from thermvisc.schemas.base import ThermviscBaseModel


class CLIConfig(ThermviscBaseModel):
    """Command-line configuration overrides.

    Usage
    -----
        cli_cfg = CLIConfig(decay_factor=0.0, source="readings.txt")
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    gain: Optional[float] = None
    offset: Optional[float] = None
    decay_factor: Optional[float] = None
    conductivity: Optional[float] = None
    lookup_policy: Optional[Literal["strict", "sentinel"]] = None
    source: Optional[str] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None
    log_file: Optional[str] = None

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        conditioning = {}
        if self.gain is not None:
            conditioning["gain"] = self.gain
        if self.offset is not None:
            conditioning["offset"] = self.offset
        if conditioning:
            overrides["conditioning"] = conditioning

        if self.decay_factor is not None:
            overrides["reduction"] = {"decay_factor": self.decay_factor}

        lookup = {}
        if self.conductivity is not None:
            lookup["conductivity"] = self.conductivity
        if self.lookup_policy is not None:
            lookup["policy"] = self.lookup_policy
        if lookup:
            overrides["lookup"] = lookup

        # "-" explicitly selects stdin even when the user file names a path
        if self.source is not None:
            overrides["source"] = {"path": None if self.source == "-" else self.source}

        logging_overrides = {}
        if self.log_level is not None:
            logging_overrides["level"] = self.log_level
        if self.log_file is not None:
            logging_overrides["log_file"] = self.log_file
        if logging_overrides:
            overrides["logging"] = logging_overrides

        return overrides
