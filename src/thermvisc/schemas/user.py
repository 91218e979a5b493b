"""UserConfig: Forgiving, minimal user-facing configuration.

Accepts both uppercase aliases (GAIN, DECAY_FACTOR, ...) and lowercase
names, numeric strings where floats are expected, and blank strings as
"keep the default" - the same rule the interactive prompts used.

UserConfig is intentionally minimal - users only specify what they want
to override from the expert defaults.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from thermvisc.schemas.base import ThermviscBaseModel


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


class UserConditioningConfig(ThermviscBaseModel):
    """User-facing conditioning overrides."""
    gain: Optional[float] = None
    offset: Optional[float] = None

    @field_validator("gain", "offset", mode="before")
    @classmethod
    def blank_means_default(cls, v):
        return _blank_to_none(v)


class UserReductionConfig(ThermviscBaseModel):
    """User-facing reduction overrides."""
    decay_factor: Optional[float] = Field(None, ge=0)

    @field_validator("decay_factor", mode="before")
    @classmethod
    def blank_decay_factor(cls, v):
        return _blank_to_none(v)


class UserLookupConfig(ThermviscBaseModel):
    """User-facing lookup overrides."""
    conductivity: Optional[float] = None
    policy: Optional[Literal["strict", "sentinel"]] = None

    @field_validator("conductivity", "policy", mode="before")
    @classmethod
    def blank_means_default(cls, v):
        v = _blank_to_none(v)
        if isinstance(v, str):
            return v.lower().strip()
        return v


class UserConfig(ThermviscBaseModel):
    """User-facing configuration schema.

    Usage
    -----
        user_cfg = UserConfig(GAIN=2.0, DECAY_FACTOR=0.05)
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    # Signal conditioning (flat aliases)
    gain: Optional[float] = Field(None, alias="GAIN")
    offset: Optional[float] = Field(None, alias="OFFSET")

    # Reduction
    decay_factor: Optional[float] = Field(None, ge=0, alias="DECAY_FACTOR")

    # Lookup
    conductivity: Optional[float] = Field(None, alias="CONDUCTIVITY")
    lookup_policy: Optional[Literal["strict", "sentinel"]] = Field(None, alias="LOOKUP_POLICY")

    # Source and logging
    source_path: Optional[str] = Field(None, alias="SOURCE_PATH")
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(None, alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, alias="LOG_FILE")

    # Nested overrides (advanced users)
    conditioning: Optional[UserConditioningConfig] = None
    reduction: Optional[UserReductionConfig] = None
    lookup: Optional[UserLookupConfig] = None

    model_config = ThermviscBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator(
        "gain", "offset", "decay_factor", "conductivity",
        "source_path", "log_file", "lookup_policy", "log_level",
        mode="before",
    )
    @classmethod
    def blank_means_default(cls, v):
        """Empty input keeps the default."""
        return _blank_to_none(v)

    @field_validator("lookup_policy", mode="before")
    @classmethod
    def normalize_policy(cls, v):
        """Normalize policy names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert user config to internal config structure.

        Flat fields win over nested ones when both are given.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        conditioning = {}
        if self.conditioning is not None:
            conditioning.update(self.conditioning.model_dump(exclude_none=True))
        if self.gain is not None:
            conditioning["gain"] = self.gain
        if self.offset is not None:
            conditioning["offset"] = self.offset
        if conditioning:
            overrides["conditioning"] = conditioning

        reduction = {}
        if self.reduction is not None:
            reduction.update(self.reduction.model_dump(exclude_none=True))
        if self.decay_factor is not None:
            reduction["decay_factor"] = self.decay_factor
        if reduction:
            overrides["reduction"] = reduction

        lookup = {}
        if self.lookup is not None:
            lookup.update(self.lookup.model_dump(exclude_none=True))
        if self.conductivity is not None:
            lookup["conductivity"] = self.conductivity
        if self.lookup_policy is not None:
            lookup["policy"] = self.lookup_policy
        if lookup:
            overrides["lookup"] = lookup

        if self.source_path is not None:
            overrides["source"] = {"path": self.source_path}

        logging_overrides = {}
        if self.log_level is not None:
            logging_overrides["level"] = self.log_level
        if self.log_file is not None:
            logging_overrides["log_file"] = self.log_file
        if logging_overrides:
            overrides["logging"] = logging_overrides

        return overrides
