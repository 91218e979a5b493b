"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
frozen, and has no defaults: every value was decided during resolution.
"""

from typing import Literal, Optional
from pydantic import Field, ConfigDict
from thermvisc.schemas.base import ThermviscBaseModel


_FROZEN = ConfigDict(
    extra='forbid',
    validate_assignment=True,
    use_enum_values=True,
    str_strip_whitespace=True,
    allow_inf_nan=False,
    frozen=True,
)


class InternalConditioningConfig(ThermviscBaseModel):
    """Runtime gain and offset (ConditioningParameters)."""
    gain: float
    offset: float

    model_config = _FROZEN


class InternalReductionConfig(ThermviscBaseModel):
    """Runtime reduction settings (ReductionConfig)."""
    decay_factor: float = Field(ge=0)

    model_config = _FROZEN


class InternalLookupConfig(ThermviscBaseModel):
    """Runtime lookup settings."""
    conductivity: float
    policy: Literal["strict", "sentinel"]

    model_config = _FROZEN


class InternalSourceConfig(ThermviscBaseModel):
    """Runtime source settings."""
    path: Optional[str]
    encoding: str

    model_config = _FROZEN


class InternalLoggingConfig(ThermviscBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    log_file: Optional[str]

    model_config = _FROZEN


class InternalConfig(ThermviscBaseModel):
    """Authoritative runtime configuration.

    Runtime modules access fields directly:

        def __init__(self, config: InternalConfig):
            self.gain = config.conditioning.gain  # NOT .get()

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation in runtime code
    """

    conditioning: InternalConditioningConfig
    reduction: InternalReductionConfig
    lookup: InternalLookupConfig
    source: InternalSourceConfig
    logging: InternalLoggingConfig

    model_config = _FROZEN
