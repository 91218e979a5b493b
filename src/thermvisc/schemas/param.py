"""ParamConfig: Expert defaults for the thermvisc batch pipeline.

This module is the single source of truth for defaults. Runtime code never
reads ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from thermvisc.schemas.base import ThermviscBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class ConditioningConfig(ThermviscBaseModel):
    """Signal conditioning applied to every raw sample."""
    gain: float = Field(1.0, description="Multiplier applied to each raw sample")
    offset: float = Field(0.0, description="Added after the gain")


class ReductionConfig(ThermviscBaseModel):
    """Decay-weighted column reduction."""
    decay_factor: float = Field(0.1, ge=0, description="Weight is exp(-decay_factor * row)")


class LookupConfig(ThermviscBaseModel):
    """Conductivity to viscosity table lookup."""
    conductivity: float = Field(0.1, description="Conductivity key resolved each run")
    policy: Literal["strict", "sentinel"] = "strict"

    @field_validator("policy", mode="before")
    @classmethod
    def normalize_policy(cls, v):
        """Normalize policy names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class SourceConfig(ThermviscBaseModel):
    """Raw-sample source. ``path=None`` reads one line from stdin."""
    path: Optional[str] = None
    encoding: str = "ascii"


class LoggingConfig(ThermviscBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Optional[str] = None


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(ThermviscBaseModel):
    """Complete expert configuration with all defaults.

    Usage
    -----
    Base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    conditioning: ConditioningConfig = Field(default_factory=ConditioningConfig)
    reduction: ReductionConfig = Field(default_factory=ReductionConfig)
    lookup: LookupConfig = Field(default_factory=LookupConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
