"""Pydantic configuration schemas for the thermvisc pipeline.

Exports
-------
provide_config : function
    Configuration provider (raises ConfigParseError on malformed input)
resolve_config : function
    Merge Param < User < CLI into an InternalConfig
get_parameters : function
    Split an InternalConfig into conditioning and reduction parameters
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
CLIConfig : class
    Command-line overrides
"""

from thermvisc.schemas.resolve import resolve_config, provide_config, get_parameters
from thermvisc.schemas.internal import InternalConfig
from thermvisc.schemas.param import ParamConfig
from thermvisc.schemas.user import UserConfig
from thermvisc.schemas.cli import CLIConfig

__all__ = [
    'provide_config',
    'resolve_config',
    'get_parameters',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
