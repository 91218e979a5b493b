"""Configuration resolution and merging logic.

``resolve_config()`` merges ParamConfig, UserConfig, and CLIConfig in the
correct precedence order and returns a validated InternalConfig.
``provide_config()`` is the configuration provider used by the pipeline:
same merge, but malformed input surfaces as ``ConfigParseError``.

Precedence (highest to lowest):
1. CLIConfig (command-line overrides)
2. UserConfig (user file)
3. ParamConfig (expert defaults)
"""

from typing import Union, Optional, Tuple
from pydantic import ValidationError

from thermvisc.errors import ConfigParseError
from thermvisc.schemas.param import ParamConfig
from thermvisc.schemas.user import UserConfig
from thermvisc.schemas.cli import CLIConfig
from thermvisc.schemas.internal import (
    InternalConfig,
    InternalConditioningConfig,
    InternalReductionConfig,
)


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Deep merge multiple dictionaries.

    Later dictionaries override earlier ones. Nested dictionaries are
    merged recursively; other values are replaced.

    Examples
    --------
    >>> base = {"a": 1, "b": {"c": 2, "d": 3}}
    >>> override = {"b": {"d": 4, "e": 5}, "f": 6}
    >>> deep_merge(base, override)
    {'a': 1, 'b': {'c': 2, 'd': 4, 'e': 5}, 'f': 6}
    """
    result = base.copy()

    for override in overrides:
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            else:
                result[key] = value

    return result


def resolve_config(
    param_cfg: Union[dict, ParamConfig, None] = None,
    user_cfg: Optional[Union[dict, UserConfig]] = None,
    cli_cfg: Optional[Union[dict, CLIConfig]] = None,
) -> InternalConfig:
    """Resolve final runtime configuration from param, user, and CLI configs.

    Parameters
    ----------
    param_cfg : dict or ParamConfig, optional
        Expert configuration. ``None`` uses ``ParamConfig()`` defaults.
    user_cfg : dict or UserConfig, optional
        User overrides. If None or empty, only param defaults are used.
    cli_cfg : dict or CLIConfig, optional
        Command-line overrides.

    Returns
    -------
    InternalConfig
        Fully validated, immutable runtime configuration

    Raises
    ------
    ValidationError
        If any config fails Pydantic validation

    Examples
    --------
    >>> config = resolve_config(ParamConfig(), UserConfig(DECAY_FACTOR=0.5))
    >>> config.reduction.decay_factor
    0.5
    >>> config.conditioning.gain
    1.0
    """
    if param_cfg is None:
        param = ParamConfig()
    elif not isinstance(param_cfg, ParamConfig):
        param = ParamConfig.model_validate(param_cfg)
    else:
        param = param_cfg

    if user_cfg is None or (isinstance(user_cfg, dict) and not user_cfg):
        user = UserConfig()
    elif not isinstance(user_cfg, UserConfig):
        user = UserConfig.model_validate(user_cfg)
    else:
        user = user_cfg

    if cli_cfg is None or (isinstance(cli_cfg, dict) and not cli_cfg):
        cli = CLIConfig()
    elif not isinstance(cli_cfg, CLIConfig):
        cli = CLIConfig.model_validate(cli_cfg)
    else:
        cli = cli_cfg

    merged = deep_merge(
        param.model_dump(),
        user.to_internal_overrides(),
        cli.to_internal_overrides(),
    )

    return InternalConfig.model_validate(merged)


def provide_config(
    user_cfg: Optional[Union[dict, UserConfig]] = None,
    cli_cfg: Optional[Union[dict, CLIConfig]] = None,
    param_cfg: Union[dict, ParamConfig, None] = None,
) -> InternalConfig:
    """Configuration provider for a batch run.

    With no input at all the defaults apply (gain=1.0, offset=0.0,
    decay_factor=0.1).

    Raises
    ------
    ConfigParseError
        If any supplied value is malformed (non-numeric gain, negative
        decay factor, unknown policy, ...).
    """
    try:
        return resolve_config(param_cfg, user_cfg, cli_cfg)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in e.errors()
        )
        raise ConfigParseError(f"Invalid configuration value(s): {fields}") from e


def get_parameters(
    config: InternalConfig,
) -> Tuple[InternalConditioningConfig, InternalReductionConfig]:
    """Return the (ConditioningParameters, ReductionConfig) pair of a config."""
    return config.conditioning, config.reduction
