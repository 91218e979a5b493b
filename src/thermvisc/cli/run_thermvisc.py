"""Core batch execution logic and command-line entry point.

``run_batch()`` is the real implementation; ``main()`` only parses
arguments. scripts/run_thermvisc.py is a thin wrapper around ``main()``.
"""

import sys
import json
import argparse
import logging
import importlib.util
from pathlib import Path
from typing import Optional, Dict, Any, List

from thermvisc.errors import ConfigParseError
from thermvisc.pipeline.orchestrator import BatchOrchestrator
from thermvisc.pipeline.outcome import RunOutcome
from thermvisc.processing.sources import SampleSource
from thermvisc.schemas import InternalConfig, provide_config


logger = logging.getLogger(__name__)


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Parameters
    ----------
    config_path : str
        Path to user config Python file containing a CONFIG dict.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ConfigParseError
        If the file fails to execute or holds no CONFIG dict.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise ConfigParseError(f"Failed to load {path}: {e}") from e

    # Find CONFIG dict
    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ConfigParseError(f"No CONFIG dict found in {path}")


def load_config(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> InternalConfig:
    """Merge defaults, the user file and CLI overrides into one config.

    Parameters
    ----------
    user_config_path : str, optional
        Python file with a CONFIG dict. If None, only defaults and CLI
        overrides apply.

    cli_args : dict, optional
        CLI overrides. Keys: gain, offset, decay_factor, conductivity,
        lookup_policy, source, log_level, log_file. None values are ignored.

    verbose : bool, optional
        If True, force DEBUG logging and print the resolved config.

    Raises
    ------
    ConfigParseError
        If the user file cannot be executed or any value is malformed.
    FileNotFoundError
        If user_config_path does not exist.
    """
    user_cfg_dict = load_user_config_dict(user_config_path) if user_config_path else None

    cli_args = dict(cli_args or {})
    if verbose and cli_args.get("log_level") is None:
        cli_args["log_level"] = "DEBUG"

    # Filter None values
    cli_dict = {k: v for k, v in cli_args.items() if v is not None}

    config = provide_config(user_cfg_dict, cli_dict)

    if verbose:
        print("\nFull Internal Configuration:")
        print(json.dumps(config.model_dump(), indent=2))
        print('=' * 60)

    return config


def run_batch(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    source: Optional[SampleSource] = None,
    verbose: bool = False,
) -> RunOutcome:
    """Resolve configuration and process exactly one batch.

    Arguments are those of ``load_config``; ``source`` overrides the
    configured raw-sample source.

    Examples
    --------
    ::

        outcome = run_batch(cli_args={"decay_factor": 0.0, "source": "readings.txt"})
    """
    config = load_config(user_config_path, cli_args, verbose)
    return BatchOrchestrator(config).start(source)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Reduce one batch of sensor readings and look up viscosity"
    )
    parser.add_argument("config", nargs="?", help="Path to user config file (optional)")
    parser.add_argument("--source", help="File holding the batch line ('-' for stdin)")
    parser.add_argument("--gain", help="Signal gain")
    parser.add_argument("--offset", help="Signal offset")
    parser.add_argument("--decay-factor", help="Curve-fitting decay factor (>= 0)")
    parser.add_argument("--conductivity", help="Thermal conductivity to look up")
    parser.add_argument("--lookup-policy", choices=["strict", "sentinel"],
                        help="Fail on a table miss (strict) or report -1.0 (sentinel)")
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    # Numeric flags stay strings here so pydantic reports malformed values
    cli_args = {
        "source": args.source,
        "gain": args.gain,
        "offset": args.offset,
        "decay_factor": args.decay_factor,
        "conductivity": args.conductivity,
        "lookup_policy": args.lookup_policy,
        "log_file": args.log_file,
        "log_level": args.log_level,
    }

    try:
        config = load_config(args.config, cli_args, verbose=args.verbose)
    except (ConfigParseError, FileNotFoundError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    outcome = BatchOrchestrator(config).start()

    if not outcome.ok:
        print(f"Caught exception: {outcome.error_message}", file=sys.stderr)
        return 1

    print(outcome.average)
    print(f"Viscosity: {outcome.viscosity}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
