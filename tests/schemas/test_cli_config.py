"""Tests for CLIConfig schema and conversion to internal overrides."""

import pytest
from pydantic import ValidationError

from thermvisc.schemas.cli import CLIConfig


def test_cli_to_internal_overrides_with_gain():
    overrides = CLIConfig(gain=2.0).to_internal_overrides()
    assert overrides == {"conditioning": {"gain": 2.0}}


def test_cli_to_internal_overrides_with_decay_factor():
    overrides = CLIConfig(decay_factor=0.0).to_internal_overrides()
    assert overrides["reduction"]["decay_factor"] == 0.0


def test_cli_to_internal_overrides_with_source_path():
    overrides = CLIConfig(source="readings.txt").to_internal_overrides()
    assert overrides["source"] == {"path": "readings.txt"}


def test_cli_to_internal_overrides_with_stdin_dash():
    overrides = CLIConfig(source="-").to_internal_overrides()
    assert overrides["source"] == {"path": None}


def test_cli_to_internal_overrides_with_log_file():
    overrides = CLIConfig(log_file="/tmp/run.log", log_level="WARNING").to_internal_overrides()
    assert overrides["logging"] == {"level": "WARNING", "log_file": "/tmp/run.log"}


def test_cli_numeric_strings_are_coerced():
    cli = CLIConfig.model_validate({"gain": "1.5", "offset": "-2"})
    assert (cli.gain, cli.offset) == (1.5, -2.0)


def test_cli_config_all_log_levels():
    for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        overrides = CLIConfig(log_level=level).to_internal_overrides()
        assert overrides["logging"]["level"] == level


def test_cli_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        CLIConfig.model_validate({"radar_id": "KHTX"})


def test_cli_rejects_bad_policy():
    with pytest.raises(ValidationError):
        CLIConfig(lookup_policy="closest")
