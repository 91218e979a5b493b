import pytest

from thermvisc.schemas.user import UserConfig


def test_uppercase_keys_are_handled():
    raw = {
        "GAIN": 2,
        "DECAY_FACTOR": "0.25",
        "LOOKUP_POLICY": "SENTINEL",
        "LOG_LEVEL": "debug",
        "SOURCE_PATH": "/tmp/batch.txt",
    }

    user = UserConfig.model_validate(raw)

    assert isinstance(user.gain, float) and user.gain == 2.0
    assert user.decay_factor == 0.25
    assert user.lookup_policy == "sentinel"
    assert user.log_level == "DEBUG"
    assert user.source_path == "/tmp/batch.txt"


def test_unknown_keys_are_ignored():
    raw = {"GAIN": 1.5, "SERIAL_PORT": "/dev/ttyUSB0"}
    user = UserConfig.model_validate(raw)

    assert user.gain == 1.5
    # Unknown key should not become an attribute nor raise
    assert not hasattr(user, "SERIAL_PORT")


def test_blank_strings_mean_not_set():
    user = UserConfig.model_validate({"GAIN": "", "OFFSET": " ", "CONDUCTIVITY": ""})

    assert user.gain is None
    assert user.offset is None
    assert user.conductivity is None
    assert user.to_internal_overrides() == {}


def test_none_values_mean_not_set():
    user = UserConfig.model_validate({"GAIN": None, "LOG_FILE": None})
    assert user.to_internal_overrides() == {}


def test_overrides_structure():
    user = UserConfig(GAIN=2.0, OFFSET=0.5, CONDUCTIVITY=0.9, LOG_FILE="run.log")

    assert user.to_internal_overrides() == {
        "conditioning": {"gain": 2.0, "offset": 0.5},
        "lookup": {"conductivity": 0.9},
        "logging": {"log_file": "run.log"},
    }


def test_nested_blank_gain():
    user = UserConfig.model_validate({"conditioning": {"gain": "", "offset": "2"}})
    assert user.to_internal_overrides() == {"conditioning": {"offset": 2.0}}


def test_nested_lookup_policy_normalized():
    user = UserConfig.model_validate({"lookup": {"policy": " Sentinel ", "conductivity": ""}})
    assert user.to_internal_overrides() == {"lookup": {"policy": "sentinel"}}
