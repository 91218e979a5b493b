"""Test SignalConditioner gain/offset correction."""

import pytest

from thermvisc.processing.conditioner import SignalConditioner

pytestmark = pytest.mark.unit


def test_defaults_are_identity(internal_config):
    cond = SignalConditioner(internal_config)

    assert cond.gain == 1.0
    assert cond.offset == 0.0
    assert cond.condition(3.5) == 3.5


def test_gain_then_offset(make_config):
    cond = SignalConditioner(make_config(gain=2.0, offset=-1.0))

    assert cond.condition(3.0) == 5.0
    assert cond.condition(0.0) == -1.0


def test_stream_is_lazy(make_config):
    """Samples are conditioned as they arrive, not in a second pass."""
    cond = SignalConditioner(make_config(gain=10.0))
    pulled = []

    def raw():
        for v in (1.0, 2.0, 3.0):
            pulled.append(v)
            yield v

    stream = cond.condition_stream(raw())
    assert pulled == []

    assert next(stream) == 10.0
    assert pulled == [1.0]
    assert list(stream) == [20.0, 30.0]
