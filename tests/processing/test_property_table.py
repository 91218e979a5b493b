"""Test PropertyTable lookup contracts."""

import pytest

from thermvisc.errors import ErrorKind, KeyNotFound
from thermvisc.processing.property_table import PropertyTable, SENTINEL, THERMAL_TO_VISCOSITY

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("conductivity, viscosity", [(0.1, 1.0), (0.5, 1.4), (1.0, 1.9)])
def test_strict_returns_stored_value(conductivity, viscosity):
    assert THERMAL_TO_VISCOSITY.lookup_strict(conductivity) == viscosity


def test_strict_miss_raises_key_not_found():
    with pytest.raises(KeyNotFound) as exc_info:
        THERMAL_TO_VISCOSITY.lookup_strict(0.25)

    assert exc_info.value.key == 0.25
    assert exc_info.value.kind == ErrorKind.KEY_NOT_FOUND
    assert "Invalid thermal conductivity" in str(exc_info.value)


def test_sentinel_miss_returns_sentinel():
    assert THERMAL_TO_VISCOSITY.lookup_or_sentinel(0.25) == SENTINEL == -1.0


def test_sentinel_hit_matches_strict():
    for key in THERMAL_TO_VISCOSITY:
        assert THERMAL_TO_VISCOSITY.lookup_or_sentinel(key) == THERMAL_TO_VISCOSITY.lookup_strict(key)


def test_exact_match_only():
    """Arithmetic that lands near a key is still a miss."""
    key = 0.1 + 0.2
    assert key != 0.3
    assert key not in THERMAL_TO_VISCOSITY
    assert THERMAL_TO_VISCOSITY.lookup_or_sentinel(key) == SENTINEL


def test_dispatch_by_policy():
    assert THERMAL_TO_VISCOSITY.lookup(0.3, "strict") == 1.2
    assert THERMAL_TO_VISCOSITY.lookup(0.33, "sentinel") == SENTINEL
    with pytest.raises(KeyNotFound):
        THERMAL_TO_VISCOSITY.lookup(0.33, "strict")
    with pytest.raises(ValueError, match="Unknown lookup policy"):
        THERMAL_TO_VISCOSITY.lookup(0.3, "nearest")


def test_table_does_not_alias_source_mapping():
    source = {0.1: 1.0}
    table = PropertyTable(source)
    source[0.2] = 5.0

    assert 0.2 not in table
    assert len(table) == 1


def test_table_is_read_only():
    with pytest.raises(TypeError):
        THERMAL_TO_VISCOSITY.entries[0.1] = 99.0


def test_default_table_contents():
    assert len(THERMAL_TO_VISCOSITY) == 10
    assert sorted(THERMAL_TO_VISCOSITY) == [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]


@pytest.mark.parametrize("viscosity", [SENTINEL, 0.0, -2.5, float("nan")])
def test_table_rejects_values_that_could_look_like_a_miss(viscosity):
    with pytest.raises(ValueError, match="must be positive"):
        PropertyTable({0.1: 1.0, 0.2: viscosity})
