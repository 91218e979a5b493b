"""Root-level pytest fixtures for the thermvisc test suite.

Provides shared configuration fixtures following the Pydantic-based
architecture. Tests use these fixtures instead of raw dict configs.
"""

import io

import numpy as np
import pytest
import xarray as xr

from thermvisc.processing.sources import SampleSource, TextLineSource
from thermvisc.schemas import ParamConfig, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Examples
    --------
    >>> def test_no_decay(make_config):
    ...     config = make_config(decay_factor=0.0)
    ...     assert config.reduction.decay_factor == 0.0
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        if user_overrides:
            user = UserConfig(**user_overrides)
            return resolve_config(param_config, user, None)
        else:
            return resolve_config(param_config, None, None)

    return _make


# =============================================================================
# Source Fixtures
# =============================================================================

class FakePort:
    """Byte-oriented port double with readline()/close()."""

    def __init__(self, payload=b"", fail_on_read=False):
        self.payload = payload
        self.fail_on_read = fail_on_read
        self.closed = False

    def readline(self):
        if self.fail_on_read:
            raise OSError("device disconnected")
        return self.payload

    def close(self):
        self.closed = True


class BrokenMidStreamSource(SampleSource):
    """Yields some readings, then loses the transport."""

    description = "flaky source"

    def __init__(self, values):
        self.values = values
        self.yielded = 0

    def iter_raw(self):
        from thermvisc.errors import TransportFailure

        for value in self.values:
            self.yielded += 1
            yield value
        raise TransportFailure("link dropped mid-batch")


@pytest.fixture
def fake_port():
    return FakePort


@pytest.fixture
def broken_source():
    return BrokenMidStreamSource


@pytest.fixture
def line_source():
    """Factory: TextLineSource over an in-memory line."""
    def _make(line):
        return TextLineSource(io.StringIO(line), description="test line")
    return _make


# =============================================================================
# Matrix Fixtures
# =============================================================================

@pytest.fixture
def matrix_3x3():
    """[[1,2,3],[4,5,6],[7,8,9]] as a row/column DataArray."""
    return xr.DataArray(
        np.arange(1.0, 10.0).reshape(3, 3),
        dims=("row", "column"),
        coords={"row": np.arange(3), "column": np.arange(3)},
    )
