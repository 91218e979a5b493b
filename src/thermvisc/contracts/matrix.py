"""Reshape stage contract.

Enforces the guarantee that the reshaper produced a square, row/column
labelled matrix no larger than the samples it was given.
"""

import math

import xarray as xr
from thermvisc.contracts.base import require


def assert_formatted(matrix: xr.DataArray, n_samples: int) -> None:
    """Enforce reshape stage contract.

    Parameters
    ----------
    matrix : xr.DataArray
        Output from MatrixReshaper.reshape()

    n_samples : int
        Number of conditioned samples handed to the reshaper

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    require(
        isinstance(matrix, xr.DataArray),
        f"Reshape contract violated: output is {type(matrix)}, expected DataArray"
    )
    require(
        matrix.dims == ("row", "column"),
        f"Reshape contract violated: dims are {matrix.dims}, expected ('row', 'column')"
    )

    rows, cols = matrix.shape
    require(
        rows == cols,
        f"Reshape contract violated: matrix is {rows}x{cols}, expected square"
    )
    require(
        rows == math.isqrt(n_samples),
        f"Reshape contract violated: size {rows} != floor(sqrt({n_samples}))"
    )
    require(
        rows * cols <= n_samples,
        f"Reshape contract violated: {rows * cols} cells from {n_samples} samples"
    )
