"""Reduction stage contract.

Enforces the guarantee that the reducer produced exactly one finite value
per matrix column.
"""

import numpy as np
import xarray as xr
from thermvisc.contracts.base import require


def assert_reduced(result: xr.DataArray, matrix: xr.DataArray) -> None:
    """Enforce reduction stage contract.

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    require(
        result.dims == ("column",),
        f"Reduction contract violated: dims are {result.dims}, expected ('column',)"
    )
    require(
        result.sizes["column"] == matrix.sizes["column"],
        f"Reduction contract violated: {result.sizes['column']} results for "
        f"{matrix.sizes['column']} columns"
    )

    # NaN/inf readings propagate; only a finite matrix promises finite output
    if np.isfinite(matrix.values).all():
        require(
            bool(np.isfinite(result.values).all()),
            "Reduction contract violated: non-finite result from finite matrix"
        )
