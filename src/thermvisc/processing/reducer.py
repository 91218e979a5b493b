"""Decay-weighted column reduction ("curve fitting").

Each column collapses to one value::

    result[i] = sum_j(matrix[j, i] * exp(-decay_factor * j)) / rows

The row index is a pseudo-time axis; later rows weigh less when
``decay_factor > 0`` and every weight is 1 when it is 0. The divisor is the
row count, not the sum of weights, so this is a weighted sum normalised by
count and NOT a weighted mean. Changing the divisor changes the output.

Rows are accumulated one at a time in ascending order (vectorised across
columns only) so the floating-point summation order is fixed.
"""

import logging
from typing import TYPE_CHECKING

import numpy as np
import xarray as xr

from thermvisc.errors import EmptyMatrix

if TYPE_CHECKING:
    from thermvisc.schemas.internal import InternalConfig

__all__ = ['WeightedReducer', 'decay_weights']

logger = logging.getLogger(__name__)


def decay_weights(n_rows: int, decay_factor: float) -> np.ndarray:
    """Return ``exp(-decay_factor * j)`` for ``j = 0 .. n_rows - 1``."""
    return np.exp(-decay_factor * np.arange(n_rows, dtype=np.float64))


class WeightedReducer:
    """Reduce every matrix column with exponentially decaying row weights.

    Parameters
    ----------
    config : InternalConfig
        Uses ``config.reduction.decay_factor``.
    """

    def __init__(self, config: "InternalConfig"):
        self.decay_factor = config.reduction.decay_factor

        logger.info("WeightedReducer initialized: decay_factor=%s", self.decay_factor)

    def reduce(self, matrix: xr.DataArray) -> xr.DataArray:
        """Reduce ``matrix`` to one value per column.

        Raises
        ------
        EmptyMatrix
            If the matrix has zero rows or zero columns.
        """
        n_rows, n_cols = matrix.sizes["row"], matrix.sizes["column"]
        if n_rows == 0 or n_cols == 0:
            raise EmptyMatrix("Data matrix is empty")

        values = matrix.transpose("row", "column").values
        weights = decay_weights(n_rows, self.decay_factor)

        acc = np.zeros(n_cols, dtype=np.float64)
        for j in range(n_rows):
            acc += values[j] * weights[j]
        result = acc / n_rows

        logger.debug("Reduced %dx%d matrix: %s", n_rows, n_cols, result)

        return xr.DataArray(
            result,
            dims=("column",),
            coords={"column": matrix["column"].values},
            attrs={
                "long_name": "Decay-weighted column reduction",
                "decay_factor": self.decay_factor,
                "rows": n_rows,
            },
        )
