"""Reshape a flat batch of samples into a square row/column matrix.

The matrix side is ``floor(sqrt(N))``. Samples are placed row-major, so
sample ``k`` lands at ``(k // size, k % size)``. Whatever does not fill
``size * size`` cells is dropped: the reducer needs a square shape and a
partial row cannot be represented. The drop is deliberate and silent
(debug log only); the count is kept in ``attrs["samples_dropped"]``.
"""

import logging
import math
from typing import Sequence

import numpy as np
import xarray as xr

from thermvisc.errors import EmptyInput

__all__ = ['MatrixReshaper']

logger = logging.getLogger(__name__)


class MatrixReshaper:
    """Row-major square reshaping of conditioned samples."""

    def reshape(self, samples: Sequence[float]) -> xr.DataArray:
        """Build a ``size x size`` matrix from ``samples``.

        Parameters
        ----------
        samples : sequence of float
            Conditioned samples, in arrival order.

        Returns
        -------
        xr.DataArray
            Dims ``("row", "column")`` with integer coordinates. The row
            coordinate is the pseudo-time axis used by the reducer.

        Raises
        ------
        EmptyInput
            If ``samples`` is empty.
        """
        n_samples = len(samples)
        if n_samples == 0:
            raise EmptyInput("Raw data is empty")

        size = math.isqrt(n_samples)
        used = size * size
        dropped = n_samples - used
        if dropped:
            logger.debug("Dropping %d trailing sample(s) beyond %dx%d", dropped, size, size)

        # np.array copies, so the matrix never aliases the caller's buffer
        values = np.array(samples[:used], dtype=np.float64).reshape(size, size)

        return xr.DataArray(
            values,
            dims=("row", "column"),
            coords={"row": np.arange(size), "column": np.arange(size)},
            attrs={
                "long_name": "Formatted sensor matrix",
                "samples_read": n_samples,
                "samples_dropped": dropped,
            },
        )
