import logging
from typing import Sequence, Union

import numpy as np
import xarray as xr

from thermvisc.errors import EmptyVector

__all__ = ['average']

logger = logging.getLogger(__name__)


def average(vector: Union[xr.DataArray, Sequence[float]]) -> float:
    """Arithmetic mean, ``sum(vector) / len(vector)``.

    Raises
    ------
    EmptyVector
        If the vector has no elements.
    """
    values = np.asarray(vector, dtype=np.float64).ravel()
    if values.size == 0:
        raise EmptyVector("Result vector is empty")

    mean = float(values.sum() / values.size)
    logger.debug("Average of %d value(s): %s", values.size, mean)
    return mean
