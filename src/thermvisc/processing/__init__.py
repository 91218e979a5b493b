"""Numeric processing stages.

- sources: Raw-sample sources (file, stdin, port)
- conditioner: Gain/offset correction
- reshaper: Flat samples to square matrix
- reducer: Decay-weighted column reduction
- summarizer: Mean of the reduced vector
- property_table: Conductivity to viscosity lookup
"""

from thermvisc.processing.conditioner import SignalConditioner
from thermvisc.processing.reshaper import MatrixReshaper
from thermvisc.processing.reducer import WeightedReducer
from thermvisc.processing.summarizer import average
from thermvisc.processing.property_table import PropertyTable, SENTINEL, THERMAL_TO_VISCOSITY

__all__ = [
    "SignalConditioner",
    "MatrixReshaper",
    "WeightedReducer",
    "average",
    "PropertyTable",
    "SENTINEL",
    "THERMAL_TO_VISCOSITY",
]
