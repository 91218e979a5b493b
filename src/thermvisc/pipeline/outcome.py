"""RunOutcome: the single terminal result of a batch run.

A run either succeeds with every result field set, or fails with a tagged
``error_kind`` and every result field ``None``. There is no partial state.
"""

from typing import Literal, Optional, Tuple
from pydantic import ConfigDict

from thermvisc.errors import ErrorKind
from thermvisc.schemas.base import ThermviscBaseModel


class RunOutcome(ThermviscBaseModel):
    """Result of one batch run."""

    ok: bool
    average: Optional[float] = None
    viscosity: Optional[float] = None
    conductivity: Optional[float] = None
    lookup_policy: Optional[Literal["strict", "sentinel"]] = None
    matrix_size: Optional[int] = None
    samples_read: Optional[int] = None
    samples_dropped: Optional[int] = None
    column_results: Optional[Tuple[float, ...]] = None
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    model_config = ConfigDict(
        extra='forbid',
        frozen=True,
        use_enum_values=False,
        allow_inf_nan=True,
    )

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "RunOutcome":
        """Build a failure outcome carrying only the error tag and message."""
        return cls(ok=False, error_kind=kind, error_message=message)
