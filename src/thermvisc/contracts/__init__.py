"""Pipeline contracts - fail-fast enforcement of stage invariants.

Contracts fail immediately and loudly when a stage does not produce its
promised invariants.

Key principle:
- Pydantic validates config correctness
- Contracts validate pipeline correctness
- Stages validate their own inputs (EmptyInput, EmptyMatrix, ...)
"""

from thermvisc.contracts.failure import ContractViolation
from thermvisc.contracts.base import require
from thermvisc.contracts.matrix import assert_formatted
from thermvisc.contracts.reduction import assert_reduced

__all__ = [
    "ContractViolation",
    "require",
    "assert_formatted",
    "assert_reduced",
]
