"""Base contract enforcement utilities.

The require() function is the single enforcement mechanism for all contracts.
"""

from thermvisc.contracts.failure import ContractViolation


def require(condition: bool, message: str) -> None:
    """Enforce a pipeline contract.

    Called at stage boundaries to verify the preceding stage produced the
    guaranteed invariants. No recovery, no fallback, no silence.

    Raises
    ------
    ContractViolation
        If condition is False.

    Examples
    --------
    >>> require(matrix.dims == ("row", "column"), "Reshape contract: bad dims")
    """
    if not condition:
        raise ContractViolation(message)
