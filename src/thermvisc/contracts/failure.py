"""Centralized failure type for contract violations.

Contracts fail fast, loud, and once. All violations raise the same
exception type, allowing the caller to handle pipeline bugs uniformly.
"""


class ContractViolation(RuntimeError):
    """Raised when a pipeline contract is violated.

    This indicates a bug in pipeline logic, not bad input. It means a
    stage did not produce the invariants it promised.

    Key distinction:
    - ConfigParseError: provider/config error
    - EmptyInput, EmptyMatrix, ...: stage precondition failures
    - ContractViolation: pipeline bug (programmer error)
    """
    pass
