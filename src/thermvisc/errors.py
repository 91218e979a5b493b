"""Error taxonomy for a single batch run.

Every fatal condition maps to one ``ErrorKind``. Stages raise the matching
exception the moment a precondition fails; the batch processor turns it into
a tagged failure outcome so the caller only ever sees one terminal result.

Key distinction:
- ConfigParseError: bad provider input, raised before the pipeline starts
- TransportFailure: the raw-sample source is unavailable
- EmptyInput / EmptyMatrix / EmptyVector / KeyNotFound: stage preconditions
- ContractViolation (see ``thermvisc.contracts``): pipeline bug
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Tag carried by every failure outcome."""
    EMPTY_INPUT = "empty_input"
    EMPTY_MATRIX = "empty_matrix"
    EMPTY_VECTOR = "empty_vector"
    KEY_NOT_FOUND = "key_not_found"
    TRANSPORT_FAILURE = "transport_failure"
    CONFIG_PARSE_ERROR = "config_parse_error"
    CONTRACT_VIOLATION = "contract_violation"


class ThermviscError(Exception):
    """Base class for all tagged failures."""
    kind: ErrorKind


class EmptyInput(ThermviscError, ValueError):
    """No samples reached the reshaper."""
    kind = ErrorKind.EMPTY_INPUT


class EmptyMatrix(ThermviscError, ValueError):
    """A matrix with zero rows or columns reached the reducer."""
    kind = ErrorKind.EMPTY_MATRIX


class EmptyVector(ThermviscError, ValueError):
    """A zero-length vector reached the summarizer."""
    kind = ErrorKind.EMPTY_VECTOR


class KeyNotFound(ThermviscError, LookupError):
    """Strict property table lookup missed."""
    kind = ErrorKind.KEY_NOT_FOUND

    def __init__(self, key):
        self.key = key
        super().__init__(f"Invalid thermal conductivity value: {key!r}")


class TransportFailure(ThermviscError, RuntimeError):
    """The raw-sample source could not be read. Never retried."""
    kind = ErrorKind.TRANSPORT_FAILURE


class ConfigParseError(ThermviscError, ValueError):
    """Configuration provider supplied a malformed value."""
    kind = ErrorKind.CONFIG_PARSE_ERROR
