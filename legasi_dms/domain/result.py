"""
Result Domain Model - One shape for every backend reply.

The backend signals success either with ``{"success": true}`` or with
``{"status": "success"}`` depending on the endpoint. Adapters fold both
conventions into Result so workflow code checks a single flag.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar
from enum import Enum

from legasi_dms.errors import ServerRejection, NetworkError, UnexpectedError

T = TypeVar("T")


class ErrorKind(Enum):
    """Where a failed call broke down."""
    REJECTED = "rejected"        # Server answered, but not with success
    NETWORK = "network"          # No response received
    UNEXPECTED = "unexpected"    # Anything else (bad JSON, missing fields)


@dataclass(frozen=True)
class ApiError:
    """Failure details carried by a Result."""
    kind: ErrorKind
    message: str
    status_code: Optional[int] = None
    payload: Dict[str, Any] = field(default_factory=dict)

    def to_exception(self) -> Exception:
        """Build the matching exception from legasi_dms.errors."""
        exc_type = {
            ErrorKind.REJECTED: ServerRejection,
            ErrorKind.NETWORK: NetworkError,
            ErrorKind.UNEXPECTED: UnexpectedError,
        }[self.kind]
        return exc_type(self)


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a backend call.

    Exactly one of ``value`` (with optional server ``message``) or
    ``error`` is meaningful, selected by ``ok``.
    """
    ok: bool
    value: Optional[T] = None
    message: Optional[str] = None
    error: Optional[ApiError] = None

    @classmethod
    def success(cls, value: Optional[T] = None, message: Optional[str] = None) -> "Result[T]":
        return cls(ok=True, value=value, message=message)

    @classmethod
    def failure(cls, error: ApiError) -> "Result[T]":
        return cls(ok=False, error=error, message=error.message)

    def unwrap(self) -> T:
        """
        Return the value or raise the error as an exception.

        Raises:
            ServerRejection, NetworkError or UnexpectedError
        """
        if not self.ok:
            raise self.error.to_exception()
        return self.value


def is_success_payload(payload: Any) -> bool:
    """True if a response body reports success in either convention."""
    if not isinstance(payload, dict):
        return False
    return payload.get("success") is True or payload.get("status") == "success"
