"""
Exception taxonomy.

- ValidationError: local, pre-submission; never reaches the network
- ServerRejection: the backend answered without success
- NetworkError: no response was received
- UnexpectedError: everything else (bad JSON, missing fields)
"""

from typing import Iterable, List, Optional

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred. Please try again."
NETWORK_ERROR_MESSAGE = "Network error. Please check your connection."


class DMSError(Exception):
    """Base class for every error raised by legasi_dms."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


class ValidationError(DMSError):
    """Input rejected before submission."""

    def __init__(self, problems, separator: str = ". "):
        if isinstance(problems, str):
            problems = [problems]
        self.problems: List[str] = list(problems)
        super().__init__(separator.join(self.problems))


class InvalidTransition(DMSError):
    """A wizard event arrived in a state that cannot accept it."""


class ApiRequestError(DMSError):
    """A backend call failed; ``error`` holds the details."""

    def __init__(self, error):
        super().__init__(error.message)
        self.error = error

    @property
    def status_code(self) -> Optional[int]:
        return self.error.status_code


class ServerRejection(ApiRequestError):
    """Transport succeeded but the server did not report success."""


class AuthenticationError(ServerRejection):
    """Login failed: bad credentials, network trouble or a malformed reply."""

    @classmethod
    def from_message(cls, message: str) -> "AuthenticationError":
        from legasi_dms.domain.result import ApiError, ErrorKind
        return cls(ApiError(kind=ErrorKind.REJECTED, message=message))


class NetworkError(ApiRequestError):
    """No response received from the backend."""


class UnexpectedError(ApiRequestError):
    """Unexpected failure talking to the backend."""

    @classmethod
    def from_message(cls, message: str = DEFAULT_ERROR_MESSAGE) -> "UnexpectedError":
        from legasi_dms.domain.result import ApiError, ErrorKind
        return cls(ApiError(kind=ErrorKind.UNEXPECTED, message=message))


class UploadError(DMSError):
    """One or more media uploads failed; already uploaded files are kept."""

    def __init__(self, failures: Iterable[str]):
        self.failures: List[str] = list(failures)
        super().__init__("; ".join(self.failures) or "Upload failed")
