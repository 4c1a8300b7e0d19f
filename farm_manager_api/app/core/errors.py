"""
Error taxonomy shared by storage backends and entity services.

Storage backends raise these exceptions; entity services pass them
through unchanged and the HTTP layer maps each kind to a status code
(see ``main.py``).  ``InvalidArgument`` derives from ``ValueError`` so
callers that only know about the built-in type still catch it.
"""

from typing import Optional


class FarmServiceError(Exception):
    """Base class for every failure raised by the service core."""

    kind = "error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgument(FarmServiceError, ValueError):
    """An id or required value could not be parsed before any I/O."""

    kind = "invalid_argument"


class NotFound(FarmServiceError):
    """The backend holds no record with the requested id."""

    kind = "not_found"

    def __init__(self, table: str, record_id) -> None:
        self.table = table
        self.record_id = record_id
        super().__init__(f"Record {record_id} not found in {table}")


class RequestFailed(FarmServiceError):
    """The backend rejected the call (auth, malformed request, server error)."""

    kind = "request_failed"

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class PartialFailure(FarmServiceError):
    """A batch call reported success overall but some records failed.

    ``failed`` is the number of failed entries, ``total`` the size of
    the batch and ``detail`` the message of the first failure.
    """

    kind = "partial_failure"

    def __init__(self, action: str, failed: int, total: int, detail: str) -> None:
        self.action = action
        self.failed = failed
        self.total = total
        self.detail = detail
        super().__init__(f"Failed to {action} {failed} of {total} records: {detail}")


class BackendUnavailable(FarmServiceError):
    """Transport-level failure: the backend could not be reached."""

    kind = "backend_unavailable"
