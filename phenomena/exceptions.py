"""Application exceptions mapped to HTTP error responses."""

from typing import Any, Optional

from fastapi import status


class BaseAPIException(Exception):
    """Base class for errors that carry their own HTTP status and error code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class ResourceNotFoundError(BaseAPIException):
    """Referenced resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "RESOURCE_NOT_FOUND"

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        message: Optional[str] = None,
    ):
        super().__init__(
            message or f"{resource_type} not found: {resource_id}",
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class ReportNotFoundError(ResourceNotFoundError):
    def __init__(self, report_id: int, message: str = "Report does not exist with that id"):
        super().__init__("Report", str(report_id), message=message)


class UnauthorizedError(BaseAPIException):
    """Caller failed to prove it may perform the operation."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "UNAUTHORIZED"


class IncorrectPasswordError(UnauthorizedError):
    error_code = "INCORRECT_PASSWORD"

    def __init__(self, report_id: int):
        super().__init__(
            "Password incorrect for this report, please try again",
            details={"report_id": report_id},
        )


class ConflictError(BaseAPIException):
    """Operation is not allowed in the resource's current state."""

    status_code = status.HTTP_409_CONFLICT
    error_code = "CONFLICT"


class DatabaseError(BaseAPIException):
    """Storage failed, or a write lost a race with a concurrent request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "DATABASE_ERROR"
