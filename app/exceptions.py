from typing import Any, List, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors that map onto a JSON error response.

    Attributes:
        error: short error title, returned as ``error`` in the response body
        message: human-readable message
        details: optional mapping merged into the response body
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_error = "Server error"
    default_message = "An unexpected error occurred. Please try again."

    def __init__(
        self,
        message: Optional[str] = None,
        error: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.error = error or self.default_error
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.error, "message": self.message}
        if self.details:
            payload.update(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met.

    http_status is 400.
    """

    http_status = 400
    default_error = "Invalid request"
    default_message = "Invalid input"


class NotFoundError(ServiceError):
    """Raised when a search produced no recipes.

    Carries the list of ingredients the client may retry with. http_status is 404.
    """

    http_status = 404
    default_error = "No recipes found"
    default_message = "Not found"

    def __init__(
        self,
        message: Optional[str] = None,
        suggestions: Optional[List[str]] = None,
        error: Optional[str] = None,
    ):
        self.suggestions = list(suggestions or [])
        details = {"suggestions": self.suggestions} if suggestions is not None else None
        super().__init__(message, error=error, details=details)


class UpstreamServiceError(ServiceError):
    """Raised when TheMealDB could not be reached or returned an unusable response.

    http_status is 500.
    """

    http_status = 500
    default_error = "Upstream request failed"
    default_message = "The recipe database could not be reached"


class UnexpectedServiceError(ServiceError):
    """Raised for any failure that is not otherwise classified. http_status is 500."""

    http_status = 500
