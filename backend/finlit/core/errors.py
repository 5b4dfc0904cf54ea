"""
Service Error Taxonomy

Every failure the pipeline can surface to a caller is one of these.
The public message is deliberately generic; detailed context belongs in
the server log, never in the response body.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for failures rendered as a structured {error, details?} body."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, detail: str | None = None, details=None):
        super().__init__(detail or self.message)
        self.detail = detail or self.message
        self.details = details


class StoreUnavailable(ServiceError):
    """The knowledge, question or progress store could not be reached."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Storage is temporarily unavailable"


class GenerativeUnavailable(ServiceError):
    """The language-model endpoint returned a non-success response."""

    status_code = status.HTTP_502_BAD_GATEWAY
    message = "The AI service is temporarily unavailable"

    def __init__(self, detail: str | None = None, upstream_status: int | None = None):
        super().__init__(detail)
        self.upstream_status = upstream_status


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ValidationError(ServiceError):
    """Missing or invalid request fields, raised before any external call."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"
