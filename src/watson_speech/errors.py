from typing import Dict, Optional


class WatsonError(Exception):
    """Base class for every error raised by the Watson REST clients."""

    default_message = "The Watson service returned an error."

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[dict] = None,
        resource_id: Optional[str] = None,
    ) -> None:
        if message is None:
            label = f" '{resource_id}'" if resource_id else ""
            message = self.default_message.format(resource_id=label)
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.resource_id = resource_id


class ServiceConnectionError(WatsonError, ConnectionError):
    """The request never produced an HTTP response (DNS, TLS, timeout, refused)."""

    default_message = "There was an error establishing the connection."


class NotModified(WatsonError):
    default_message = (
        "The requested resource has not been modified since the time specified "
        "by the If-Modified-Since header."
    )


class BadRequest(WatsonError):
    default_message = (
        "A required input parameter is null or a specified input parameter or "
        "header value is invalid or not supported."
    )


class ParameterValidationFailed(BadRequest):
    default_message = (
        "Parameter validation failed. Required parameters are missing or "
        "parameter values are invalid."
    )


class Unauthorized(WatsonError):
    default_message = "The specified identifier{resource_id} is invalid for the requesting credentials."


class InvalidApiKey(WatsonError):
    default_message = "The incoming request did not contain valid authentication information."


class NotAllowed(WatsonError):
    default_message = "The incoming request is valid but the user is not allowed to perform the requested action."


class NotFound(WatsonError):
    default_message = "The requested resource{resource_id} was not found."


class NotAcceptable(WatsonError):
    default_message = "The request specified an Accept header with an incompatible content type."


class UnsupportedMediaType(WatsonError):
    default_message = "The request specified an unacceptable media type."


class InternalServerError(WatsonError):
    default_message = "The service experienced an internal error."


class ServiceUnavailable(WatsonError):
    default_message = "The service is currently unavailable."


class UnmappedResponse(WatsonError):
    """The service answered with a status code the operation does not document."""

    def __init__(self, status_code: int, message: Optional[str] = None, **kwargs) -> None:
        if message is None:
            message = f"Unexpected response status {status_code}."
        super().__init__(message, status_code=status_code, **kwargs)


class FileReadError(WatsonError):
    default_message = "There was an error reading the upload file{resource_id}."


class ResponseDecodeError(WatsonError):
    default_message = "The service response could not be decoded."


STATUS_ERRORS: Dict[int, type] = {
    304: NotModified,
    400: BadRequest,
    401: Unauthorized,
    403: NotAllowed,
    404: NotFound,
    406: NotAcceptable,
    415: UnsupportedMediaType,
    500: InternalServerError,
    503: ServiceUnavailable,
}


def error_map(*statuses: int) -> Dict[int, type]:
    """Pick the documented error classes for an operation's status codes."""
    return {status: STATUS_ERRORS[status] for status in statuses}
