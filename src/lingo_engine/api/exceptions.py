"""
Localization API Exceptions

This module contains exception classes for the localization engine.
Separated to avoid circular imports between the client, the config
validation and the orchestrator.
"""


class LocalizationError(Exception):
    """Localization engine error with optional code and details."""

    code_default = "localization_error"
    http_status = 500

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        self.code = code or self.code_default
        self.details = details or {}


class ConfigValidationError(LocalizationError):
    """Missing or invalid engine configuration or localization parameters."""

    code_default = "config_invalid"
    http_status = 400


class ServerError(LocalizationError):
    """The remote service answered with a 5xx status. Safe to retry."""

    code_default = "server_error"
    http_status = 502

    def __init__(self, status_code: int, status_text: str, body: str = "", message: str = None):
        if message is None:
            detail = f" {body}." if body else ""
            message = (
                f"Server error ({status_code}): {status_text}.{detail} "
                "This may be due to temporary service issues."
            )
        super().__init__(
            message,
            details={"status_code": status_code, "status_text": status_text, "body": body},
        )
        self.status_code = status_code
        self.status_text = status_text
        self.body = body


class InvalidRequestError(LocalizationError):
    """The remote service rejected the request with HTTP 400."""

    code_default = "invalid_request"
    http_status = 400

    def __init__(self, status_text: str):
        super().__init__(f"Invalid request: {status_text}", details={"status_text": status_text})
        self.status_text = status_text


class RemoteRejectedError(LocalizationError):
    """The remote service reported an error inside a successful response envelope."""

    code_default = "remote_rejected"


class UnknownHttpError(LocalizationError):
    """Any other non-2xx response; the message is the raw response body."""

    code_default = "unknown_http_error"

    def __init__(self, status_code: int, body: str):
        super().__init__(body or f"HTTP {status_code}", details={"status_code": status_code, "body": body})
        self.status_code = status_code
        self.body = body


class RecognitionError(LocalizationError):
    """Locale recognition failed with a non-5xx status."""

    code_default = "recognition_failed"


class TransportError(LocalizationError):
    """The request never produced an HTTP response (network failure or timeout)."""

    code_default = "transport_error"
    http_status = 502


class LocalizationCancelled(LocalizationError):
    """The caller's cancellation signal fired before or during a request."""

    code_default = "cancelled"
    http_status = 408

    def __init__(self, message: str = "The operation was aborted", details: dict = None):
        super().__init__(message, details=details)
