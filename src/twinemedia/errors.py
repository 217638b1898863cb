"""
TwineMedia error types: one class per way a call can fail.
"""

from typing import Any, Optional


class TwineMediaError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ApiError(TwineMediaError):
    """The service answered with an "error" envelope."""

    def __init__(self, message: str, code: str = "api_error"):
        super().__init__(code, f'API returned error "{message}"', {"error": message})
        self.error_message = message


class MediaNotFoundError(TwineMediaError):
    def __init__(self, message: str = "File does not exist"):
        super().__init__("media_not_found", message)


class InvalidCredentialsError(TwineMediaError):
    """Login rejected the email/password pair."""

    def __init__(self, message: str):
        super().__init__("invalid_credentials", message)


class UnknownStatusError(TwineMediaError):
    def __init__(self, status: Any):
        super().__init__("unknown_status", f'API returned unknown status "{status}"', {"status": status})
        self.status = status


class UnauthorizedError(TwineMediaError):
    def __init__(self) -> None:
        super().__init__("unauthorized", "API returned Unauthorized (HTTP status 401)")


class BadStatusCodeError(TwineMediaError):
    def __init__(self, status_code: int):
        super().__init__("bad_status_code", f"API returned HTTP status {status_code}", {"status_code": status_code})
        self.status_code = status_code


class InvalidResponseError(TwineMediaError):
    """A 200 response whose body is not a JSON object."""

    def __init__(self, message: str):
        super().__init__("invalid_response", message)


class MappingError(TwineMediaError):
    """A payload could not be shaped into a record (missing field, unknown enum value)."""

    def __init__(self, entity: str, message: str):
        super().__init__("mapping_error", f"Cannot map {entity}: {message}", {"entity": entity})
        self.entity = entity


class TransportError(TwineMediaError):
    def __init__(self, message: str):
        super().__init__("transport_error", message)
