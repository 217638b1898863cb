"""
Response classification: turns an HTTP status and body into a result.

Every service response is an envelope ``{"status": "success" | "error", ...}``.
``classify_response`` never raises: it returns ``Success`` with the envelope
minus its ``status`` field, or ``Failure`` carrying the error the call should
fail with. ``unwrap`` is where that error is raised.
"""

import json
from dataclasses import dataclass
from typing import Any, Union

from twinemedia.errors import (
    ApiError,
    BadStatusCodeError,
    InvalidCredentialsError,
    InvalidResponseError,
    MediaNotFoundError,
    TwineMediaError,
    UnauthorizedError,
    UnknownStatusError,
)

MEDIA_NOT_FOUND_MESSAGE = "File does not exist"
MISSING_ERROR_MESSAGE = "No error field in response"


@dataclass(frozen=True)
class Success:
    payload: dict[str, Any]


@dataclass(frozen=True)
class Failure:
    error: TwineMediaError


ApiResult = Union[Success, Failure]


def classify_response(status_code: int, body: Union[bytes, str], *, login: bool = False) -> ApiResult:
    """Classify a raw response.

    With ``login=True`` an error message starting with "Invalid" becomes
    InvalidCredentialsError; the auth endpoint reports rejected credentials
    the same way it reports any other error.
    """
    if status_code == 401:
        return Failure(UnauthorizedError())
    if status_code != 200:
        return Failure(BadStatusCodeError(status_code))

    try:
        envelope = json.loads(body)
    except ValueError as e:
        return Failure(InvalidResponseError(f"Response body is not JSON: {e}"))
    if not isinstance(envelope, dict):
        return Failure(InvalidResponseError(f"Expected a JSON object, got {type(envelope).__name__}"))

    status = envelope.get("status")
    if status == "success":
        return Success({k: v for k, v in envelope.items() if k != "status"})
    if status == "error":
        message = envelope.get("error")
        if not isinstance(message, str):
            message = MISSING_ERROR_MESSAGE
        if message == MEDIA_NOT_FOUND_MESSAGE:
            return Failure(MediaNotFoundError(message))
        if login and message.startswith("Invalid"):
            return Failure(InvalidCredentialsError(message))
        return Failure(ApiError(message))
    return Failure(UnknownStatusError(status))


def unwrap(result: ApiResult) -> dict[str, Any]:
    """Returns the success payload or raises the classified error."""
    if isinstance(result, Failure):
        raise result.error
    return result.payload
