"""Response classification."""

import json

import pytest

from twinemedia.errors import (
    ApiError,
    BadStatusCodeError,
    InvalidCredentialsError,
    InvalidResponseError,
    MediaNotFoundError,
    UnauthorizedError,
    UnknownStatusError,
)
from twinemedia.transport.response import Failure, Success, classify_response, unwrap


def _body(**envelope):
    return json.dumps(envelope).encode()


def test_success_strips_status():
    result = classify_response(200, _body(status="success", id="x"))
    assert result == Success({"id": "x"})
    assert unwrap(result) == {"id": "x"}


def test_media_not_found():
    result = classify_response(200, _body(status="error", error="File does not exist"))
    assert isinstance(result, Failure)
    assert isinstance(result.error, MediaNotFoundError)


def test_generic_error():
    result = classify_response(200, _body(status="error", error="boom"))
    assert isinstance(result.error, ApiError)
    assert result.error.error_message == "boom"


def test_error_without_message():
    result = classify_response(200, _body(status="error"))
    assert isinstance(result.error, ApiError)
    assert result.error.error_message == "No error field in response"


def test_unknown_status():
    result = classify_response(200, _body(status="weird"))
    assert isinstance(result.error, UnknownStatusError)
    assert result.error.status == "weird"


@pytest.mark.parametrize("body", [b"", b"not json", _body(status="success")])
def test_unauthorized_ignores_body(body):
    result = classify_response(401, body)
    assert isinstance(result.error, UnauthorizedError)


@pytest.mark.parametrize("code", [500, 404, 403, 201])
def test_bad_status_code(code):
    result = classify_response(code, _body(status="success"))
    assert isinstance(result.error, BadStatusCodeError)
    assert result.error.status_code == code


def test_non_json_body():
    result = classify_response(200, b"<html>")
    assert isinstance(result.error, InvalidResponseError)


def test_non_object_body():
    result = classify_response(200, b"[1, 2]")
    assert isinstance(result.error, InvalidResponseError)


def test_invalid_prefix_only_special_for_login():
    body = _body(status="error", error="Invalid email or password")
    assert isinstance(classify_response(200, body, login=True).error, InvalidCredentialsError)
    assert isinstance(classify_response(200, body).error, ApiError)


def test_login_other_errors_stay_generic():
    result = classify_response(200, _body(status="error", error="Too many attempts"), login=True)
    assert isinstance(result.error, ApiError)


def test_unwrap_raises_carried_error():
    with pytest.raises(ApiError, match="boom"):
        unwrap(classify_response(200, _body(status="error", error="boom")))
