"""Request construction and connection handling."""

import asyncio
from datetime import datetime, timezone
from urllib.parse import parse_qs

import httpx
import pytest

from twinemedia import ApiError, BadStatusCodeError, MediaNotFoundError, TransportError, UnauthorizedError
from twinemedia.models.enums import ListType
from twinemedia.transport.http import HttpClient, encode_fields

from payloads import ROOT, error, ok


def _recording_client(response, token="tok"):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(response.status_code, content=response.content, headers=response.headers)

    http = HttpClient(ROOT + "/", token, transport=httpx.MockTransport(handler))
    return http, seen


def _track_clients(monkeypatch, http):
    opened = []
    original = http._open

    def _open():
        client = original()
        opened.append(client)
        return client

    monkeypatch.setattr(http, "_open", _open)
    return opened


def test_encode_fields():
    fields = encode_fields({
        "query": "cat photos",
        "limit": 10,
        "searchNames": True,
        "tags": ["a", "b"],
        "type": ListType.AUTOMATICALLY_POPULATED,
        "before": datetime(2022, 1, 1, tzinfo=timezone.utc),
        "creator": None,
    })
    assert fields == {
        "query": "cat photos",
        "limit": "10",
        "searchNames": "true",
        "tags": '["a","b"]',
        "type": "1",
        "before": "2022-01-01T00:00:00+00:00",
    }


@pytest.mark.asyncio
async def test_get_puts_fields_in_query_string():
    http, seen = _recording_client(ok(files=[]))
    result = await http.get("/media", {"offset": 0, "limit": 5, "mime": "image/%"})

    assert result == {"files": []}
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/api/v1/media"
    assert request.url.params["limit"] == "5"
    assert request.url.params["mime"] == "image/%"
    assert request.headers["Authorization"] == "Bearer tok"
    assert request.content == b""


@pytest.mark.asyncio
async def test_post_sends_form_body():
    http, seen = _recording_client(ok(id="l1"))
    await http.post("/lists/create", {"name": "Trip & stuff", "visibility": 1, "sourceTags": ["x"]})

    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == f"{ROOT}/api/v1/lists/create"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert request.headers["Authorization"] == "Bearer tok"
    assert not request.url.params
    form = parse_qs(request.content.decode())
    assert form == {"name": ["Trip & stuff"], "visibility": ["1"], "sourceTags": ['["x"]']}


@pytest.mark.asyncio
async def test_anonymous_requests_have_no_authorization():
    http, seen = _recording_client(ok(version="1.0", api_versions=["v1"]), token="")
    await http.get("/info")
    assert "Authorization" not in seen[0].headers


@pytest.mark.asyncio
async def test_request_dispatches_by_verb():
    http, seen = _recording_client(ok())
    await http.request("get", "/tasks")
    await http.request("POST", "/task/1/cancel")
    assert [r.method for r in seen] == ["GET", "POST"]
    with pytest.raises(ValueError):
        await http.request("DELETE", "/media/m1")


@pytest.mark.asyncio
@pytest.mark.parametrize("response, error_type", [
    (error("boom"), ApiError),
    (error("File does not exist"), MediaNotFoundError),
    (httpx.Response(401, text="nope"), UnauthorizedError),
    (httpx.Response(500), BadStatusCodeError),
])
async def test_errors_raise_after_connection_is_closed(monkeypatch, response, error_type):
    http, _ = _recording_client(response)
    opened = _track_clients(monkeypatch, http)

    with pytest.raises(error_type):
        await http.get("/media/m1")
    assert len(opened) == 1
    assert opened[0].is_closed


@pytest.mark.asyncio
async def test_each_call_uses_its_own_connection(monkeypatch):
    http, _ = _recording_client(ok())
    opened = _track_clients(monkeypatch, http)

    await asyncio.gather(http.get("/tasks"), http.get("/tasks"), http.post("/task/1/cancel"))
    assert len(opened) == 3
    assert all(c.is_closed for c in opened)


@pytest.mark.asyncio
async def test_transport_failure_is_wrapped(monkeypatch):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    http = HttpClient(ROOT, "tok", transport=httpx.MockTransport(handler))
    opened = _track_clients(monkeypatch, http)

    with pytest.raises(TransportError) as exc_info:
        await http.get("/info")
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert opened[0].is_closed


@pytest.mark.asyncio
async def test_cancelled_call_releases_connection(monkeypatch):
    started = asyncio.Event()

    async def slow_handler(request):
        started.set()
        await asyncio.sleep(10)
        return ok()

    http = HttpClient(ROOT, "tok", transport=httpx.MockTransport(slow_handler))
    opened = _track_clients(monkeypatch, http)

    call = asyncio.ensure_future(http.get("/tasks"))
    await started.wait()
    call.cancel()
    with pytest.raises(asyncio.CancelledError):
        await call
    assert opened[0].is_closed
