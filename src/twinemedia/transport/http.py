"""
REST HTTP client for TwineMedia: one authenticated request per call.

Every call opens its own httpx client and closes it before returning or
raising, so no connection outlives the call that made it (including when the
calling task is cancelled).
"""

import json
import logging
from datetime import datetime
from enum import Enum
from typing import IO, Any, Mapping, Optional, Union

import httpx

from twinemedia.errors import TransportError
from twinemedia.transport.response import Failure, classify_response, unwrap

API_PREFIX = "/api/v1"
USER_AGENT = "twinemedia-client/0.1.0"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

logger = logging.getLogger(__name__)


def encode_fields(data: Optional[Mapping[str, Any]]) -> dict[str, str]:
    """Flatten request fields to strings for a query string or form body.

    Strings are sent as-is and datetimes as ISO-8601. Anything else (bools,
    numbers, arrays, objects) is sent as compact JSON, which is how the
    service reads booleans and tag arrays. ``None`` values are left out.
    """
    fields: dict[str, str] = {}
    for key, value in (data or {}).items():
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, str):
            fields[key] = value
        elif isinstance(value, datetime):
            fields[key] = value.isoformat()
        else:
            fields[key] = json.dumps(value, separators=(",", ":"))
    return fields


class HttpClient:
    def __init__(
        self,
        root_url: str,
        token: str = "",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self._root_url = root_url.rstrip("/")
        self._token = token
        self._transport = transport
        self._timeout = timeout

    @property
    def root_url(self) -> str:
        return self._root_url

    @property
    def token(self) -> str:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token

    def url(self, path: str) -> str:
        return f"{self._root_url}{API_PREFIX}{path}"

    def _auth_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _open(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=self._timeout,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        )

    async def _send(self, method: str, path: str, *, login: bool = False, **kwargs: Any) -> dict[str, Any]:
        url = self.url(path)
        logger.debug(f"{method} {url}")
        try:
            async with self._open() as http:
                resp = await http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        result = classify_response(resp.status_code, resp.content, login=login)
        if isinstance(result, Failure):
            logger.debug(f"{method} {path} failed: {result.error.code}: {result.error}")
        return unwrap(result)

    async def get(self, path: str, data: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return await self._send("GET", path, params=encode_fields(data), headers=self._auth_headers())

    async def post(self, path: str, data: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        headers = {**self._auth_headers(), "Content-Type": FORM_CONTENT_TYPE}
        return await self._send("POST", path, data=encode_fields(data), headers=headers)

    async def request(self, method: str, path: str, data: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """Performs a request against a path under ``/api/v1`` (must start with "/")."""
        verb = method.upper()
        if verb == "GET":
            return await self.get(path, data)
        if verb == "POST":
            return await self.post(path, data)
        raise ValueError(f"Unsupported HTTP method: {method}")

    async def login(self, email: str, password: str) -> dict[str, Any]:
        """POST credentials as JSON to the auth endpoint. Sends no bearer token."""
        return await self._send(
            "POST", "/auth",
            login=True,
            json={"email": email, "password": password},
        )

    async def upload(
        self,
        filename: str,
        content: Union[bytes, IO[bytes]],
        mime: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> dict[str, Any]:
        """Multipart upload with a single ``file`` part. Metadata travels in ``headers``."""
        return await self._send(
            "POST", "/media/upload",
            files={"file": (filename, content, mime)},
            headers={**self._auth_headers(), **(headers or {})},
        )
