"""
Auth module: exchanges an email and password for an API token.
"""

import logging

from twinemedia.errors import MappingError
from twinemedia.transport.http import HttpClient

logger = logging.getLogger(__name__)


class Auth:
    def __init__(self, http: HttpClient):
        self._http = http

    async def login(self, email: str, password: str) -> str:
        """Log in and store the returned token on the HTTP client.

        Raises InvalidCredentialsError when the service rejects the
        credentials.
        """
        result = await self._http.login(email, password)
        token = result.get("token")
        if not isinstance(token, str):
            raise MappingError("token", 'login response has no "token" string')
        self._http.set_token(token)
        logger.debug(f"Logged in to {self._http.root_url} as {email}")
        return token
