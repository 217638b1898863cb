"""
AsyncTwineMedia: main SDK client.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import httpx

from twinemedia.accounts import AccountsAPI
from twinemedia.auth import Auth
from twinemedia.lists import ListsAPI
from twinemedia.mapping import instance_info_from_json, self_account_info_from_json
from twinemedia.media import MediaAPI
from twinemedia.models.account import SelfAccountInfo
from twinemedia.models.tag import InstanceInfo
from twinemedia.permissions import has_permission
from twinemedia.sources import SourcesAPI
from twinemedia.tags import TagsAPI
from twinemedia.tasks import TasksAPI
from twinemedia.transport.http import HttpClient
from twinemedia.urls import download_url, thumbnail_url

logger = logging.getLogger(__name__)


class AsyncTwineMedia:
    """Async TwineMedia client.

    Holds the instance's root URL, the API token (empty for anonymous
    clients) and, once ``fetch_self_account_info()`` has been awaited, the
    account the token belongs to. Every call opens and closes its own
    connection, so one client can be shared by any number of tasks.

    Usage:
        client = await AsyncTwineMedia.from_credentials(url, email, password)
        await client.fetch_self_account_info()
        if client.has_permission("upload"):
            media_id = await client.media.upload_file("photo.png")
    """

    def __init__(
        self,
        root_url: str,
        token: str = "",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.http = HttpClient(root_url, token, transport=transport, timeout=timeout)
        self.account: Optional[SelfAccountInfo] = None

        self.auth = Auth(self.http)
        self.media = MediaAPI(self.http)
        self.tags = TagsAPI(self.http)
        self.lists = ListsAPI(self.http)
        self.sources = SourcesAPI(self.http)
        self.accounts = AccountsAPI(self.http)
        self.tasks = TasksAPI(self.http)

    @classmethod
    def from_token(cls, root_url: str, token: str, **kwargs: Any) -> AsyncTwineMedia:
        """Client for an existing token. Does not fetch account info."""
        client = cls(root_url, token, **kwargs)
        logger.debug(f"Created client for {client.root_url}")
        return client

    @classmethod
    def anonymous(cls, root_url: str, **kwargs: Any) -> AsyncTwineMedia:
        """Client without a token, limited to anonymous calls such as ``fetch_instance_info()``."""
        return cls.from_token(root_url, "", **kwargs)

    @classmethod
    async def from_credentials(cls, root_url: str, email: str, password: str, **kwargs: Any) -> AsyncTwineMedia:
        """Log in with email and password. Does not fetch account info.

        Raises InvalidCredentialsError when the credentials are rejected.
        """
        client = cls.from_token(root_url, "", **kwargs)
        await client.auth.login(email, password)
        return client

    @property
    def root_url(self) -> str:
        return self.http.root_url

    @property
    def token(self) -> str:
        return self.http.token

    def has_permission(self, permission: str) -> bool:
        """Whether this client's account holds ``permission``.

        Requires ``fetch_self_account_info()`` to have been awaited at least
        once. Before that there is no account info and the check runs against
        no permissions, so it returns False.
        """
        if self.account is not None and self.account.is_admin:
            return True
        granted: Sequence[str] = self.account.permissions if self.account is not None else ()
        return has_permission(granted, permission)

    def id_to_download_url(self, media_id: str, filename: str = "") -> str:
        return download_url(self.root_url, media_id, filename)

    def id_to_thumbnail_url(self, media_id: str) -> str:
        return thumbnail_url(self.root_url, media_id)

    async def fetch_self_account_info(self) -> SelfAccountInfo:
        """Fetch this client's account and store it on ``account``.

        Concurrent calls race; the last response to arrive wins.
        """
        account = self_account_info_from_json(await self.http.get("/account/info"))
        self.account = account
        return account

    async def fetch_instance_info(self) -> InstanceInfo:
        return instance_info_from_json(await self.http.get("/info"))

    async def edit_self_account(
        self,
        current_password: Optional[str] = None,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        default_source: Optional[int] = None,
        exclude_tags: Optional[Sequence[str]] = None,
        exclude_other_media: Optional[bool] = None,
        exclude_other_lists: Optional[bool] = None,
        exclude_other_tags: Optional[bool] = None,
        exclude_other_processes: Optional[bool] = None,
        exclude_other_sources: Optional[bool] = None,
    ) -> None:
        """Edit this client's account. ``current_password`` is required to change email or password.

        Does not refresh ``account``; call ``fetch_self_account_info()`` for that.
        """
        await self.http.post("/account/self/edit", {
            "currentPassword": current_password,
            "name": name,
            "email": email,
            "password": password,
            "defaultSource": default_source,
            "excludeTags": list(exclude_tags) if exclude_tags is not None else None,
            "excludeOtherMedia": exclude_other_media,
            "excludeOtherLists": exclude_other_lists,
            "excludeOtherTags": exclude_other_tags,
            "excludeOtherProcesses": exclude_other_processes,
            "excludeOtherSources": exclude_other_sources,
        })
