"""
Accounts REST API (other accounts; the client's own account lives on the client).
"""

from __future__ import annotations

from typing import Optional, Sequence

from twinemedia.errors import MappingError
from twinemedia.mapping import account_from_json, elements
from twinemedia.models.account import Account
from twinemedia.models.enums import AccountOrder
from twinemedia.transport.http import HttpClient


class AccountsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self,
        query: Optional[str] = None,
        offset: int = 0,
        limit: int = 100,
        order: AccountOrder = AccountOrder.CREATED_ON_DESC,
    ) -> list[Account]:
        res = await self._http.get("/accounts", {
            "offset": offset,
            "limit": limit,
            "order": order,
            "query": query,
        })
        return [account_from_json(a) for a in elements(res, "accounts")]

    async def get(self, account_id: int) -> Account:
        return account_from_json(await self._http.get(f"/account/{account_id}"))

    async def create(
        self,
        name: str,
        email: str,
        is_admin: bool,
        permissions: Sequence[str],
        password: str,
        default_source: int,
    ) -> int:
        """Create an account and return its ID."""
        res = await self._http.post("/accounts/create", {
            "name": name,
            "email": email,
            "admin": is_admin,
            "permissions": list(permissions),
            "password": password,
            "defaultSource": default_source,
        })
        account_id = res.get("id")
        if not isinstance(account_id, int):
            raise MappingError("account", 'create response has no integer "id"')
        return account_id

    async def edit(
        self,
        account_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None,
        permissions: Optional[Sequence[str]] = None,
        is_admin: Optional[bool] = None,
        password: Optional[str] = None,
        default_source: Optional[int] = None,
    ) -> None:
        await self._http.post(f"/account/{account_id}/edit", {
            "name": name,
            "email": email,
            "permissions": list(permissions) if permissions is not None else None,
            "admin": is_admin,
            "password": password,
            "defaultSource": default_source,
        })

    async def delete(self, account_id: int) -> None:
        await self._http.post(f"/account/{account_id}/delete")
