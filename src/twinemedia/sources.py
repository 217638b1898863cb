"""
Sources REST API.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import JsonValue

from twinemedia.errors import MappingError
from twinemedia.mapping import elements, source_from_json, source_info_from_json, source_type_from_json
from twinemedia.models.enums import SourceOrder
from twinemedia.models.source import Source, SourceInfo, SourceType
from twinemedia.transport.http import HttpClient


class SourcesAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self,
        creator: Optional[int] = None,
        query: Optional[str] = None,
        offset: int = 0,
        limit: int = 100,
        order: SourceOrder = SourceOrder.CREATED_ON_DESC,
    ) -> list[SourceInfo]:
        """List sources, optionally by creator and/or plaintext query."""
        res = await self._http.get("/sources", {
            "offset": offset,
            "limit": limit,
            "order": order,
            "creator": creator,
            "query": query,
        })
        return [source_info_from_json(s) for s in elements(res, "sources")]

    async def get(self, source_id: int) -> Source:
        return source_from_json(await self._http.get(f"/source/{source_id}"))

    async def types(self) -> list[SourceType]:
        """List the source types the instance supports."""
        res = await self._http.get("/sources/types")
        return [source_type_from_json(t) for t in elements(res, "types")]

    async def get_type(self, source_type: str) -> SourceType:
        return source_type_from_json(await self._http.get(f"/sources/type/{source_type}"))

    async def create(
        self, name: str, source_type: str, config: JsonValue, test_config: bool = True, is_global: bool = False,
    ) -> int:
        """Create a source and return its ID.

        With ``test_config`` the service checks the config against the
        backend before saving it.
        """
        res = await self._http.post("/sources/create", {
            "name": name,
            "type": source_type,
            "config": config,
            "test": test_config,
            "global": is_global,
        })
        source_id = res.get("id")
        if not isinstance(source_id, int):
            raise MappingError("source", 'create response has no integer "id"')
        return source_id

    async def edit(
        self,
        source_id: int,
        name: Optional[str] = None,
        config: Optional[JsonValue] = None,
        creator: Optional[int] = None,
        is_global: Optional[bool] = None,
        test_config: bool = False,
        force_edit: bool = False,
    ) -> None:
        body: dict[str, Any] = {
            "test": test_config,
            "forceEdit": force_edit,
            "name": name,
            "config": config,
            "creator": creator,
            "global": is_global,
        }
        await self._http.post(f"/source/{source_id}/edit", body)

    async def delete(self, source_id: int, force_delete: bool = False, delete_contents: bool = False) -> None:
        """Delete a source. ``delete_contents`` also deletes its media files."""
        await self._http.post(f"/source/{source_id}/delete", {
            "forceDelete": force_delete,
            "deleteContents": delete_contents,
        })
