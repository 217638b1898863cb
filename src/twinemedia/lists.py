"""
Lists REST API: standard and automatically populated media lists.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from twinemedia.errors import MappingError
from twinemedia.mapping import elements, list_from_json
from twinemedia.models.enums import ListOrder, ListType, ListVisibility
from twinemedia.models.media_list import MediaList
from twinemedia.transport.http import HttpClient


def _automatic_fields(
    source_tags: Optional[Sequence[str]],
    source_exclude_tags: Optional[Sequence[str]],
    source_created_before: Optional[datetime],
    source_created_after: Optional[datetime],
    source_mime: Optional[str],
    show_all_user_files: Optional[bool],
) -> dict[str, Any]:
    return {
        "sourceTags": list(source_tags) if source_tags is not None else None,
        "sourceExcludeTags": list(source_exclude_tags) if source_exclude_tags is not None else None,
        "sourceCreatedBefore": source_created_before,
        "sourceCreatedAfter": source_created_after,
        "sourceMime": source_mime,
        "showAllUserFiles": show_all_user_files,
    }


class ListsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def get(self, list_id: str) -> MediaList:
        return list_from_json(await self._http.get(f"/list/{list_id}"))

    async def list(
        self,
        list_type: Optional[ListType] = None,
        contains_media: Optional[str] = None,
        offset: int = 0,
        limit: int = 100,
        order: ListOrder = ListOrder.CREATED_ON_DESC,
    ) -> list[MediaList]:
        """List lists, optionally of one type.

        When ``contains_media`` is a media ID, each returned list reports
        whether it contains that file.
        """
        res = await self._http.get("/lists", {
            "offset": offset,
            "limit": limit,
            "order": order,
            "type": list_type,
            "media": contains_media,
        })
        return [list_from_json(lst) for lst in elements(res, "lists")]

    async def search(
        self,
        query: str,
        search_names: bool = True,
        search_descriptions: bool = True,
        list_type: Optional[ListType] = None,
        contains_media: Optional[str] = None,
        offset: int = 0,
        limit: int = 100,
        order: ListOrder = ListOrder.CREATED_ON_DESC,
    ) -> list[MediaList]:
        res = await self._http.get("/lists/search", {
            "query": query,
            "searchNames": search_names,
            "searchDescriptions": search_descriptions,
            "offset": offset,
            "limit": limit,
            "order": order,
            "type": list_type,
            "media": contains_media,
        })
        return [list_from_json(lst) for lst in elements(res, "lists")]

    async def _create(self, body: dict[str, Any]) -> str:
        res = await self._http.post("/lists/create", body)
        list_id = res.get("id")
        if not isinstance(list_id, str):
            raise MappingError("list", 'create response has no "id" string')
        return list_id

    async def create_standard(self, name: str, description: str, visibility: ListVisibility) -> str:
        """Create a standard list and return its ID."""
        return await self._create({
            "type": ListType.STANDARD,
            "name": name,
            "description": description,
            "visibility": visibility,
        })

    async def create_automatically_populated(
        self,
        name: str,
        description: str,
        visibility: ListVisibility,
        source_tags: Optional[Sequence[str]] = None,
        source_exclude_tags: Optional[Sequence[str]] = None,
        source_created_before: Optional[datetime] = None,
        source_created_after: Optional[datetime] = None,
        source_mime: Optional[str] = None,
        show_all_user_files: Optional[bool] = None,
    ) -> str:
        """Create a list populated from the given criteria and return its ID."""
        return await self._create({
            "type": ListType.AUTOMATICALLY_POPULATED,
            "name": name,
            "description": description,
            "visibility": visibility,
            **_automatic_fields(
                source_tags, source_exclude_tags, source_created_before,
                source_created_after, source_mime, show_all_user_files,
            ),
        })

    async def edit_as_standard(self, list_id: str, name: str, description: str, visibility: ListVisibility) -> None:
        """Edit a list as a standard list. Converts automatically populated lists."""
        await self._http.post(f"/list/{list_id}/edit", {
            "type": ListType.STANDARD,
            "name": name,
            "description": description,
            "visibility": visibility,
        })

    async def edit_as_automatically_populated(
        self,
        list_id: str,
        name: str,
        description: str,
        visibility: ListVisibility,
        source_tags: Optional[Sequence[str]] = None,
        source_exclude_tags: Optional[Sequence[str]] = None,
        source_created_before: Optional[datetime] = None,
        source_created_after: Optional[datetime] = None,
        source_mime: Optional[str] = None,
        show_all_user_files: Optional[bool] = None,
    ) -> None:
        """Edit a list as an automatically populated list. Converts standard lists."""
        await self._http.post(f"/list/{list_id}/edit", {
            "type": ListType.AUTOMATICALLY_POPULATED,
            "name": name,
            "description": description,
            "visibility": visibility,
            **_automatic_fields(
                source_tags, source_exclude_tags, source_created_before,
                source_created_after, source_mime, show_all_user_files,
            ),
        })

    async def delete(self, list_id: str) -> None:
        await self._http.post(f"/list/{list_id}/delete")

    async def add_media(self, list_id: str, media_id: str) -> None:
        await self._http.post(f"/list/{list_id}/add/{media_id}")

    async def remove_media(self, list_id: str, media_id: str) -> None:
        await self._http.post(f"/list/{list_id}/remove/{media_id}")
