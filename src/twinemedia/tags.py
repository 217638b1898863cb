"""
Tags REST API.
"""

from __future__ import annotations

from twinemedia.mapping import elements, tag_from_json
from twinemedia.models.enums import TagOrder
from twinemedia.models.tag import Tag
from twinemedia.transport.http import HttpClient


class TagsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self, query: str = "", offset: int = 0, limit: int = 100, order: TagOrder = TagOrder.NAME_ASC,
    ) -> list[Tag]:
        """List tags, optionally matching ``query`` ("%" is a wildcard)."""
        res = await self._http.get("/tags", {
            "query": query,
            "offset": offset,
            "limit": limit,
            "order": order,
        })
        return [tag_from_json(t) for t in elements(res, "tags")]
