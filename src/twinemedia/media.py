"""
Media REST API: fetching, editing, deleting and uploading media files.
"""

from __future__ import annotations

import json
import logging
import mimetypes
import os
from typing import IO, Any, Optional, Sequence, Union
from urllib.parse import quote

from twinemedia.errors import MappingError
from twinemedia.mapping import elements, media_from_json
from twinemedia.models.enums import MediaOrder
from twinemedia.models.media import Media
from twinemedia.transport.http import HttpClient

DEFAULT_MIME = "application/octet-stream"

logger = logging.getLogger(__name__)


def upload_headers(
    name: Optional[str] = None,
    description: Optional[str] = None,
    tags: Optional[Sequence[str]] = None,
    no_thumbnail: bool = False,
    do_not_process: bool = False,
    ignore_hash: bool = False,
    source: Optional[int] = None,
) -> dict[str, str]:
    """Build the metadata headers for an upload.

    Free text is URL-encoded since header values must stay ASCII. Flags are
    only sent when set.
    """
    headers: dict[str, str] = {}
    if name is not None:
        headers["X-FILE-NAME"] = quote(name, safe="")
    if description is not None:
        headers["X-FILE-DESCRIPTION"] = quote(description, safe="")
    if tags is not None:
        headers["X-FILE-TAGS"] = quote(json.dumps(list(tags), separators=(",", ":")), safe="")
    if no_thumbnail:
        headers["X-NO-THUMBNAIL"] = "true"
    if do_not_process:
        headers["X-NO-PROCESS"] = "true"
    if ignore_hash:
        headers["X-IGNORE-HASH"] = "true"
    if source is not None:
        headers["X-MEDIA-SOURCE"] = str(source)
    return headers


class MediaAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    def _files(self, res: dict[str, Any]) -> list[Media]:
        return [media_from_json(m, self._http.root_url) for m in elements(res, "files")]

    async def get(self, media_id: str) -> Media:
        """Fetch one media file. Raises MediaNotFoundError if it does not exist."""
        return media_from_json(await self._http.get(f"/media/{media_id}"), self._http.root_url)

    async def list(
        self, offset: int = 0, limit: int = 100, mime: str = "%", order: MediaOrder = MediaOrder.CREATED_ON_DESC,
    ) -> list[Media]:
        """List media files. ``mime`` may use "%" as a wildcard."""
        return self._files(await self._http.get("/media", {
            "offset": offset,
            "limit": limit,
            "mime": mime,
            "order": order,
        }))

    async def search(
        self,
        query: str,
        search_names: bool = True,
        search_filenames: bool = True,
        search_descriptions: bool = True,
        search_tags: bool = True,
        offset: int = 0,
        limit: int = 100,
        mime: str = "%",
        order: MediaOrder = MediaOrder.CREATED_ON_DESC,
    ) -> list[Media]:
        """Plaintext search over the selected media fields."""
        return self._files(await self._http.get("/media/search", {
            "query": query,
            "searchNames": search_names,
            "searchFilenames": search_filenames,
            "searchDescriptions": search_descriptions,
            "searchTags": search_tags,
            "offset": offset,
            "limit": limit,
            "mime": mime,
            "order": order,
        }))

    async def by_tags(
        self,
        tags: Sequence[str],
        exclude_tags: Sequence[str] = (),
        offset: int = 0,
        limit: int = 100,
        mime: str = "%",
        order: MediaOrder = MediaOrder.CREATED_ON_DESC,
    ) -> list[Media]:
        """Media carrying all of ``tags`` and none of ``exclude_tags``."""
        return self._files(await self._http.get("/media/tags", {
            "tags": list(tags),
            "excludeTags": list(exclude_tags),
            "offset": offset,
            "limit": limit,
            "mime": mime,
            "order": order,
        }))

    async def by_list(
        self, list_id: str, offset: int = 0, limit: int = 100, order: MediaOrder = MediaOrder.CREATED_ON_DESC,
    ) -> list[Media]:
        return self._files(await self._http.get(f"/media/list/{list_id}", {
            "offset": offset,
            "limit": limit,
            "order": order,
        }))

    async def edit(
        self,
        media_id: str,
        name: Optional[str] = None,
        filename: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        creator: Optional[int] = None,
    ) -> None:
        """Edit a media file. Only the fields that are passed are changed."""
        await self._http.post(f"/media/{media_id}/edit", {
            "name": name,
            "filename": filename,
            "description": description,
            "tags": list(tags) if tags is not None else None,
            "creator": creator,
        })

    async def delete(self, media_id: str) -> None:
        await self._http.post(f"/media/{media_id}/delete")

    async def _upload(self, filename: str, content: Union[bytes, IO[bytes]], mime: str, **metadata: Any) -> str:
        res = await self._http.upload(filename, content, mime, upload_headers(**metadata))
        media_id = res.get("id")
        if not isinstance(media_id, str):
            raise MappingError("upload", 'upload response has no "id" string')
        logger.debug(f"Uploaded {filename} as {media_id}")
        return media_id

    async def upload_data(
        self,
        data: bytes,
        filename: str,
        mime: str,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        no_thumbnail: bool = False,
        do_not_process: bool = False,
        ignore_hash: bool = False,
        source: Optional[int] = None,
    ) -> str:
        """Upload in-memory content and return the new media file's ID."""
        return await self._upload(
            filename, data, mime,
            name=name, description=description, tags=tags,
            no_thumbnail=no_thumbnail, do_not_process=do_not_process,
            ignore_hash=ignore_hash, source=source,
        )

    async def upload_file(
        self,
        path: Union[str, os.PathLike[str]],
        filename: Optional[str] = None,
        mime: Optional[str] = None,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        no_thumbnail: bool = False,
        do_not_process: bool = False,
        ignore_hash: bool = False,
        source: Optional[int] = None,
    ) -> str:
        """Upload a file from disk and return the new media file's ID.

        The filename defaults to the path's basename and the MIME type is
        guessed from its extension, falling back to application/octet-stream.
        """
        fname = filename or os.path.basename(path)
        content_type = mime or mimetypes.guess_type(os.fspath(path))[0] or DEFAULT_MIME
        with open(path, "rb") as f:
            return await self._upload(
                fname, f, content_type,
                name=name, description=description, tags=tags,
                no_thumbnail=no_thumbnail, do_not_process=do_not_process,
                ignore_hash=ignore_hash, source=source,
            )
