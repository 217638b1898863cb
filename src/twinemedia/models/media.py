"""
Media file record.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, ValidationInfo, model_validator

from twinemedia.models.base import Record
from twinemedia.urls import download_url, thumbnail_url


class Media(Record):
    """A media file.

    ``parent`` holds at most one element: it is empty when the file has no
    parent and otherwise contains exactly the parent file. ``children`` keeps
    the order the service returned them in.

    ``thumbnail_url`` is always filled in, but only resolves when
    ``has_thumbnail`` is true.
    """

    id: str
    name: str
    filename: str
    creator_id: int = Field(alias="creator")
    creator_name: str
    size: int
    mime: str
    created_on: datetime
    modified_on: datetime
    file_hash: str
    has_thumbnail: bool = Field(alias="thumbnail")
    thumbnail_url: str
    download_url: str
    tags: tuple[str, ...]
    is_processing: bool = Field(alias="processing")
    process_error: Optional[str] = None
    description: Optional[str] = None
    source_id: Optional[int] = Field(default=None, alias="source")
    source_type: Optional[str] = None
    source_name: Optional[str] = None
    parent: tuple["Media", ...] = ()
    children: tuple["Media", ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _derive_fields(cls, data: Any, info: ValidationInfo) -> Any:
        """Fill in URLs from the ID and wrap ``parent`` as a sequence.

        The root URL comes from the validation context (``root_url``).
        """
        if not isinstance(data, dict):
            return data
        media_id = data.get("id")
        if not isinstance(media_id, str):
            return data

        root_url = (info.context or {}).get("root_url", "")
        derived = dict(data)
        derived["thumbnail_url"] = thumbnail_url(root_url, media_id)
        derived["download_url"] = download_url(root_url, media_id, data.get("filename") or "")

        parent = data.get("parent")
        derived["parent"] = [] if parent is None else [parent]
        derived["children"] = data.get("children") or []
        return derived
