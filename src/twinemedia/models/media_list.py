"""
Media list record.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from twinemedia.models.base import Record
from twinemedia.models.enums import ListType, ListVisibility


class MediaList(Record):
    """A list of media files.

    The ``source_*`` and ``show_all_user_files`` criteria are only set on
    automatically populated lists. ``item_count`` and ``contains_media`` are
    only set when the endpoint computed them.
    """

    id: str
    name: str
    description: str
    creator_id: int = Field(alias="creator")
    creator_name: str
    list_type: ListType = Field(alias="type")
    visibility: ListVisibility
    created_on: datetime
    modified_on: datetime
    source_tags: Optional[tuple[str, ...]] = None
    source_exclude_tags: Optional[tuple[str, ...]] = None
    source_created_before: Optional[datetime] = None
    source_created_after: Optional[datetime] = None
    source_mime: Optional[str] = None
    show_all_user_files: Optional[bool] = None
    item_count: Optional[int] = None
    contains_media: Optional[bool] = None

    @field_validator("item_count", mode="before")
    @classmethod
    def _negative_count_is_absent(cls, value: Any) -> Any:
        # The service reports an uncounted list as -1
        if isinstance(value, int) and not isinstance(value, bool) and value < 0:
            return None
        return value
