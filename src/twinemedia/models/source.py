"""
Source records: storage backends media files live in.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, JsonValue

from twinemedia.models.base import Record


class SourceInfo(Record):
    """Source as it appears in listings (no config or schema)."""

    id: int
    source_type: str = Field(alias="type")
    name: str
    creator_id: int = Field(alias="creator")
    creator_name: str
    is_global: bool = Field(alias="global")
    media_count: int
    created_on: datetime


class Source(SourceInfo):
    """Full source definition.

    ``config`` and ``config_schema`` are documents defined by the source type
    and are passed through untouched.
    """

    config: JsonValue
    config_schema: JsonValue = Field(alias="schema")
    remaining_storage: Optional[int] = None


class SourceType(Record):
    source_type: str = Field(alias="type")
    name: str
    description: str
    config_schema: JsonValue = Field(alias="schema")
