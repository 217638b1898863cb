"""
Account records.
"""

from datetime import datetime

from pydantic import Field

from twinemedia.models.base import Record


class Account(Record):
    id: int
    email: str
    name: str
    permissions: tuple[str, ...]
    is_admin: bool = Field(alias="admin")
    default_source: int
    default_source_type: str
    default_source_name: str
    files_created: int
    created_on: datetime = Field(alias="creation_date")


class SelfAccountInfo(Record):
    """The account the client is authenticated as."""

    id: int
    permissions: tuple[str, ...]
    name: str
    email: str
    is_admin: bool = Field(alias="admin")
    created_on: datetime = Field(alias="creation_date")
    exclude_tags: tuple[str, ...]
    exclude_other_media: bool
    exclude_other_lists: bool
    exclude_other_processes: bool
    exclude_other_sources: bool
    max_upload_size: int = Field(alias="max_upload")
    is_api_token: bool = Field(alias="api_token")
    default_source: int
