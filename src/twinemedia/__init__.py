"""
twinemedia-client: TwineMedia SDK for Python.

Async REST client for TwineMedia media servers.
"""

from twinemedia.client import AsyncTwineMedia
from twinemedia.errors import (
    ApiError,
    BadStatusCodeError,
    InvalidCredentialsError,
    InvalidResponseError,
    MappingError,
    MediaNotFoundError,
    TransportError,
    TwineMediaError,
    UnauthorizedError,
    UnknownStatusError,
)
from twinemedia.models.account import Account, SelfAccountInfo
from twinemedia.models.enums import (
    AccountOrder,
    ListOrder,
    ListType,
    ListVisibility,
    MediaOrder,
    SourceOrder,
    TagOrder,
    TaskProgressType,
)
from twinemedia.models.media import Media
from twinemedia.models.media_list import MediaList
from twinemedia.models.source import Source, SourceInfo, SourceType
from twinemedia.models.tag import InstanceInfo, Tag
from twinemedia.models.task import Task
from twinemedia.permissions import has_permission

__version__ = "0.1.0"
__all__ = [
    "AsyncTwineMedia",
    "has_permission",
    "TwineMediaError",
    "ApiError",
    "MediaNotFoundError",
    "InvalidCredentialsError",
    "UnknownStatusError",
    "UnauthorizedError",
    "BadStatusCodeError",
    "InvalidResponseError",
    "MappingError",
    "TransportError",
    "Media",
    "MediaList",
    "Source",
    "SourceInfo",
    "SourceType",
    "Account",
    "SelfAccountInfo",
    "Task",
    "Tag",
    "InstanceInfo",
    "ListType",
    "ListVisibility",
    "TaskProgressType",
    "MediaOrder",
    "TagOrder",
    "ListOrder",
    "SourceOrder",
    "AccountOrder",
]
