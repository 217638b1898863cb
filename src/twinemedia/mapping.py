"""
Conversion of service payloads into records.

Each function takes one JSON object as returned by the service and returns
the matching record, or raises MappingError when the payload is missing a
required field or carries a value the record cannot hold.
"""

from typing import Any, TypeVar

from pydantic import ValidationError

from twinemedia.errors import MappingError
from twinemedia.models.account import Account, SelfAccountInfo
from twinemedia.models.base import Record
from twinemedia.models.media import Media
from twinemedia.models.media_list import MediaList
from twinemedia.models.source import Source, SourceInfo, SourceType
from twinemedia.models.tag import InstanceInfo, Tag
from twinemedia.models.task import Task

R = TypeVar("R", bound=Record)


def _validate(model: type[R], data: Any, context: Any = None) -> R:
    try:
        return model.model_validate(data, context=context)
    except ValidationError as e:
        raise MappingError(model.__name__, str(e)) from e


def elements(payload: dict[str, Any], key: str) -> list[Any]:
    """Returns the array under ``key`` in a listing response."""
    items = payload.get(key)
    if not isinstance(items, list):
        raise MappingError(key, f'expected an array under "{key}", got {type(items).__name__}')
    return items


def media_from_json(data: Any, root_url: str) -> Media:
    """Maps a media payload, its parent and all nested children.

    ``root_url`` is used to build the download and thumbnail URLs.
    """
    return _validate(Media, data, {"root_url": root_url})


def list_from_json(data: Any) -> MediaList:
    return _validate(MediaList, data)


def source_from_json(data: Any) -> Source:
    return _validate(Source, data)


def source_info_from_json(data: Any) -> SourceInfo:
    return _validate(SourceInfo, data)


def source_type_from_json(data: Any) -> SourceType:
    return _validate(SourceType, data)


def account_from_json(data: Any) -> Account:
    return _validate(Account, data)


def self_account_info_from_json(data: Any) -> SelfAccountInfo:
    return _validate(SelfAccountInfo, data)


def task_from_json(data: Any) -> Task:
    return _validate(Task, data)


def tag_from_json(data: Any) -> Tag:
    return _validate(Tag, data)


def instance_info_from_json(data: Any) -> InstanceInfo:
    return _validate(InstanceInfo, data)
