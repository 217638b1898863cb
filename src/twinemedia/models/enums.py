"""
Enumerations sent to and received from the service.

Orderings are integer ordinals the service uses to sort listing results.
"""

from enum import Enum, IntEnum


class ListType(IntEnum):
    STANDARD = 0
    AUTOMATICALLY_POPULATED = 1


class ListVisibility(IntEnum):
    PRIVATE = 0
    PUBLIC = 1


class TaskProgressType(str, Enum):
    INDEFINITE = "indefinite"
    PERCENT = "percent"
    ITEM_COUNT = "item_count"

    @classmethod
    def _missing_(cls, value: object):
        # Names are matched case-insensitively
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class MediaOrder(IntEnum):
    CREATED_ON_DESC = 0
    CREATED_ON_ASC = 1
    NAME_ASC = 2
    NAME_DESC = 3
    SIZE_DESC = 4
    SIZE_ASC = 5
    MODIFIED_ON_DESC = 6
    MODIFIED_ON_ASC = 7


class TagOrder(IntEnum):
    NAME_ASC = 0
    NAME_DESC = 1
    LENGTH_ASC = 2
    LENGTH_DESC = 3
    FILES_ASC = 4
    FILES_DESC = 5


class ListOrder(IntEnum):
    CREATED_ON_DESC = 0
    CREATED_ON_ASC = 1
    NAME_ASC = 2
    NAME_DESC = 3
    MODIFIED_ON_DESC = 4
    MODIFIED_ON_ASC = 5


class SourceOrder(IntEnum):
    CREATED_ON_DESC = 0
    CREATED_ON_ASC = 1
    NAME_ASC = 2
    NAME_DESC = 3
    TYPE_ASC = 4
    TYPE_DESC = 5


class AccountOrder(IntEnum):
    CREATED_ON_DESC = 0
    CREATED_ON_ASC = 1
    NAME_ASC = 2
    NAME_DESC = 3
    EMAIL_ASC = 4
    EMAIL_DESC = 5
    ADMIN_FIRST = 6
    ADMIN_LAST = 7
