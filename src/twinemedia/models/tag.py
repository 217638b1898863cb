"""
Tag and instance records.
"""

from twinemedia.models.base import Record


class Tag(Record):
    name: str
    files: int


class InstanceInfo(Record):
    """Version info reported by a TwineMedia instance."""

    version: str
    api_versions: tuple[str, ...]
