"""
Base record for every object the client hands back.
"""

from pydantic import BaseModel


class Record(BaseModel):
    """Immutable record read from a service payload by field alias."""

    model_config = {"frozen": True, "populate_by_name": True}
