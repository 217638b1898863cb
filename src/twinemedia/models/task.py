"""
Task record for long-running jobs on the service.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from twinemedia.models.base import Record
from twinemedia.models.enums import TaskProgressType


class Task(Record):
    """A service-side task.

    The four outcome flags are stored independently, as the service reports
    them.
    """

    id: int
    name: str
    is_cancellable: bool = Field(alias="cancellable")
    view_permission: Optional[str] = None
    cancel_permission: Optional[str] = None
    is_global: bool = Field(alias="global")
    progress_type: TaskProgressType
    finished_items: int
    total_items: Optional[int] = None
    subtask: Optional[str] = None
    is_succeeded: bool = Field(alias="succeeded")
    is_cancelled: bool = Field(alias="cancelled")
    is_failed: bool = Field(alias="failed")
    is_cancelling: bool = Field(alias="cancelling")
    created_on: datetime
