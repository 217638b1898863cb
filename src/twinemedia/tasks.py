"""
Tasks REST API.
"""

from __future__ import annotations

from twinemedia.mapping import elements, task_from_json
from twinemedia.models.task import Task
from twinemedia.transport.http import HttpClient


class TasksAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(self) -> list[Task]:
        """List all tasks visible to this account."""
        res = await self._http.get("/tasks")
        return [task_from_json(t) for t in elements(res, "tasks")]

    async def get(self, task_id: int) -> Task:
        return task_from_json(await self._http.get(f"/task/{task_id}"))

    async def cancel(self, task_id: int) -> None:
        """Request cancellation. The task reports ``is_cancelling`` until it stops."""
        await self._http.post(f"/task/{task_id}/cancel")
