"""CLI: twinemedia tasks list|cancel"""

import click
from rich.table import Table

from twinemedia.cli.common import console, get_client, handle_errors, run
from twinemedia.models.task import Task


def _state(task: Task) -> str:
    if task.is_succeeded:
        return "[green]succeeded[/green]"
    if task.is_failed:
        return "[red]failed[/red]"
    if task.is_cancelled:
        return "cancelled"
    if task.is_cancelling:
        return "cancelling"
    return "running"


def _progress(task: Task) -> str:
    if task.total_items is None:
        return str(task.finished_items)
    return f"{task.finished_items}/{task.total_items}"


@click.group()
def tasks():
    """Task commands."""


@tasks.command("list")
@handle_errors
def tasks_list():
    """List tasks visible to this account."""
    result = run(get_client().tasks.list())
    table = Table(title="Tasks")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("State")
    table.add_column("Progress", justify="right")
    table.add_column("Subtask")
    for t in result:
        table.add_row(str(t.id), t.name, _state(t), _progress(t), t.subtask or "")
    console.print(table)


@tasks.command("cancel")
@click.argument("task_id", type=int)
@handle_errors
def tasks_cancel(task_id):
    """Request cancellation of a task."""
    with console.status("Cancelling..."):
        run(get_client().tasks.cancel(task_id))
    console.print(f"[green]Cancellation requested for task {task_id}.[/green]")
