"""CLI: twinemedia tags list, twinemedia lists list"""

import click
from rich.table import Table

from twinemedia.cli.common import console, get_client, handle_errors, run
from twinemedia.models.enums import ListType


@click.group()
def tags():
    """Tags."""


@tags.command("list")
@click.option("--query", default="", help='Name filter, "%" is a wildcard')
@click.option("--limit", default=50, type=int)
@handle_errors
def tags_list(query, limit):
    """List tags and how many files carry them."""
    result = run(get_client().tags.list(query=query, limit=limit))
    table = Table(title="Tags")
    table.add_column("Tag", style="bold")
    table.add_column("Files", justify="right")
    for tag in result:
        table.add_row(tag.name, str(tag.files))
    console.print(table)


@click.group()
def lists():
    """Media lists."""


@lists.command("list")
@click.option("--limit", default=50, type=int)
@handle_errors
def lists_list(limit):
    """List media lists."""
    result = run(get_client().lists.list(limit=limit))
    table = Table(title="Lists")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Visibility")
    table.add_column("Items", justify="right")
    for lst in result:
        kind = "auto" if lst.list_type == ListType.AUTOMATICALLY_POPULATED else "standard"
        count = "" if lst.item_count is None else str(lst.item_count)
        table.add_row(lst.id, lst.name, kind, lst.visibility.name.lower(), count)
    console.print(table)
