"""CLI: twinemedia media list|get|upload|delete"""

import json

import click
from rich.table import Table

from twinemedia.cli.common import console, get_client, handle_errors, run


def _human_size(size: int) -> str:
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


@click.group()
def media():
    """Media file management."""


@media.command("list")
@click.option("--offset", default=0, type=int)
@click.option("--limit", default=20, type=int)
@click.option("--mime", default="%", help='MIME filter, "%" is a wildcard')
@click.option("--json-output", "--json", is_flag=True)
@handle_errors
def media_list(offset, limit, mime, json_output):
    """List media files, newest first."""
    files = run(get_client().media.list(offset=offset, limit=limit, mime=mime))
    if json_output:
        click.echo(json.dumps([f.model_dump(mode="json") for f in files], indent=2))
        return
    table = Table(title=f"Media ({len(files)} shown)")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("MIME")
    table.add_column("Size", justify="right")
    table.add_column("Created")
    for f in files:
        table.add_row(f.id, f.name, f.mime, _human_size(f.size), f.created_on.isoformat())
    console.print(table)


@media.command("get")
@click.argument("media_id")
@handle_errors
def media_get(media_id):
    """Show one media file."""
    f = run(get_client().media.get(media_id))
    console.print(f"[bold]{f.name}[/bold] ({f.filename})")
    console.print(f"  MIME: {f.mime}, size: {_human_size(f.size)}, creator: {f.creator_name}")
    if f.tags:
        console.print(f"  Tags: {', '.join(f.tags)}")
    if f.description:
        console.print(f"  {f.description}")
    if f.process_error:
        console.print(f"  [red]Processing failed: {f.process_error}[/red]")
    console.print(f"  Download: {f.download_url}")
    if f.has_thumbnail:
        console.print(f"  Thumbnail: {f.thumbnail_url}")
    for child in f.children:
        console.print(f"  Child: {child.id} {child.name}")


@media.command("upload")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--name", default=None)
@click.option("--description", default=None)
@click.option("-t", "--tag", "tags", multiple=True, help="Repeat for each tag")
@click.option("--source", default=None, type=int, help="Source ID to store the file in")
@click.option("--no-thumbnail", is_flag=True)
@click.option("--no-process", is_flag=True)
@click.option("--ignore-hash", is_flag=True, help="Upload even if an identical file exists")
@handle_errors
def media_upload(path, name, description, tags, source, no_thumbnail, no_process, ignore_hash):
    """Upload a file."""
    client = get_client()
    with console.status("Uploading..."):
        media_id = run(client.media.upload_file(
            path,
            name=name,
            description=description,
            tags=list(tags) if tags else None,
            source=source,
            no_thumbnail=no_thumbnail,
            do_not_process=no_process,
            ignore_hash=ignore_hash,
        ))
    console.print(f"[green]Uploaded: {media_id}[/green]")


@media.command("delete")
@click.argument("media_id")
@handle_errors
def media_delete(media_id):
    """Delete a media file."""
    with console.status("Deleting..."):
        run(get_client().media.delete(media_id))
    console.print(f"[green]Media {media_id} deleted.[/green]")
