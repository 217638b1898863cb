"""CLI: twinemedia auth login|status|logout, info, whoami"""

from typing import Optional

import click

from twinemedia.cli.common import console, get_client, handle_errors, load_config, run, save_config
from twinemedia.client import AsyncTwineMedia


@click.group()
def auth():
    """Authentication commands."""


@auth.command("login")
@click.option("--root-url", default=None, help="TwineMedia root URL")
@handle_errors
def auth_login(root_url: Optional[str]):
    """Log in with email and password."""

    async def _login():
        cfg = load_config()
        url = root_url or cfg.get("root_url") or click.prompt("Root URL")
        email = click.prompt("Email")
        password = click.prompt("Password", hide_input=True)

        with console.status("Logging in..."):
            client = await AsyncTwineMedia.from_credentials(url, email, password)
        console.print(f"[green]Logged in as {email}[/green]")

        save_config({**cfg, "root_url": client.root_url, "token": client.token, "email": email})
        console.print("[dim]Token saved to ~/.twinemedia/config.json[/dim]")

    run(_login())


@auth.command("status")
def auth_status():
    """Show current auth status."""
    cfg = load_config()
    if cfg.get("token"):
        console.print(f"[green]Logged in[/green] as {cfg.get('email', 'unknown')} on {cfg.get('root_url')}")
    else:
        console.print("[yellow]Not logged in. Run `twinemedia auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear saved credentials."""
    save_config({})
    console.print("[green]Logged out.[/green]")


@click.command("info")
@click.option("--root-url", default=None, help="Query this instance instead of the saved one")
@handle_errors
def info_cmd(root_url: Optional[str]):
    """Show the instance version and supported API versions."""
    url = root_url or load_config().get("root_url")
    if not url:
        raise click.UsageError("No root URL saved; pass --root-url")
    info = run(AsyncTwineMedia.anonymous(url).fetch_instance_info())
    console.print(f"TwineMedia {info.version} (API {', '.join(info.api_versions)})")


@click.command("whoami")
@handle_errors
def whoami_cmd():
    """Show the account the saved token belongs to."""
    account = run(get_client().fetch_self_account_info())
    role = "admin" if account.is_admin else f"{len(account.permissions)} permissions"
    console.print(f"[bold]{account.name}[/bold] <{account.email}> (ID: {account.id}, {role})")
    if account.is_api_token:
        console.print("[dim]Authenticated with an API token[/dim]")
