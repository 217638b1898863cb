"""Shared CLI helpers: saved config, client construction, error output."""

import asyncio
import functools
import json
from pathlib import Path

from rich.console import Console

from twinemedia.client import AsyncTwineMedia
from twinemedia.errors import TwineMediaError

console = Console()
CONFIG_FILE = Path.home() / ".twinemedia" / "config.json"


def load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def get_client() -> AsyncTwineMedia:
    cfg = load_config()
    if not cfg.get("root_url") or not cfg.get("token"):
        console.print("[red]Not logged in. Run `twinemedia auth login` first.[/red]")
        raise SystemExit(1)
    return AsyncTwineMedia.from_token(cfg["root_url"], cfg["token"])


def run(coro):
    return asyncio.run(coro)


def handle_errors(fn):
    """Print API errors instead of a traceback and exit with status 1."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except TwineMediaError as e:
            console.print(f"[red]Error ({e.code}): {e}[/red]")
            raise SystemExit(1)

    return wrapper
