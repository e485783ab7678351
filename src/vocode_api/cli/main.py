"""
Vocode CLI — `vocode` command.

Commands:
  vocode auth login            Save and verify an API key
  vocode usage                 Plan and minutes used
  vocode voices <cmd>          Voice lookup
  vocode calls <cmd>           Place, inspect and end calls
  vocode numbers <cmd>         Phone number lifecycle
  vocode agents|actions|...    list / get for the other resources
"""

import asyncio
import json
import os
from enum import Enum
from pathlib import Path
from typing import Any, Optional

try:
    import click
    from rich.console import Console
    from rich.markup import escape
except ImportError:
    raise SystemExit("CLI requires extras: pip install vocode-api[cli]")

from vocode_api.client import AsyncVocode
from vocode_api.codec import to_wire
from vocode_api.config import API_KEY_ENV, BASE_URL_ENV
from vocode_api.errors import VocodeError
from vocode_api.models.paging import Page, PageParams
from vocode_api.transport.http import DEFAULT_BASE_URL

console = Console()
CONFIG_FILE = Path.home() / ".vocode" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _make_client(api_key: str, base_url: str) -> AsyncVocode:
    return AsyncVocode(api_key=api_key, base_url=base_url)


def _get_client() -> AsyncVocode:
    cfg = _load_config()
    api_key = os.environ.get(API_KEY_ENV) or cfg.get("api_key")
    if not api_key:
        console.print("[red]Not logged in. Run `vocode auth login` first.[/red]")
        raise SystemExit(1)
    base_url = os.environ.get(BASE_URL_ENV) or cfg.get("base_url", DEFAULT_BASE_URL)
    return _make_client(api_key, base_url)


def _run(coro):
    try:
        return asyncio.run(coro)
    except VocodeError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)


def _paging(page: Optional[int], size: Optional[int]) -> Optional[PageParams]:
    if page is None and size is None:
        return None
    return PageParams(page=page, size=size)


def _label(value: Any, default: str = "") -> str:
    """Display text for an enum field that may also hold a plain string."""
    if value is None:
        return default
    return value.value if isinstance(value, Enum) else str(value)


def _echo_json(value: Any) -> None:
    """Print a model or a page in wire form."""
    if isinstance(value, Page):
        body = {"items": [to_wire(item) for item in value.items],
                **value.model_dump(mode="json", exclude={"items"}, exclude_none=True)}
    else:
        body = to_wire(value)
    click.echo(json.dumps(body, indent=2, ensure_ascii=False))


@click.group()
@click.version_option("0.1.0")
def main():
    """Vocode CLI — manage voice agents, numbers and calls."""


# Register subcommands from separate modules
from vocode_api.cli.auth import auth
from vocode_api.cli.calls import calls
from vocode_api.cli.numbers import numbers
from vocode_api.cli.resources import RESOURCE_GROUPS
from vocode_api.cli.usage import usage_cmd
from vocode_api.cli.voices import voices

main.add_command(auth)
main.add_command(usage_cmd)
main.add_command(voices)
main.add_command(calls)
main.add_command(numbers)
for group in RESOURCE_GROUPS:
    main.add_command(group)


if __name__ == "__main__":
    main()
