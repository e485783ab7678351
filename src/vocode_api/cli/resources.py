"""CLI: vocode agents|actions|prompts|webhooks|vector-databases|account-connections list|get

The read-only resources share one command shape; each group is built from a
``(name, client attribute, columns)`` entry.
"""

from typing import Any, Callable, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def _get_client():
    from vocode_api.cli.main import _get_client
    return _get_client()


def _run(coro):
    from vocode_api.cli.main import _run
    return _run(coro)


def _paging(page, size):
    from vocode_api.cli.main import _paging
    return _paging(page, size)


def _echo_json(value):
    from vocode_api.cli.main import _echo_json
    _echo_json(value)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if hasattr(value, "value"):
        return str(value.value)
    if hasattr(value, "id"):
        return value.id or ""
    if isinstance(value, list):
        return ", ".join(_text(v) for v in value)
    return str(value)


def _short(text: Optional[str], width: int = 48) -> str:
    if not text:
        return ""
    text = " ".join(text.split())
    return text if len(text) <= width else text[: width - 3] + "..."


Column = tuple[str, Callable[[Any], str]]


def _field(name: str) -> Callable[[Any], str]:
    return lambda item: _text(getattr(item, name, None))


def make_group(name: str, attr: str, help_text: str, columns: list[Column]) -> click.Group:
    """Build a ``list``/``get`` click group for the client API at ``attr``."""

    @click.group(name, help=help_text)
    def group():
        pass

    @group.command("list")
    @click.option("--page", default=None, type=int)
    @click.option("--size", default=None, type=int)
    @click.option("--json-output", "--json", is_flag=True)
    def list_cmd(page: Optional[int], size: Optional[int], json_output: bool):
        """List items."""

        client = _get_client()

        async def _list():
            async with client:
                return await getattr(client, attr).list(_paging(page, size))

        result = _run(_list())
        if json_output:
            _echo_json(result)
            return
        total = result.total if result.total is not None else len(result)
        table = Table(title=f"{name.replace('-', ' ').capitalize()} ({total} total)")
        table.add_column("ID", style="bold")
        for title, _ in columns:
            table.add_column(title)
        for item in result:
            table.add_row(item.id or "", *(render(item) for _, render in columns))
        console.print(table)

    @group.command("get")
    @click.argument("item_id")
    @click.option("--json-output", "--json", is_flag=True)
    def get_cmd(item_id: str, json_output: bool):
        """Show one item."""

        client = _get_client()

        async def _get():
            async with client:
                return await getattr(client, attr).get(item_id)

        item = _run(_get())
        if json_output:
            _echo_json(item)
            return
        console.print(f"[bold]{item.id or item_id}[/bold]")
        for key in type(item).model_fields:
            if key in ("id", "api_key"):
                continue
            if key == "payload" and attr == "account_connections":
                console.print("  payload: [dim](credentials hidden, use --json)[/dim]")
                continue
            value = getattr(item, key)
            if value is not None:
                console.print(f"  {key}: {escape(_short(_text(value), 96))}")

    return group


RESOURCE_GROUPS = [
    make_group("agents", "agents", "Voice agents.", [
        ("Name", _field("name")),
        ("Voice", _field("voice")),
        ("Prompt", _field("prompt")),
    ]),
    make_group("actions", "actions", "Agent actions.", [
        ("Type", _field("type")),
    ]),
    make_group("prompts", "prompts", "Agent prompts.", [
        ("Content", lambda p: _short(p.content)),
    ]),
    make_group("webhooks", "webhooks", "Webhook subscriptions.", [
        ("URL", _field("url")),
        ("Method", _field("method")),
        ("Events", _field("subscriptions")),
    ]),
    make_group("vector-databases", "vector_databases", "Vector databases.", [
        ("Type", _field("type")),
        ("Index", _field("index")),
    ]),
    make_group("account-connections", "account_connections", "Linked OpenAI and Twilio accounts.", [
        ("Type", _field("type")),
    ]),
]
