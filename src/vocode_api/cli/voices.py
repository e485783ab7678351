"""CLI: vocode voices list|get"""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from vocode_api.models.voice import AzureVoice, RimeVoice, Voice

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


def _label(value, default=""):
    from vocode_api.cli.main import _label
    return _label(value, default)


def _voice_label(voice: Voice) -> str:
    payload = voice.payload
    if isinstance(payload, AzureVoice):
        return payload.name or ""
    if isinstance(payload, RimeVoice):
        return payload.speaker or ""
    if payload is not None:
        return payload.voice_id or ""
    return ""


@click.group()
def voices():
    """Voice lookup."""


@voices.command("list")
@click.option("--page", default=None, type=int)
@click.option("--size", default=None, type=int)
@click.option("--json-output", "--json", is_flag=True)
def voices_list(page: Optional[int], size: Optional[int], json_output: bool):
    """List voices."""

    client = _get_client()

    async def _list():
        async with client:
            return await client.voices.list(_paging(page, size))

    result = _run(_list())
    if json_output:
        _echo_json(result)
        return
    table = Table(title=f"Voices ({result.total if result.total is not None else len(result)} total)")
    table.add_column("ID", style="bold")
    table.add_column("Type")
    table.add_column("Voice")
    for v in result:
        table.add_row(v.id or "", _label(v.type), _voice_label(v))
    console.print(table)


@voices.command("get")
@click.argument("voice_id")
@click.option("--json-output", "--json", is_flag=True)
def voices_get(voice_id: str, json_output: bool):
    """Show one voice."""

    client = _get_client()

    async def _get():
        async with client:
            return await client.voices.get(voice_id)

    voice = _run(_get())
    if json_output:
        _echo_json(voice)
        return
    console.print(f"[bold]{voice.id}[/bold] {_label(voice.type)}")
    if voice.payload is not None:
        for key, value in voice.payload.model_dump(by_alias=True, exclude_none=True).items():
            if key == "api_key":
                value = "***"
            console.print(f"  {key}: {value}")
