"""CLI: vocode calls list|get|create|end|recording"""

import json
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vocode_api.models.call import Call, CallRequest, OnNoHumanAnswer

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


def _print_call(call: Call) -> None:
    status = escape(_label(call.status, "unknown"))
    console.print(f"[bold]{call.id}[/bold] {call.from_number or '?'} -> {call.to_number or '?'} ({status})")
    if call.stage:
        outcome = f" ({_label(call.stage_outcome)})" if call.stage_outcome else ""
        console.print(f"  stage: {_label(call.stage)}{outcome}")
    if call.error_message:
        console.print(f"  [red]error: {escape(call.error_message)}[/red]")
    if call.transcript:
        console.print(escape(call.transcript))


@click.group()
def calls():
    """Place, inspect and end calls."""


@calls.command("list")
@click.option("--page", default=None, type=int)
@click.option("--size", default=None, type=int)
@click.option("--json-output", "--json", is_flag=True)
def calls_list(page: Optional[int], size: Optional[int], json_output: bool):
    """List calls."""

    client = _get_client()

    async def _list():
        async with client:
            return await client.calls.list(_paging(page, size))

    result = _run(_list())
    if json_output:
        _echo_json(result)
        return
    table = Table(title=f"Calls ({result.total if result.total is not None else len(result)} total)")
    table.add_column("ID", style="bold")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Status")
    table.add_column("Started")
    for c in result:
        table.add_row(c.id or "", c.from_number or "", c.to_number or "",
                      _label(c.status), c.start_time or "")
    console.print(table)


@calls.command("get")
@click.argument("call_id")
@click.option("--json-output", "--json", is_flag=True)
def calls_get(call_id: str, json_output: bool):
    """Show one call."""

    client = _get_client()

    async def _get():
        async with client:
            return await client.calls.get(call_id)

    call = _run(_get())
    if json_output:
        _echo_json(call)
    else:
        _print_call(call)


@calls.command("create")
@click.option("--from", "from_number", required=True, help="Caller number (must be owned)")
@click.option("--to", "to_number", required=True)
@click.option("--agent", "agent_id", required=True, help="Agent id")
@click.option("--hangup-on-no-human", is_flag=True)
@click.option("--context", default=None, help="JSON object passed to the agent")
@click.option("--json-output", "--json", is_flag=True)
def calls_create(from_number: str, to_number: str, agent_id: str, hangup_on_no_human: bool,
                 context: Optional[str], json_output: bool):
    """Place an outbound call."""
    try:
        ctx = json.loads(context) if context else None
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="--context")
    if ctx is not None and not isinstance(ctx, dict):
        raise click.BadParameter("must be a JSON object", param_hint="--context")

    request = CallRequest(
        from_number=from_number,
        to_number=to_number,
        agent=agent_id,
        on_no_human_answer=OnNoHumanAnswer.HANGUP if hangup_on_no_human else None,
        context=ctx,
    )

    client = _get_client()

    async def _create():
        async with client:
            with console.status("Placing call..."):
                return await client.calls.create(request)

    call = _run(_create())
    if json_output:
        _echo_json(call)
        return
    console.print(f"[green]Call created: {call.id}[/green]")


@calls.command("end")
@click.argument("call_id")
def calls_end(call_id: str):
    """Hang up an in-progress call."""

    client = _get_client()

    async def _end():
        async with client:
            with console.status("Ending call..."):
                return await client.calls.end(call_id)

    call = _run(_end())
    console.print(f"[green]Call {call.id or call_id} ended.[/green]")


@calls.command("recording")
@click.argument("call_id")
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Destination file (default: <call-id>.wav)")
def calls_recording(call_id: str, output: Optional[Path]):
    """Download a call recording."""

    client = _get_client()

    async def _recording():
        async with client:
            with console.status("Downloading recording..."):
                return await client.calls.recording(call_id)

    audio = _run(_recording())
    dest = output or Path(f"{call_id}.wav")
    dest.write_bytes(audio)
    console.print(f"[green]Saved {len(audio)} bytes to {dest}[/green]")
