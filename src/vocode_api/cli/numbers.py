"""CLI: vocode numbers list|get|buy|cancel"""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from vocode_api.models.common import TelephonyProvider
from vocode_api.models.number import BuyNumberRequest, Number

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


def _agent_id(number: Number) -> str:
    return (number.inbound_agent.id or "") if number.inbound_agent else ""


@click.group()
def numbers():
    """Phone number lifecycle."""


@numbers.command("list")
@click.option("--page", default=None, type=int)
@click.option("--size", default=None, type=int)
@click.option("--json-output", "--json", is_flag=True)
def numbers_list(page: Optional[int], size: Optional[int], json_output: bool):
    """List owned numbers."""

    client = _get_client()

    async def _list():
        async with client:
            return await client.numbers.list(_paging(page, size))

    result = _run(_list())
    if json_output:
        _echo_json(result)
        return
    table = Table(title=f"Numbers ({result.total if result.total is not None else len(result)} total)")
    table.add_column("Number", style="bold")
    table.add_column("Label")
    table.add_column("Provider")
    table.add_column("Inbound agent")
    for n in result:
        table.add_row(n.number or "", n.label or "",
                      _label(n.telephony_provider), _agent_id(n))
    console.print(table)


@numbers.command("get")
@click.argument("phone_number")
@click.option("--json-output", "--json", is_flag=True)
def numbers_get(phone_number: str, json_output: bool):
    """Show one number."""

    client = _get_client()

    async def _get():
        async with client:
            return await client.numbers.get(phone_number)

    number = _run(_get())
    if json_output:
        _echo_json(number)
        return
    console.print(f"[bold]{number.number}[/bold] {number.label or ''}")
    console.print(f"  active: {number.active}  outbound only: {number.outbound_only}")
    if number.inbound_agent:
        console.print(f"  inbound agent: {_agent_id(number)}")


@numbers.command("buy")
@click.option("--area-code", default=None)
@click.option("--provider", type=click.Choice([p.value for p in TelephonyProvider]), default=None)
@click.option("--json-output", "--json", is_flag=True)
def numbers_buy(area_code: Optional[str], provider: Optional[str], json_output: bool):
    """Buy a new number."""
    request = BuyNumberRequest(
        area_code=area_code,
        telephony_provider=TelephonyProvider(provider) if provider else None,
    )

    client = _get_client()

    async def _buy():
        async with client:
            with console.status("Buying number..."):
                return await client.numbers.buy(request)

    number = _run(_buy())
    if json_output:
        _echo_json(number)
        return
    console.print(f"[green]Bought {number.number}[/green]")


@numbers.command("cancel")
@click.argument("phone_number")
@click.confirmation_option(prompt="Release this number?")
def numbers_cancel(phone_number: str):
    """Release a number."""

    client = _get_client()

    async def _cancel():
        async with client:
            with console.status("Cancelling..."):
                return await client.numbers.cancel(phone_number)

    _run(_cancel())
    console.print(f"[green]Number {phone_number} released.[/green]")
