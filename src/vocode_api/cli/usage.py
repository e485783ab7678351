"""CLI: vocode usage"""

import click
from rich.console import Console

console = Console()


def _get_client():
    from vocode_api.cli.main import _get_client
    return _get_client()


def _run(coro):
    from vocode_api.cli.main import _run
    return _run(coro)


def _echo_json(value):
    from vocode_api.cli.main import _echo_json
    _echo_json(value)


def _label(value, default=""):
    from vocode_api.cli.main import _label
    return _label(value, default)


@click.command("usage")
@click.option("--json-output", "--json", is_flag=True)
def usage_cmd(json_output):
    """Show plan and minutes used this month."""

    client = _get_client()

    async def _usage():
        async with client:
            return await client.usage.get()

    usage = _run(_usage())
    if json_output:
        _echo_json(usage)
        return
    plan = _label(usage.plan_type, "unknown")
    used = usage.monthly_usage_minutes if usage.monthly_usage_minutes is not None else "?"
    limit = usage.monthly_usage_limit_minutes if usage.monthly_usage_limit_minutes is not None else "?"
    console.print(f"Plan: [bold]{plan}[/bold]")
    console.print(f"Minutes this month: {used} / {limit}")
