"""CLI: vocode auth login|status|logout"""

from typing import Optional

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from vocode_api.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from vocode_api.cli.main import _save_config
    _save_config(cfg)


def _make_client(api_key: str, base_url: str):
    from vocode_api.cli.main import _make_client
    return _make_client(api_key, base_url)


def _run(coro):
    from vocode_api.cli.main import _run
    return _run(coro)


def _label(value, default=""):
    from vocode_api.cli.main import _label
    return _label(value, default)


@click.group()
def auth():
    """Authentication commands."""


@auth.command("login")
@click.option("--api-key", default=None, help="Vocode API key (prompted if omitted)")
@click.option("--base-url", default=None, help="Vocode API base URL")
def auth_login(api_key: Optional[str], base_url: Optional[str]):
    """Save an API key after checking it against the API."""
    from vocode_api.transport.http import DEFAULT_BASE_URL

    cfg = _load_config()
    url = base_url or cfg.get("base_url", DEFAULT_BASE_URL)
    key = api_key or click.prompt("API key", hide_input=True)

    async def _login():
        async with _make_client(key, url) as client:
            with console.status("Verifying API key..."):
                return await client.usage.get()

    usage = _run(_login())
    plan = _label(usage.plan_type, "unknown plan")
    console.print(f"[green]Logged in[/green] ({plan})")
    _save_config({**cfg, "api_key": key, "base_url": url})
    console.print("[dim]Key saved to ~/.vocode/config.json[/dim]")


@auth.command("status")
def auth_status():
    """Show current auth status."""
    cfg = _load_config()
    if cfg.get("api_key"):
        console.print(f"[green]Logged in[/green] (key ...{cfg['api_key'][-4:]}) at {cfg.get('base_url', 'default URL')}")
    else:
        console.print("[yellow]Not logged in. Run `vocode auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear saved credentials."""
    _save_config({})
    console.print("[green]Logged out.[/green]")
