"""lc-scout command line.

Commands:
- `search KEYWORD`   brute-force username discovery for a name/keyword.
- `profile USERNAME` full public profile of a known username.
- `serve`            run the HTTP API with uvicorn.
- `doctor run`       environment diagnostics.
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.progress import Progress

from adapters.leetcode_client import LeetCodeGraphQLClient
from cli import doctor
from cli.ui_components import build_profile_panel, build_search_table, print_banner
from core.config import AppSettings
from core.domain.errors import ProfileLookupError
from core.domain.models import FullProfile, SearchResult
from core.logging_setup import configure_logging
from core.services.profile_lookup import lookup_profile
from core.services.user_search import SearchHooks, render_search_envelope, search_users

app = typer.Typer(no_args_is_help=True, help="Find coding-practice accounts from a name.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


async def _run_search(
    keyword: str,
    settings: AppSettings,
    hooks: SearchHooks | None = None,
) -> SearchResult:
    async with LeetCodeGraphQLClient(settings) as transport:
        return await search_users(keyword, transport=transport, settings=settings, hooks=hooks)


async def _run_lookup(username: str, settings: AppSettings) -> str:
    async with LeetCodeGraphQLClient(settings) as transport:
        return await lookup_profile(
            username,
            transport=transport,
            timeout=settings.http_timeout_seconds,
        )


@app.command()
def search(
    keyword: str = typer.Argument(..., help="Name or keyword to derive usernames from."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON envelope."),
) -> None:
    """Guess usernames from KEYWORD and list the accounts that exist."""

    settings = AppSettings()
    configure_logging(settings.log_level)

    if as_json:
        result = asyncio.run(_run_search(keyword, settings))
        typer.echo(render_search_envelope(result))
        return

    print_banner(_console)
    with Progress(console=_console, transient=True) as progress:
        task = progress.add_task("[cyan]Probing candidates...", total=None)
        hooks = SearchHooks(
            started=lambda total: progress.update(task, total=total),
            progress=lambda done, total: progress.update(task, completed=done),
        )
        result = asyncio.run(_run_search(keyword, settings, hooks))

    if not result.users:
        _console.print(f"[yellow]No accounts found for[/yellow] '{keyword}'.")
        return
    _console.print(build_search_table(result))


@app.command()
def profile(
    username: str = typer.Argument(..., help="Exact username to look up."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw upstream body."),
) -> None:
    """Show the full public profile of USERNAME."""

    settings = AppSettings()
    configure_logging(settings.log_level)

    try:
        body = asyncio.run(_run_lookup(username, settings))
    except ProfileLookupError as exc:
        _console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(body)
        return

    try:
        full = FullProfile.from_response(body)
    except ValueError as exc:
        _console.print(f"[bold red]Error:[/bold red] unexpected upstream body: {exc}")
        raise typer.Exit(code=1) from exc
    if full is None:
        _console.print(f"[yellow]User not found:[/yellow] {username}")
        raise typer.Exit(code=1)
    _console.print(build_profile_panel(full))


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address (default from settings)."),
    port: int | None = typer.Option(None, help="Bind port (default from settings)."),
) -> None:
    """Run the HTTP API."""

    import uvicorn  # noqa: PLC0415

    from api.app import create_app  # noqa: PLC0415

    settings = AppSettings()
    configure_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=host or settings.api_host,
        port=port or settings.api_port,
    )


def run() -> None:
    app()


if __name__ == "__main__":
    run()
