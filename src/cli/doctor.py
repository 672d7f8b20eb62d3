"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.leetcode_client import LeetCodeGraphQLClient
from core.config import AppSettings, get_user_env_file
from core.domain.errors import ProfileLookupError
from core.services.profile_lookup import lookup_profile

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_CHECK_USERNAME = "leetcode"


async def _check_upstream(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with LeetCodeGraphQLClient(settings) as transport:
            await lookup_profile(
                _CHECK_USERNAME,
                transport=transport,
                timeout=settings.http_timeout_seconds,
            )
        return True, "GraphQL reachable"
    except ProfileLookupError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics."""

    settings = AppSettings()

    table = Table(title="LC-SCOUT Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Upstream", "OK", f"{settings.base_url}{settings.graphql_path}")
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds}s per call")
    table.add_row("Concurrency", "OK", f"{settings.search_max_concurrency} in-flight calls")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_upstream(settings))
    table.add_row("GraphQL connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)
