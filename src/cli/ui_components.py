"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables/panels are reused by several commands.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import FullProfile, SearchResult


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in `--json` mode)."""

    title = Text("LC-SCOUT", style="bold cyan")
    subtitle = Text("Username discovery • Profile lookup", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_search_table(result: SearchResult) -> Table:
    table = Table(title=f"Users matching '{result.keyword}' ({result.candidates} candidates tried)")
    table.add_column("Username", style="cyan", no_wrap=True)
    table.add_column("Real name", style="white")
    table.add_column("Ranking", style="green", justify="right")
    table.add_column("Reputation", style="green", justify="right")
    table.add_column("Id", style="dim")
    for user in result.users:
        table.add_row(
            user.username,
            user.real_name or "-",
            str(user.ranking) if user.ranking else "-",
            str(user.reputation),
            user.id,
        )
    return table


def build_profile_panel(profile: FullProfile) -> Panel:
    """Panel with the public profile plus solved counts by difficulty."""

    details = profile.profile
    body = Text()
    body.append(f"{details.real_name or profile.username}\n", style="bold")
    if details.about_me:
        body.append(details.about_me.strip() + "\n", style="italic")
    body.append("\n")

    rows: list[tuple[str, object]] = [
        ("Ranking", details.ranking),
        ("Reputation", details.reputation),
        ("Country", details.country_name),
        ("Company", details.company),
        ("School", details.school),
        ("Star rating", details.star_rating),
        ("Solutions", details.solution_count),
        ("Post views", details.post_view_count),
        ("Skills", ", ".join(details.skill_tags or []) or None),
        ("Websites", ", ".join(details.websites or []) or None),
    ]
    for label, value in rows:
        if value in (None, ""):
            continue
        body.append(f"{label}: ", style="dim")
        body.append(f"{value}\n")

    if profile.submit_stats and profile.submit_stats.ac_submission_num:
        body.append("\nSolved:\n", style="bold")
        for item in profile.submit_stats.ac_submission_num:
            body.append(f"- {item.difficulty}: {item.count}\n")

    return Panel(body, title=Text(profile.username, style="bold yellow"), border_style="yellow")
