"""Record commands for Micro Diary CLI.

Handles streaks, badges, period statistics and "N days ago" lookups.
"""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from microdiary.cli.main import get_service
from microdiary.engine.periods import LOOKBACK_PERIODS, RANGE_PERIODS

console = Console()

# Sparkline glyphs from low to high satisfaction
SPARK_CHARS = "▁▂▃▄▅▆▇█"

LOOKBACK_LABELS = {
    1: "Yesterday",
    3: "3 days ago",
    7: "1 week ago",
    30: "1 month ago",
    90: "3 months ago",
    180: "6 months ago",
    365: "1 year ago",
}


def render_sparkline(series: list) -> str:
    """Render a daily series as a one-line chart.

    Days without an entry are drawn as a gap so they never read as a
    zero score.

    Args:
        series: List of DailyPoint.

    Returns:
        One character per day.
    """
    chars = []
    for point in series:
        if not point.has_entry:
            chars.append(" ")
            continue
        index = min(point.satisfaction_score * len(SPARK_CHARS) // 101, len(SPARK_CHARS) - 1)
        chars.append(SPARK_CHARS[index])
    return "".join(chars)


@click.command()
@click.pass_context
def streak(ctx: click.Context) -> None:
    """Show the current streak and total entries."""
    service = get_service(ctx)
    current = service.current_streak()
    total = len(service.all_entries())

    alive = service.today_entry() is not None
    hint = "" if alive or current == 0 else "\n[dim]Write today to keep it going[/dim]"

    console.print(Panel(
        f"🔥 Streak: [bold orange1]{current}[/bold orange1] days\n"
        f"📅 Total:  [bold blue]{total}[/bold blue] entries{hint}",
        title="[bold]Records[/bold]",
        border_style="cyan",
    ))


@click.command()
@click.pass_context
def badges(ctx: click.Context) -> None:
    """Show earned and locked badges."""
    service = get_service(ctx)
    service.check_badges()

    table = Table(title="Badges", show_header=True, header_style="bold cyan")
    table.add_column("Badge", style="bold")
    table.add_column("Condition")
    table.add_column("Earned", justify="center")

    for definition, badge in service.badge_board():
        if badge is not None:
            earned = f"[green]✓ {badge.earned_at.strftime('%Y-%m-%d')}[/green]"
        else:
            earned = "[dim]locked[/dim]"
        table.add_row(definition.title, definition.description, earned)

    console.print(table)


@click.command()
@click.option(
    "--period", "-p",
    type=click.Choice([str(p) for p in RANGE_PERIODS]),
    default="7",
    show_default=True,
    help="Window length in days.",
)
@click.pass_context
def stats(ctx: click.Context, period: str) -> None:
    """Show entry count, average satisfaction and trend.

    \b
    Examples:
      microdiary stats
      microdiary stats --period 30
    """
    service = get_service(ctx)
    result = service.statistics(int(period))

    console.print(Panel(
        f"Entries:       [bold blue]{result.count}[/bold blue]\n"
        f"Average score: [bold red]{result.average_satisfaction:.1f}[/bold red]\n\n"
        f"[cyan]{render_sparkline(result.series)}[/cyan]\n"
        f"[dim]{result.start_date} → {result.end_date}[/dim]",
        title=f"[bold]Last {result.period} days[/bold]",
        border_style="cyan",
    ))


@click.command()
@click.option(
    "--days", "-d",
    type=click.Choice([str(p) for p in LOOKBACK_PERIODS]),
    default="365",
    show_default=True,
    help="How many days back.",
)
@click.pass_context
def lookback(ctx: click.Context, days: str) -> None:
    """Show the entry from N days ago."""
    service = get_service(ctx)
    entry = service.lookback(int(days))
    title = LOOKBACK_LABELS[int(days)]

    if entry is None:
        console.print(Panel(
            "[dim]No entry for that day[/dim]",
            title=f"[bold]{title}[/bold]",
            border_style="dim",
        ))
        return

    console.print(Panel(
        f"{entry.text}\n\nSatisfaction: {entry.satisfaction_score} / 100",
        title=f"[bold]{title} · {entry.date}[/bold]",
        border_style="cyan",
    ))
