"""Entry commands for Micro Diary CLI.

Handles writing and editing entries and browsing the history.
"""

from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from microdiary.cli.main import get_service

console = Console()

# Values of microdiary.engine.SortOption
SORT_CHOICES = ["date_desc", "date_asc", "satisfaction_desc", "satisfaction_asc"]


def _fail(message: str) -> None:
    """Print an error panel and exit."""
    console.print(Panel(
        f"[red]{message}[/red]",
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def _score_color(score: int) -> str:
    if score >= 70:
        return "green"
    if score >= 40:
        return "yellow"
    return "red"


def format_entry_row(entry) -> tuple[str, str, str, str]:
    """Format an entry as (date, score, text, flags) table cells."""
    day = entry.date.strftime("%Y-%m-%d (%a)") if entry.date else "-"
    color = _score_color(entry.satisfaction_score)
    score = f"[{color}]{entry.satisfaction_score}[/{color}]"
    flags = "[yellow]edited[/yellow]" if entry.is_edited else ""
    return day, score, entry.text, flags


def _entries_table(title: str, entries: list) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Date", style="dim")
    table.add_column("Score", justify="right")
    table.add_column("Entry")
    table.add_column("", justify="center")
    table.add_column("ID", style="dim")

    for entry in entries:
        table.add_row(*format_entry_row(entry), entry.id[:8])

    return table


@click.command()
@click.argument("text")
@click.option(
    "--score", "-s",
    type=click.IntRange(0, 100),
    required=True,
    help="Satisfaction score 0-100.",
)
@click.pass_context
def write(ctx: click.Context, text: str, score: int) -> None:
    """Write today's entry.

    \b
    Examples:
      microdiary write "Finished the book" --score 75
    """
    service = get_service(ctx)

    try:
        entry = service.write_today(text, score)
    except ValueError as e:
        _fail(str(e))

    console.print(f"[green]✓[/green] Saved entry for [bold]{entry.date}[/bold]")

    from microdiary.engine import get_badge_definition

    for badge in service.check_badges():
        definition = get_badge_definition(badge.type)
        console.print(
            f"[bold magenta]★ Badge earned:[/bold magenta] "
            f"{definition.title} - {definition.description}"
        )


@click.command()
@click.pass_context
def today(ctx: click.Context) -> None:
    """Show today's entry."""
    service = get_service(ctx)
    entry = service.today_entry()

    if entry is None:
        console.print(Panel(
            "[dim]Nothing written yet today[/dim]\n\n"
            "Run [cyan]microdiary write \"...\" --score N[/cyan]",
            title=f"[bold]{service.today().isoformat()}[/bold]",
            border_style="dim",
        ))
        return

    day, score, text, flags = format_entry_row(entry)
    console.print(Panel(
        f"{text}\n\nSatisfaction: {score} / 100 {flags}",
        title=f"[bold]{day}[/bold]",
        border_style="cyan",
    ))

    last_year = service.anniversary()
    if last_year is not None:
        console.print(f"[dim]One year ago:[/dim] {last_year.text}")


@click.command()
@click.argument("entry_id")
@click.argument("text")
@click.option(
    "--score", "-s",
    type=click.IntRange(0, 100),
    required=True,
    help="New satisfaction score 0-100.",
)
@click.pass_context
def edit(ctx: click.Context, entry_id: str, text: str, score: int) -> None:
    """Edit an entry.

    Today's entry can always be edited; older entries need premium.
    ENTRY_ID may be the short ID shown by `history`.
    """
    service = get_service(ctx)

    matches = [e for e in service.all_entries() if e.id.startswith(entry_id)]
    if len(matches) != 1:
        _fail(f"No unique entry matches ID '{entry_id}'")

    try:
        entry = service.edit_entry(matches[0].id, text, score)
    except (ValueError, LookupError, PermissionError) as e:
        _fail(str(e))

    console.print(f"[green]✓[/green] Updated entry for [bold]{entry.date}[/bold]")


@click.command()
@click.option("--search", "-q", default=None, help="Filter by text (premium).")
@click.option(
    "--sort",
    type=click.Choice(SORT_CHOICES),
    default="date_desc",
    show_default=True,
    help="Sort order (satisfaction sorts are premium).",
)
@click.pass_context
def history(ctx: click.Context, search: Optional[str], sort: str) -> None:
    """List past entries.

    \b
    Examples:
      microdiary history
      microdiary history --search park --sort satisfaction_desc
    """
    from microdiary.engine import SortOption

    service = get_service(ctx)

    try:
        entries = service.history(query=search, sort=SortOption(sort))
    except PermissionError as e:
        _fail(str(e))

    if not entries:
        console.print(Panel(
            "[dim]No entries found[/dim]",
            title="[bold]History[/bold]",
            border_style="dim",
        ))
        return

    console.print(_entries_table(f"History ({len(entries)})", entries))


@click.command()
@click.pass_context
def timeline(ctx: click.Context) -> None:
    """Show entries grouped by month."""
    from microdiary.engine import group_by_month

    service = get_service(ctx)
    groups = group_by_month(service.all_entries())

    if not groups:
        console.print("[dim]No entries yet[/dim]")
        return

    for month, entries in groups:
        console.print(_entries_table(month, entries))
