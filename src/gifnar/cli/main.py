"""Command-line interface for gifnar."""

import logging
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table

from gifnar.entries import split_tags
from gifnar.session import VolunteerLog
from gifnar.settings import get_settings
from gifnar.storage import EntryStore, FileKeyValueStore


def _setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


class ExportFormat(str, Enum):
    """Supported export formats."""

    JSON = "json"
    CSV = "csv"


app = typer.Typer(
    name="gifnar",
    help="Local-first volunteer hours log.",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Track volunteering sessions and export them for reports."""
    _setup_logging(verbose)


def _make_alert_callback(console: Console):
    """Create a Rich-based alert callback."""

    def callback(message: str) -> None:
        console.print(f"[red]✗[/red] {message}")

    return callback


def _make_confirm_callback(console: Console, assume_yes: bool = False):
    """Create a Rich-based yes/no prompt callback."""

    def callback(message: str) -> bool:
        if assume_yes:
            return True
        return Confirm.ask(f"[yellow]{message}[/yellow]", default=False, console=console)

    return callback


def _make_download_callback(console: Console, output_dir: Path):
    """Create a callback that writes exports into output_dir."""

    def callback(filename: str, text: str) -> None:
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / filename
        path.write_text(text, encoding="utf-8")
        console.print(f"[green]✓[/green] Exported to {path}")

    return callback


def _open_log(
    assume_yes: bool = False,
    output_dir: Path | None = None,
) -> VolunteerLog:
    """Build a VolunteerLog over the configured on-disk store."""
    settings = get_settings()
    store = EntryStore(FileKeyValueStore(settings.data_dir), key=settings.storage_key)
    return VolunteerLog(
        store,
        on_alert=_make_alert_callback(console),
        on_confirm=_make_confirm_callback(console, assume_yes),
        on_download=_make_download_callback(console, output_dir or settings.export_dir),
    )


@app.command()
def add(
    org: Annotated[
        str,
        typer.Option("--org", "-o", help="Organization, e.g. Houston Food Bank."),
    ] = "",
    hours: Annotated[str, typer.Option("--hours", help="Hours volunteered.")] = "1.0",
    entry_date: Annotated[
        str | None,
        typer.Option("--date", "-d", help="Session date (YYYY-MM-DD). Defaults to today."),
    ] = None,
    tasks: Annotated[str, typer.Option("--tasks", help="Tasks or role.")] = "",
    reflection: Annotated[
        str,
        typer.Option("--reflection", "-r", help="What did you learn?"),
    ] = "",
    tags: Annotated[str, typer.Option("--tags", "-t", help="Comma-separated tags.")] = "",
) -> None:
    """Log a volunteering session."""
    log = _open_log()
    entry = log.add(
        entry_date if entry_date is not None else date.today().isoformat(),
        org,
        hours,
        tasks=tasks,
        reflection=reflection,
        tags=tags,
    )
    if entry is None:
        raise typer.Exit(code=1)
    name = escape(entry.org)
    console.print(
        f"[green]✓[/green] Logged {entry.hours} hours at [bold]{name}[/bold] on {entry.date}"
    )


@app.command("list")
def list_entries() -> None:
    """Show saved entries, newest first."""
    log = _open_log()

    table = Table(title=f"Saved Entries ({log.count})")
    table.add_column("Date", style="cyan")
    table.add_column("Organization", style="bold")
    table.add_column("Hours", justify="right", style="green")
    table.add_column("Tasks")
    table.add_column("Reflection")
    table.add_column("Tags", style="yellow")
    table.add_column("Created", style="dim")

    for e in log.entries:
        tags = ", ".join(split_tags(e.tags))
        table.add_row(e.date, e.org, str(e.hours), e.tasks, e.reflection, tags, e.created_at)

    console.print(table)
    console.print(f"Total hours: [bold]{log.total_hours:g}[/bold]")


@app.command()
def export(
    fmt: Annotated[ExportFormat, typer.Argument(help="Export format.")],
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Directory to write the export into."),
    ] = None,
) -> None:
    """Export all entries as JSON or CSV."""
    log = _open_log(output_dir=output_dir)
    if fmt == ExportFormat.JSON:
        log.export_json()
    else:
        log.export_csv()


@app.command()
def clear(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Do not ask for confirmation."),
    ] = False,
) -> None:
    """Clear ALL saved entries on this device."""
    log = _open_log(assume_yes=yes)
    if log.clear_all():
        console.print("[green]✓[/green] All entries cleared")
    else:
        console.print("[dim]Nothing cleared[/dim]")


if __name__ == "__main__":
    app()
