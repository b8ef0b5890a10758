"""Command-line interface for track-export."""

import logging
from pathlib import Path
from typing import Annotated, Optional, Sequence

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from track_export.core.models import Cancelled, ExportSummary, Selected, Selection, Track
from track_export.core.orchestrator import export_audio_tracks
from track_export.exceptions import ProjectFileError, TrackExportError
from track_export.hosts import LocalHost, default_formats, load_project

app = typer.Typer(
    name="track-export",
    help="Export every audio track of a project to its own audio file",
    no_args_is_help=True,
)
console = Console()

log = logging.getLogger(__name__)

CANCEL_CHOICE = "c"


def setup_logging(console: Console, level: str = "INFO") -> None:
    """Route the package's log records through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                show_path=False,
                show_level=False,
                markup=False,
            )
        ],
    )


class ConsolePresenter:
    """Blocking choices and notices on the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def prompt_choice(
        self, title: str, items: Sequence[str], prompt: str = ""
    ) -> Selection[str]:
        """Show a numbered list and wait for a pick.

        The first entry is the default. Entering 'c', Ctrl-C or end of input
        cancels.
        """
        self.console.print(f"\n[bold]{title}[/bold]")
        if prompt:
            self.console.print(prompt)
        for i, item in enumerate(items, start=1):
            self.console.print(f"  [cyan]{i}[/cyan]. {escape(item)}")

        choices = [str(i) for i in range(1, len(items) + 1)] + [CANCEL_CHOICE]
        try:
            answer = Prompt.ask(
                f"Select 1-{len(items)} or '{CANCEL_CHOICE}' to cancel",
                choices=choices,
                default="1",
                show_choices=False,
                console=self.console,
            )
        except (KeyboardInterrupt, EOFError):
            return Cancelled()

        if answer == CANCEL_CHOICE:
            return Cancelled()
        return Selected(items[int(answer) - 1])

    def notify(self, title: str, message: str) -> None:
        self.console.print(Panel(Text(message), title=title, expand=False))


def display_summary_table(summary: ExportSummary, title: str = "Exported Tracks") -> None:
    """Display the files written by an export run.

    Args:
        summary: Result of the run
        title: Table title
    """
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("File", style="cyan", no_wrap=True)

    for i, path in enumerate(summary.files, start=1):
        table.add_row(str(i), path.name)

    console.print(table)
    console.print(f"Format: {summary.format_name} / {summary.profile_name}")


def print_progress(done: int, total: int, track: Track) -> None:
    name = escape(track.name) if track.name else "(unnamed)"
    console.print(f"  [green]✓[/green] {name} ({done}/{total})")


@app.command()
def export(
    project_file: Annotated[
        Path,
        typer.Argument(help="Project file (JSON) whose audio tracks are exported"),
    ],
) -> None:
    """Render each audio track of a project to its own file.

    You'll be asked for an output format and a profile. Files are written
    to an AudioExports folder next to the project file.
    """
    try:
        project = load_project(project_file)
    except ProjectFileError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    host = LocalHost(project)
    presenter = ConsolePresenter(console)

    try:
        summary = export_audio_tracks(
            host, host, host, presenter, on_progress=print_progress
        )
    except TrackExportError:
        log.debug("Export aborted", exc_info=True)
        raise typer.Exit(1)

    if summary is not None and summary.files:
        display_summary_table(summary)


@app.command()
def formats() -> None:
    """List the render formats and profiles available on this machine."""
    table = Table(title="Render Formats")
    table.add_column("Format", style="cyan", no_wrap=True)
    table.add_column("Extension")
    table.add_column("Profile")
    table.add_column("Available", justify="center")

    for fmt in default_formats():
        for profile in fmt.profiles:
            available = "[green]yes[/green]" if profile.is_valid() else "[red]no[/red]"
            table.add_row(fmt.name, fmt.extension, profile.name, available)

    console.print(table)


@app.callback()
def main() -> None:
    """Export every audio track of a project to its own audio file."""
    setup_logging(console)


if __name__ == "__main__":
    app()
