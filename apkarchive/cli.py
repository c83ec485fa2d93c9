"""
apkarchive CLI.

Command-line interface for generating archived manifests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .core.config import get_config
from .core.exceptions import ArchiveError
from .core.logging import setup_logging
from .manifest.xml_io import to_xml
from .services.archive import ArchiveService, ArchiveSummary

app = typer.Typer(
    name="apkarchive",
    help="Generate the minimal manifest of an archived Android app",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from . import __version__
        console.print(f"apkarchive v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """apkarchive: AndroidManifest.xml to archived manifest."""
    pass


@app.command()
def archive(
    manifest_path: Path = typer.Argument(
        ...,
        help="Path to a text AndroidManifest.xml",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to write the archived manifest (prints XML to stdout if omitted)",
    ),
    reject_headless: bool = typer.Option(
        False,
        "--reject-headless",
        help="Fail if the app has no launcher or TV launcher activity",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose logging",
    ),
) -> None:
    """Create the archived variant of an AndroidManifest.xml."""
    config = get_config().model_copy(deep=True)
    if verbose:
        config.log_level = "DEBUG"
    if reject_headless:
        config.archive.reject_headless_apps = True
    setup_logging(config)

    service = ArchiveService(config)
    try:
        archived, summary = service.archive_file(manifest_path, output)
    except ArchiveError as e:
        console.print(f"[bold red]✗ Archiving failed:[/bold red] {e}")
        raise typer.Exit(1)

    if output is None:
        typer.echo(to_xml(archived))
        err_console.print(_summary_table(summary))
        return

    console.print(f"\n[bold green]✓ Archived manifest written to[/bold green] {output}\n")
    console.print(_summary_table(summary))


def _summary_table(summary: ArchiveSummary) -> Table:
    table = Table(title="Archived Manifest")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Package", summary.package_name or "-")
    table.add_row("Manifest attributes", ", ".join(summary.manifest_attributes) or "-")
    table.add_row("Application attributes", ", ".join(summary.application_attributes) or "-")
    table.add_row(
        "Kept elements",
        ", ".join(f"{name} x{count}" for name, count in summary.kept_elements.items()) or "-",
    )
    table.add_row(
        "allowBackup", "unset" if summary.allow_backup is None else str(summary.allow_backup).lower()
    )
    table.add_row("Launcher categories", ", ".join(summary.launcher_categories) or "[yellow]none[/yellow]")
    table.add_row("TV support", "[green]yes[/green]" if summary.tv_support else "no")
    return table


if __name__ == "__main__":
    app()
