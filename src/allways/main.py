from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from allways import __version__
from allways.cli.config import CLIConfig
from allways.cli.output import print_diff, print_error, print_json, print_status
from allways.driver import process_files
from allways.logging_config import setup_logging
from allways.schemas import RunSummary
from allways.user_config import UserConfig

app = typer.Typer(add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"allways {__version__}")
        raise typer.Exit()


@app.command()
def main(
    paths: List[Path] = typer.Argument(..., help="Any number of python files."),
    check: bool = typer.Option(False, "--check", help="Don't write; exit 1 if any file would change."),
    diff: bool = typer.Option(False, "--diff", help="Don't write; print a unified diff of each change."),
    json_output: bool = typer.Option(False, "--json", help="Output a JSON summary."),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Parallel workers (default from config, 1)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    machine: Optional[bool] = typer.Option(None, "--machine/--human", help="Plain output without styling."),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
    ),
):
    """
    Automatically update `__all__` statements in python libraries.
    """
    CLIConfig.set_machine_mode(machine)
    config = UserConfig()
    setup_logging(
        level="DEBUG" if verbose else config.log_level,
        enable_file_logging=True if config.get("logging.file") else None,
        force=True,
    )

    write = not (check or diff)
    summary = process_files(
        paths,
        write=write,
        with_diff=diff,
        workers=workers or config.workers,
    )

    if json_output:
        print_json(summary.to_dict())
    else:
        _report(summary, write)

    if summary.failed or (not write and summary.modified):
        raise typer.Exit(code=1)


def _report(summary: RunSummary, write: bool) -> None:
    """Human/machine text report: one line per changed or failed file plus a summary."""
    verb = "Updating" if write else "Would update"
    for result in summary.results:
        if result.status == "modified":
            print_status(
                f"{verb} [bold]__all__[/bold] statement in [cyan]{escape(result.path)}[/cyan]",
                f"{verb} __all__ statement in {result.path}",
            )
            if result.diff:
                print_diff(result.diff)
        elif result.status == "failed":
            print_error(result.error or "unknown error", result.error_code)

    counts = (
        f"{len(summary.modified)} {'modified' if write else 'would change'}, "
        f"{len(summary.unchanged)} unchanged, {len(summary.failed)} failed"
    )
    if summary.failed:
        print_status(f"[red]{counts}[/red]", counts)
    else:
        print_status(f"[green]{counts}[/green]", counts)
