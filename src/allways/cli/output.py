"""
CLI Output Utilities

Machine-aware output functions that adapt based on machine mode.
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from allways.cli.config import CLIConfig

_console = Console()
_err_console = Console(stderr=True)


def echo(message: str = "", err: bool = False) -> None:
    """Plain text output, never interpreted as markup."""
    typer.echo(message, err=err)


def print_status(markup: str, plain: str) -> None:
    """
    Print a status line: rich markup for humans, plain text in machine mode.
    """
    if CLIConfig.is_machine_mode():
        echo(plain)
    else:
        _console.print(markup, highlight=False, soft_wrap=True)


def print_json(data: dict, minified: Optional[bool] = None) -> None:
    """
    Print JSON data respecting machine mode.
    In machine mode, always minifies. In human mode, pretty prints.
    """
    if minified is None:
        minified = CLIConfig.is_machine_mode()

    if minified:
        echo(json.dumps(data, separators=(',', ':')))
    else:
        echo(json.dumps(data, indent=2))


def print_error(message: str, code: Optional[str] = None) -> None:
    """
    Print an error message to stderr.
    In machine mode, prefixes the error code instead of styling.
    """
    if CLIConfig.is_machine_mode():
        prefix = f"[{code}] " if code else ""
        echo(f"Error: {prefix}{message}", err=True)
    else:
        _err_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)


def print_diff(diff: str) -> None:
    """Print a unified diff, colorized for humans."""
    if CLIConfig.is_machine_mode() or not _console.is_terminal:
        typer.echo(diff, nl=False)
        return
    for line in diff.splitlines():
        if line.startswith(("+++", "---")):
            _console.print(f"[bold]{escape(line)}[/bold]", highlight=False)
        elif line.startswith("@@"):
            _console.print(f"[cyan]{escape(line)}[/cyan]", highlight=False)
        elif line.startswith("+"):
            _console.print(f"[green]{escape(line)}[/green]", highlight=False)
        elif line.startswith("-"):
            _console.print(f"[red]{escape(line)}[/red]", highlight=False)
        else:
            _console.print(escape(line), highlight=False)
