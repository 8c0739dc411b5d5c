"""
CLI Output Utilities

Machine-aware output functions that adapt based on machine mode.
"""

import json
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

from scalpel.cli.config import CLIConfig

_console = Console()


def print_json(data: Any, minified: Optional[bool] = None) -> None:
    """
    Print JSON data. In machine mode, always minifies; otherwise pretty prints.
    """
    if minified is None:
        minified = CLIConfig.is_machine_mode()

    if minified:
        typer.echo(json.dumps(data, separators=(',', ':')))
    else:
        typer.echo(json.dumps(data, indent=2))


def structured_error(code: str, message: str, input_value: Optional[str] = None,
                     suggestions: Optional[list] = None) -> dict:
    """
    Create a structured error object for machine mode.

    Args:
        code: Error code (e.g., "NO_MATCH", "FILE_ERROR")
        message: Human-readable error message
        input_value: The input that caused the error
        suggestions: List of alternative suggestions

    Returns:
        Structured error dictionary
    """
    error_obj = {
        "status": "error",
        "code": code,
        "message": message
    }
    if input_value:
        error_obj["input"] = input_value
    if suggestions:
        error_obj["suggestions"] = suggestions
    return error_obj


def fail(code: str, message: str, json_output: bool = False,
         suggestions: Optional[list] = None) -> None:
    """Report an error in the active output mode and exit with status 1."""
    if CLIConfig.is_machine_mode() or json_output:
        print_json(structured_error(code=code, message=message, suggestions=suggestions))
    else:
        _console.print(f"[red]Error:[/red] {escape(message)}")
        for suggestion in suggestions or []:
            _console.print(f"  [dim]Try:[/dim] {escape(suggestion)}")
    raise typer.Exit(code=1)


def print_diff(text: str) -> None:
    """Print unified diff text with added/removed lines colored."""
    for line in text.splitlines():
        if line.startswith("@@"):
            _console.print(f"[cyan]{escape(line)}[/cyan]")
        elif line.startswith("+"):
            _console.print(f"[green]{escape(line)}[/green]")
        elif line.startswith("-"):
            _console.print(f"[red]{escape(line)}[/red]")
        else:
            _console.print(escape(line))


def get_console() -> Console:
    """Get the console instance for human-mode output."""
    return _console
