"""
CLI Editing Commands

edit, write, restore, diff
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from scalpel.diff import character_diff, line_diff, unified_diff
from scalpel.editing import EditFacade, FileStore
from scalpel.exceptions import AccessDeniedError, BackupError, ConfigError, StorageError
from scalpel.logging_config import logger
from scalpel.schemas import EditErrorCode, EditRequest
from scalpel.user_config import UserConfig
from .config import CLIConfig
from .output import fail, get_console, print_diff, print_json

console = get_console()


def _read_argument(value: Optional[str], value_file: Optional[Path], name: str,
                   json_output: bool) -> str:
    """Resolve an inline value or its --*-file variant."""
    if value is not None and value_file is not None:
        fail("CONFLICTING_ARGUMENTS", f"Use either --{name} or --{name}-file, not both", json_output)
    if value_file is not None:
        try:
            return value_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            fail("FILE_READ_ERROR", f"Failed to read {value_file}: {e}", json_output)
    if value is None:
        fail(
            "MISSING_ARGUMENT",
            f"Must provide either --{name} or --{name}-file",
            json_output,
            suggestions=[f"--{name} 'text'", f"--{name}-file path.txt"],
        )
    return value


def _build_facade(allow: Optional[List[str]], json_output: bool) -> EditFacade:
    try:
        config = UserConfig(Path.cwd()).editor_config(extra_allowed=allow)
    except ConfigError as e:
        fail("CONFIG_ERROR", str(e), json_output)
    return EditFacade(config)


def edit_cmd(
    file: Path = typer.Argument(..., help="Path to file to edit"),
    old: Optional[str] = typer.Option(None, "--old", "-o", help="Exact text to replace"),
    old_file: Optional[Path] = typer.Option(None, "--old-file", help="Read the text to replace from a file"),
    new: Optional[str] = typer.Option(None, "--new", "-n", help="Replacement text (may be empty)"),
    new_file: Optional[Path] = typer.Option(None, "--new-file", help="Read the replacement text from a file"),
    expected: int = typer.Option(1, "--expected", "-e", min=1, help="Number of occurrences that must be present"),
    no_backup: bool = typer.Option(False, "--no-backup", help="Skip the backup snapshot"),
    format_after: bool = typer.Option(False, "--format", help="Run the formatter for this file type after editing"),
    allow: Optional[List[str]] = typer.Option(None, "--allow", "-a", help="Additional allowed directory (repeatable)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replace every exact occurrence of a text in a file.

    The edit is rejected unless the text occurs exactly --expected times.
    When it does not occur at all, the closest near-miss is reported.
    """
    old_pattern = _read_argument(old, old_file, "old", json_output)
    new_pattern = _read_argument(new, new_file, "new", json_output)

    facade = _build_facade(allow, json_output)
    request = EditRequest(
        path=str(file),
        old_pattern=old_pattern,
        new_pattern=new_pattern,
        expected_replacements=expected,
        create_backup=not no_backup,
        format_after_edit=format_after,
    )

    try:
        result = facade.edit(request)
    except StorageError as e:
        fail("FILE_ERROR", str(e), json_output)

    if CLIConfig.is_machine_mode() or json_output:
        print_json(result.model_dump(mode="json"))
    elif result.success:
        console.print(f"[green]✓[/green] Replaced {result.replacement_count} occurrence(s) in {escape(str(file))}")
        console.print(f"  Change: {escape(result.diff.rendered)}")
        if result.backup_path:
            console.print(f"  Backup: {escape(result.backup_path)}")
        if format_after and not result.formatted:
            console.print("  [yellow]Formatting skipped[/yellow]")
        if result.unified_diff:
            print_diff(result.unified_diff)
    else:
        console.print(f"[red]✗[/red] Edit rejected ({result.error_code.value}): {escape(result.error)}")
        if result.error_code == EditErrorCode.NO_MATCH and result.suggestion:
            console.print(
                f"  Closest match at offset {result.suggestion.window_start} "
                f"(score {result.suggestion.score:.2f}): {escape(result.suggestion.diff.rendered)}"
            )

    if not result.success:
        raise typer.Exit(code=1)


def write_cmd(
    file: Path = typer.Argument(..., help="Path to file to write"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New file content"),
    content_file: Optional[Path] = typer.Option(None, "--content-file", help="Read the new content from a file"),
    no_backup: bool = typer.Option(False, "--no-backup", help="Skip the backup snapshot"),
    allow: Optional[List[str]] = typer.Option(None, "--allow", "-a", help="Additional allowed directory (repeatable)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replace a file's whole content, backing up the previous version.
    """
    new_content = _read_argument(content, content_file, "content", json_output)
    facade = _build_facade(allow, json_output)

    try:
        result = facade.write_file(str(file), new_content, create_backup=not no_backup)
    except StorageError as e:
        fail("FILE_ERROR", str(e), json_output)

    if CLIConfig.is_machine_mode() or json_output:
        print_json(result.model_dump(mode="json"))
    elif result.success:
        action = "Created" if result.new_file else "Updated"
        console.print(f"[green]✓[/green] {action} {escape(str(file))} ({result.changes_count} changed char(s))")
        if result.backup_path:
            console.print(f"  Backup: {escape(result.backup_path)}")
    else:
        console.print(f"[red]✗[/red] {escape(result.error)}")

    if not result.success:
        raise typer.Exit(code=1)


def restore_cmd(
    backup: Path = typer.Argument(..., help="Backup file created by edit or write"),
    allow: Optional[List[str]] = typer.Option(None, "--allow", "-a", help="Additional allowed directory (repeatable)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Copy a backup over the file it was taken from.
    """
    facade = _build_facade(allow, json_output)

    try:
        record = facade.restore_backup(str(backup))
    except AccessDeniedError as e:
        fail(EditErrorCode.ACCESS_DENIED.value, str(e), json_output)
    except BackupError as e:
        fail("BACKUP_ERROR", str(e), json_output)

    if CLIConfig.is_machine_mode() or json_output:
        print_json({"status": "ok", **record.model_dump(mode="json")})
    else:
        console.print(f"[green]✓[/green] Restored {escape(record.original_path)}")


def diff_cmd(
    old: Path = typer.Argument(..., help="Original file", exists=True, dir_okay=False),
    new: Path = typer.Argument(..., help="Modified file", exists=True, dir_okay=False),
    context: int = typer.Option(3, "--context", "-U", min=0, help="Context lines around each change"),
    chars: bool = typer.Option(False, "--chars", help="Character diff instead of line diff"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show the differences between two files.
    """
    store = FileStore()
    try:
        old_text = store.read(str(old))
        new_text = store.read(str(new))
    except StorageError as e:
        fail("FILE_ERROR", str(e), json_output)

    if chars:
        result = character_diff(old_text, new_text)
        if CLIConfig.is_machine_mode() or json_output:
            print_json(result.model_dump(mode="json"))
        else:
            console.print(escape(result.rendered))
            console.print(f"[dim]{result.change_magnitude} changed char(s)[/dim]")
        return

    udiff = unified_diff(old_text, new_text, context_lines=context,
                         from_file=str(old), to_file=str(new))
    logger.debug(f"Diff of {old} and {new}: {len(udiff.hunks)} hunk(s)")

    if CLIConfig.is_machine_mode() or json_output:
        print_json({
            "entries": [e.model_dump(mode="json") for e in line_diff(old_text, new_text)],
            "hunks": [
                {"header": h.header, **h.model_dump(mode="json")} for h in udiff.hunks
            ],
            "unified": udiff.render(),
        })
    elif udiff.is_empty:
        console.print("[dim]No differences[/dim]")
    else:
        print_diff(udiff.render())
