import typer

from scalpel import __version__
from scalpel.cli import editing
from scalpel.cli.config import CLIConfig
from scalpel.logging_config import reset_logging, setup_logging

app = typer.Typer()


@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: colored output instead of JSON (also via SCALPEL_HUMAN_MODE env var)"
    ),
):
    """
    Scalpel: exact-match file editing with backups and diffs.

    Machine mode is DEFAULT (JSON output).
    Use --human/-H for pretty output.
    """
    if human:
        CLIConfig.set_machine_mode(False)
    else:
        CLIConfig.set_machine_mode(None)
        # Keep stdout/stderr clean for JSON consumers
        reset_logging()
        setup_logging(suppress_console=True)


app.command(name="edit")(editing.edit_cmd)
app.command(name="write")(editing.write_cmd)
app.command(name="restore")(editing.restore_cmd)
app.command(name="diff")(editing.diff_cmd)


@app.command()
def version():
    """
    Prints the current version of Scalpel.
    """
    typer.echo(f"Scalpel v{__version__}")


def main():
    app()


if __name__ == "__main__":
    main()
