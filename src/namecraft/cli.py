"""Namecraft CLI: compose names from an interactive questionnaire."""

import typer

from namecraft import __version__

from .commands import check, init, run
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"namecraft {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="namecraft",
    help="Compose a name from answers to a questionnaire defined in definition.json",
)


@app.callback(invoke_without_command=True)
def main(
    typer_ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress warnings",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Do not write any files",
    ),
) -> None:
    """Namecraft - compose names from an interactive questionnaire.

    Without a command, runs the questionnaire.
    """
    console = configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
    )
    set_output_context(OutputContext(console=console, json_mode=json_output, dry_run=dry_run))

    if typer_ctx.invoked_subcommand is None:
        run(definition=None, answers=None, defaults=False)


app.command("run")(run)
app.command()(check)
app.command()(init)
