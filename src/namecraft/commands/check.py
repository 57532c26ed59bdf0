"""Check command: report problems in a definition file."""

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from ..constants import EXIT_DEFINITION_ERROR
from ..core import check_definition
from ..output import get_output_context
from ._common import load_config_or_exit, load_definition_or_exit, resolve_files


def check(
    definition: Path | None = typer.Option(
        None,
        "--definition",
        "-d",
        help="Definition file (default: definition.json)",
    ),
) -> None:
    """Check the definition for duplicate ids and bad constraint references."""
    ctx = get_output_context()
    cwd = Path.cwd()

    config = load_config_or_exit(ctx, cwd)
    files = resolve_files(config, cwd, definition)
    items = load_definition_or_exit(ctx, files.definition)
    report = check_definition(items)

    if ctx.json_mode:
        ctx.print_json({"ok": report.ok, **report.model_dump()})
    elif not report.issues:
        ctx.success(f"{files.definition}: {report.item_count} items, no issues")
    else:
        table = Table(title=str(files.definition))
        table.add_column("#", justify="right")
        table.add_column("Item")
        table.add_column("Severity")
        table.add_column("Issue")
        for issue in report.issues:
            color = "red" if issue.severity == "error" else "yellow"
            table.add_row(
                str(issue.position + 1),
                escape(issue.item_id),
                f"[{color}]{issue.severity}[/{color}]",
                escape(issue.hint),
            )
        ctx.console.print(table)
        ctx.print(f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)")

    if not report.ok:
        raise typer.Exit(EXIT_DEFINITION_ERROR)
