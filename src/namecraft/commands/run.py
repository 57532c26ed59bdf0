"""Run command: answer the questionnaire and print the composed name."""

import logging
from pathlib import Path

import typer

from ..constants import EXIT_ANSWERS_ERROR, EXIT_CANCELLED, FAREWELL_MESSAGE
from ..core import WorkflowEngine, check_definition
from ..errors import AnswerMemoryUnavailable, PromptCancelled
from ..output import get_output_context
from ..services import ConsoleTransport, load_answers, save_answers
from ._common import load_config_or_exit, load_definition_or_exit, resolve_files

logger = logging.getLogger(__name__)


def run(
    definition: Path | None = typer.Option(
        None,
        "--definition",
        "-d",
        help="Definition file (default: definition.json)",
    ),
    answers: Path | None = typer.Option(
        None,
        "--answers",
        "-a",
        help="Answer memory file (default: answers.json)",
    ),
    defaults: bool = typer.Option(
        False,
        "--defaults",
        help="Start every question from its default instead of the last answer",
    ),
) -> None:
    """Answer the questionnaire and print the composed name."""
    ctx = get_output_context()
    cwd = Path.cwd()

    config = load_config_or_exit(ctx, cwd)
    files = resolve_files(config, cwd, definition, answers)
    items = load_definition_or_exit(ctx, files.definition)

    for issue in check_definition(items).issues:
        logger.info(f"Definition {issue.severity}: {issue.item_id}: {issue.hint}")

    try:
        memory = load_answers(files.answers)
    except AnswerMemoryUnavailable as e:
        ctx.error(str(e), {"answers": str(files.answers)})
        raise typer.Exit(EXIT_ANSWERS_ERROR) from None
    if memory.message:
        ctx.warning(memory.message)

    engine = WorkflowEngine(
        items,
        ConsoleTransport(ctx.console),
        memory=memory.data,
        use_defaults=defaults or memory.use_defaults,
        naming=config.naming,
    )
    try:
        result = engine.run()
    except PromptCancelled:
        ctx.console.print(f"\n{FAREWELL_MESSAGE}")
        raise typer.Exit(EXIT_CANCELLED) from None

    ctx.name(result)

    if ctx.dry_run:
        ctx.print(f"[cyan][DRY RUN][/cyan] Would write answers to {files.answers}")
        return

    try:
        save_answers(files.answers, result.answers)
    except AnswerMemoryUnavailable as e:
        ctx.error(str(e), {"answers": str(files.answers)})
        raise typer.Exit(EXIT_ANSWERS_ERROR) from None
