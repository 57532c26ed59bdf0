"""Shared helpers for CLI commands."""

from pathlib import Path

import typer

from ..config import FilesConfig, NamecraftConfig, load_config
from ..constants import EXIT_DEFINITION_ERROR
from ..errors import ConfigError, DefinitionError
from ..models import Item
from ..output import OutputContext
from ..services import load_definition


def load_config_or_exit(ctx: OutputContext, directory: Path) -> NamecraftConfig:
    """Load namecraft.toml, exiting with code 1 if it is invalid."""
    try:
        return load_config(directory)
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(EXIT_DEFINITION_ERROR) from None


def resolve_files(
    config: NamecraftConfig,
    directory: Path,
    definition: Path | None = None,
    answers: Path | None = None,
) -> FilesConfig:
    """Get file locations, letting command-line paths override config."""
    files = config.resolve_files(directory)
    return FilesConfig(
        definition=definition or files.definition,
        answers=answers or files.answers,
    )


def load_definition_or_exit(ctx: OutputContext, path: Path) -> list[Item]:
    """Load the definition file, exiting with code 1 if it is unusable."""
    try:
        return load_definition(path)
    except DefinitionError as e:
        ctx.error(str(e), {"definition": str(path)})
        raise typer.Exit(EXIT_DEFINITION_ERROR) from None
