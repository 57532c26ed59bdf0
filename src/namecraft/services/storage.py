"""Definition and answer memory file access.

The definition file is required: failing to read or parse it aborts the
run. The answers file is optional: when it is missing or unusable the run
falls back to item defaults.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Any

from pydantic import BeforeValidator, TypeAdapter, ValidationError

from ..constants import DEFAULTS_ADVISORY
from ..errors import AnswerMemoryUnavailable, DefinitionMalformed, DefinitionUnavailable
from ..models import Item
from ..models.item import coerce_scalar

logger = logging.getLogger(__name__)

_DEFINITION_ADAPTER = TypeAdapter(list[Item])


def _coerce_answer(value: Any) -> Any:
    """Read null as an empty answer and numbers as their JSON text."""
    return "" if value is None else coerce_scalar(value)


_ANSWERS_ADAPTER = TypeAdapter(dict[str, Annotated[str, BeforeValidator(_coerce_answer)]])


@dataclass
class AnswerMemoryLoad:
    """Result of loading the answers file.

    Attributes:
        data: Answers by item id (empty when falling back to defaults).
        use_defaults: True if items should be seeded from their defaults.
        message: Advisory to show the operator, if any.
    """

    data: dict[str, str] = field(default_factory=dict)
    use_defaults: bool = False
    message: str | None = None


def load_definition(path: Path) -> list[Item]:
    """Load and validate the definition file.

    Args:
        path: Path to the definition JSON file

    Returns:
        Items in definition order

    Raises:
        DefinitionUnavailable: If the file cannot be read
        DefinitionMalformed: If the file is not a valid JSON item list
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DefinitionUnavailable(
            f"Unable to read definition file: {path}. Cannot continue."
        ) from e
    except UnicodeDecodeError as e:
        raise DefinitionMalformed(
            f"Unable to parse definition file: {path}. Cannot continue."
        ) from e

    try:
        items = _DEFINITION_ADAPTER.validate_json(text)
    except ValidationError as e:
        logger.debug(f"Definition validation errors:\n{e}")
        raise DefinitionMalformed(
            f"Unable to parse definition file: {path}. Cannot continue."
        ) from e

    logger.debug(f"Loaded {len(items)} items from {path}")
    return items


def load_answers(path: Path) -> AnswerMemoryLoad:
    """Load the answers remembered from the previous run.

    A missing file silently selects use-defaults mode; an unparseable one
    selects it with an advisory message.

    Args:
        path: Path to the answers JSON file

    Returns:
        Loaded answers and the seeding mode

    Raises:
        AnswerMemoryUnavailable: If the file exists but cannot be read
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug(f"No answers file at {path}, using defaults")
        return AnswerMemoryLoad(use_defaults=True)
    except OSError as e:
        raise AnswerMemoryUnavailable(f"Unable to read answers file: {path}") from e
    except UnicodeDecodeError:
        return AnswerMemoryLoad(use_defaults=True, message=DEFAULTS_ADVISORY)

    try:
        data = _ANSWERS_ADAPTER.validate_json(text)
    except ValidationError as e:
        logger.debug(f"Answers file {path} is malformed: {e}")
        return AnswerMemoryLoad(use_defaults=True, message=DEFAULTS_ADVISORY)

    return AnswerMemoryLoad(data=data)


def save_answers(path: Path, answers: dict[str, str]) -> None:
    """Write the answer memory, replacing any previous content.

    Args:
        path: Path to the answers JSON file
        answers: Answers by item id

    Raises:
        AnswerMemoryUnavailable: If the file cannot be written
    """
    try:
        path.write_text(json.dumps(answers, indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise AnswerMemoryUnavailable(f"Unable to write answers file: {path}") from e
    logger.debug(f"Saved {len(answers)} answers to {path}")
