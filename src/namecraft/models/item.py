"""Definition item models.

An item is one question in the definition file. Items are loaded once per
run and never mutated; per-run state lives in ItemState.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import TemplateError
from ..template import compile_template


def coerce_scalar(value: Any) -> Any:
    """Accept JSON numbers and booleans where a string is expected."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, int | float):
        return str(value)
    return value


class Constraint(BaseModel):
    """Inclusion rule tying an item to another item's answer.

    Attributes:
        id: Id of the referenced item.
        answers: Acceptable answers for the referenced item (case-insensitive).
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Referenced item id")
    answers: list[str] = Field(default_factory=list, description="Acceptable answers")

    @field_validator("answers", mode="before")
    @classmethod
    def coerce_answers(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [coerce_scalar(v) for v in value]
        return value


class Item(BaseModel):
    """One question in the definition.

    Attributes:
        id: Unique key, used for constraints and answer memory.
        prompt: Question text shown to the operator.
        default: Answer used in use-defaults mode.
        order: Position of the item's fragment in the final name.
        format: Format expression applied to the answer (``${0}`` is the answer).
        constraints: All must be satisfied for the item to be asked.

    Example:
        >>> item = Item(id="color", prompt="Color", order=1, format="${0}-colored")
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique item key")
    prompt: str = Field(description="Question text")
    default: str = Field(default="", description="Answer used in use-defaults mode")
    order: int = Field(default=0, description="Output ordering key")
    format: str = Field(default="${0}", description="Format expression for the answer")
    constraints: list[Constraint] = Field(
        default_factory=list, description="Inclusion constraints"
    )

    @field_validator("default", mode="before")
    @classmethod
    def coerce_default(cls, value: Any) -> Any:
        if value is None:
            return ""
        return coerce_scalar(value)

    @field_validator("constraints", mode="before")
    @classmethod
    def coerce_constraints(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("format")
    @classmethod
    def validate_format(cls, value: str) -> str:
        """Ensure the format parses and only references the answer."""
        try:
            template = compile_template(value)
        except TemplateError as e:
            raise ValueError(str(e)) from e
        if template.keys or template.positions - {0}:
            raise ValueError(f"Format {value!r} may only reference ${{0}}")
        return value
