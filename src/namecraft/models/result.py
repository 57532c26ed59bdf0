"""Workflow result model."""

from pydantic import BaseModel, Field


class WorkflowResult(BaseModel):
    """Outcome of a completed questionnaire.

    Attributes:
        name: Composed name (fragments joined by the separator).
        fragments: Rendered fragments in output order.
        answers: Updated answer memory to persist.
    """

    name: str = Field(description="Composed name")
    fragments: list[str] = Field(default_factory=list, description="Rendered fragments")
    answers: dict[str, str] = Field(default_factory=dict, description="Updated answer memory")
