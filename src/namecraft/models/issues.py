"""Issue models for definition checks."""

from typing import Literal

from pydantic import BaseModel, Field


class DefinitionIssue(BaseModel):
    """Single problem found in a definition."""

    severity: Literal["error", "warning"]
    item_id: str
    position: int  # 0-based index in the definition
    hint: str


class DefinitionReport(BaseModel):
    """Result of checking a definition."""

    item_count: int = 0
    issues: list[DefinitionIssue] = Field(default_factory=list)

    @property
    def errors(self) -> list[DefinitionIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[DefinitionIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def ok(self) -> bool:
        return not self.errors
