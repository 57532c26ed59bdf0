"""Data models for namecraft.

This package defines:
- Definition items and their constraints (Item, Constraint)
- Per-run item state (ItemState, RunState)
- The questionnaire outcome (WorkflowResult)
- Definition check findings (DefinitionIssue, DefinitionReport)

Items and results are Pydantic models, so definition files are validated
on load and results serialize directly to JSON.

Example:
    >>> from namecraft.models import Item
    >>> Item.model_validate({"id": "a", "prompt": "Animal", "default": "cat"})
"""

from .issues import DefinitionIssue, DefinitionReport
from .item import Constraint, Item
from .result import WorkflowResult
from .run_state import ItemState, RunState

__all__ = [
    "Constraint",
    "DefinitionIssue",
    "DefinitionReport",
    "Item",
    "ItemState",
    "RunState",
    "WorkflowResult",
]
