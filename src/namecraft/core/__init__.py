"""Core business logic for namecraft.

This package contains the questionnaire logic with no file I/O:
- constraints: item inclusion decisions
- workflow: the prompt/answer state machine and name assembly
- validation: static definition checks
"""

from .constraints import constraint_satisfied, evaluate_constraints
from .validation import check_definition
from .workflow import WorkflowEngine, WorkflowState, format_prompt

__all__ = [
    "WorkflowEngine",
    "WorkflowState",
    "check_definition",
    "constraint_satisfied",
    "evaluate_constraints",
    "format_prompt",
]
