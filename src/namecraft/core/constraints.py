"""Constraint evaluation for definition items.

An item is included in a run only when every one of its constraints is
satisfied by the answers given so far.
"""

import logging

from ..models import Constraint, Item, RunState

logger = logging.getLogger(__name__)


def constraint_satisfied(constraint: Constraint, run_state: RunState) -> bool:
    """Check one constraint against the current answers.

    The referenced item's answer must match one of the allowed answers,
    ignoring case. A referenced item without an answer yet (excluded, or not
    reached) counts as having answered the empty string.

    Args:
        constraint: Constraint to check
        run_state: Current run state

    Returns:
        True if satisfied; False otherwise, including when the referenced
        id does not exist in the definition
    """
    other = run_state.lookup(constraint.id)
    if other is None:
        logger.warning(f"Could not find constraint id: {constraint.id}")
        return False

    answer = (other.answer or "").casefold()
    return any(allowed.casefold() == answer for allowed in constraint.answers)


def evaluate_constraints(item: Item, run_state: RunState) -> bool:
    """Decide whether an item should be included in this run.

    Every constraint is evaluated; the result is their logical AND.

    Args:
        item: Item to evaluate
        run_state: Current run state

    Returns:
        True if the item has no constraints or all are satisfied
    """
    include = True
    for constraint in item.constraints:
        if not constraint_satisfied(constraint, run_state):
            logger.debug(f"Item '{item.id}': constraint on '{constraint.id}' not satisfied")
            include = False
    return include
