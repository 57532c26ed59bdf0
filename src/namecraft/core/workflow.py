"""Questionnaire workflow engine.

Drives a definition through an explicit state machine:

    AWAITING_ITEM -> PROMPTING -> AWAITING_ANSWER -> AWAITING_ITEM ...
    AWAITING_ITEM -> FINALIZING -> DONE

Items are visited in definition order. Each item's inclusion is decided once,
when it is reached; excluded items are skipped without consuming input. Once
every item has been visited, included answers are ordered by their ``order``
field, rendered through their format expressions and joined into a name.
"""

import logging
from collections.abc import Mapping, Sequence
from enum import Enum

from ..config import NamingConfig
from ..errors import TemplateError
from ..models import Item, ItemState, RunState, WorkflowResult
from ..services.transport import PromptTransport
from ..template import render
from .constraints import evaluate_constraints

logger = logging.getLogger(__name__)


class WorkflowState(str, Enum):
    """States of the workflow engine."""

    AWAITING_ITEM = "awaiting_item"
    PROMPTING = "prompting"
    AWAITING_ANSWER = "awaiting_answer"
    FINALIZING = "finalizing"
    DONE = "done"


def format_prompt(item: Item, answer: str) -> str:
    """Build the prompt line for an item, showing the seeded answer as a hint."""
    return f"{item.prompt} [{answer}] ? "


class WorkflowEngine:
    """State machine that asks the questions and composes the name.

    Attributes:
        definition: Items in definition order.
        transport: Prompt channel to the operator.
        memory: Answers remembered from the previous run.
        use_defaults: Seed answers from item defaults instead of memory.
        naming: Separator, space replacement and clear token.
        run_state: Per-item inclusion and answers for this run.
        state: Current state machine state.
        result: Set once the workflow reaches DONE.

    Example:
        >>> engine = WorkflowEngine(items, ConsoleTransport(), memory=answers)
        >>> result = engine.run()
        >>> print(result.name)
    """

    def __init__(
        self,
        definition: Sequence[Item],
        transport: PromptTransport,
        memory: Mapping[str, str] | None = None,
        use_defaults: bool = False,
        naming: NamingConfig | None = None,
    ) -> None:
        self.definition = list(definition)
        self.transport = transport
        self.memory = dict(memory or {})
        self.use_defaults = use_defaults
        self.naming = naming or NamingConfig()
        self.run_state = RunState(self.definition)
        self.state = WorkflowState.AWAITING_ITEM
        self.result: WorkflowResult | None = None
        self._cursor = -1

    @property
    def current(self) -> ItemState | None:
        """State of the item under the cursor, if any."""
        if 0 <= self._cursor < len(self.run_state):
            return self.run_state[self._cursor]
        return None

    def seed_answer(self, item: Item) -> str:
        """Get the answer an item starts with before the operator responds."""
        if self.use_defaults:
            return item.default
        return self.memory.get(item.id, "")

    def apply_input(self, item_state: ItemState, line: str) -> None:
        """Apply one line of operator input to an item.

        An empty line keeps the seeded answer. The clear token empties it.
        Anything else, stripped of surrounding whitespace, replaces it.
        """
        if not line:
            return
        if line == self.naming.clear_token:
            item_state.answer = ""
        else:
            item_state.answer = line.strip()

    def step(self) -> WorkflowState:
        """Perform one state transition.

        Returns:
            The new state

        Raises:
            PromptCancelled: If the operator cancels while an answer is awaited
            RuntimeError: If the workflow has already finished
        """
        if self.state is WorkflowState.AWAITING_ITEM:
            self.state = self._advance()
        elif self.state is WorkflowState.PROMPTING:
            self.state = self._prompt()
        elif self.state is WorkflowState.AWAITING_ANSWER:
            self.state = self._await_answer()
        elif self.state is WorkflowState.FINALIZING:
            self._finalize()
        else:
            raise RuntimeError("Workflow has already finished")
        return self.state

    def run(self) -> WorkflowResult:
        """Run the questionnaire to completion.

        Returns:
            Composed name, fragments and updated answer memory

        Raises:
            PromptCancelled: If the operator cancels
        """
        while self.state is not WorkflowState.FINALIZING:
            self.step()
        return self._finalize()

    def _advance(self) -> WorkflowState:
        while True:
            self._cursor += 1
            item_state = self.current
            if item_state is None:
                return WorkflowState.FINALIZING

            item_state.include = evaluate_constraints(item_state.item, self.run_state)
            if item_state.include:
                item_state.answer = self.seed_answer(item_state.item)
                return WorkflowState.PROMPTING
            logger.debug(f"Skipping item '{item_state.item.id}'")

    def _prompt(self) -> WorkflowState:
        item_state = self._require_current()
        self.transport.show(format_prompt(item_state.item, item_state.answer or ""))
        return WorkflowState.AWAITING_ANSWER

    def _await_answer(self) -> WorkflowState:
        item_state = self._require_current()
        line = self.transport.next_line()
        self.apply_input(item_state, line)
        logger.debug(f"Item '{item_state.item.id}' answered {item_state.answer!r}")
        return WorkflowState.AWAITING_ITEM

    def _finalize(self) -> WorkflowResult:
        ordered = sorted(self.run_state, key=lambda s: s.item.order)
        answers = dict(self.memory)
        fragments: list[str] = []

        for item_state in ordered:
            if not item_state.include:
                continue
            answer = item_state.answer or ""
            answers[item_state.item.id] = answer
            if not answer:
                continue
            try:
                fragment = render(item_state.item.format, answer)
            except TemplateError as e:
                logger.error(f"Item '{item_state.item.id}': {e}")
                continue
            fragments.append(fragment.replace(" ", self.naming.space_replacement))

        self.result = WorkflowResult(
            name=self.naming.separator.join(fragments),
            fragments=fragments,
            answers=answers,
        )
        self.state = WorkflowState.DONE
        return self.result

    def _require_current(self) -> ItemState:
        item_state = self.current
        if item_state is None:
            raise RuntimeError(f"No current item in state {self.state.value}")
        return item_state
