"""Per-run state for definition items.

Run state is kept apart from the immutable Item records: a RunState holds
one ItemState per definition position and is discarded after the run.
"""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .item import Item

logger = logging.getLogger(__name__)


@dataclass
class ItemState:
    """Transient state for one item during a run.

    Attributes:
        item: The definition item.
        include: Inclusion decision, None until the item is visited.
        answer: Current answer, None until the item is seeded.
    """

    item: Item
    include: bool | None = None
    answer: str | None = None


class RunState:
    """Run state for a whole definition, in definition order.

    Id lookups resolve to the first item carrying the id.
    """

    def __init__(self, definition: Sequence[Item]) -> None:
        self.states = [ItemState(item=item) for item in definition]
        self._by_id: dict[str, ItemState] = {}
        for state in self.states:
            if state.item.id in self._by_id:
                logger.warning(f"Duplicate item id '{state.item.id}'; constraints use the first")
                continue
            self._by_id[state.item.id] = state

    def lookup(self, item_id: str) -> ItemState | None:
        """Get the state of the first item with the given id."""
        return self._by_id.get(item_id)

    def __iter__(self) -> Iterator[ItemState]:
        return iter(self.states)

    def __len__(self) -> int:
        return len(self.states)

    def __getitem__(self, position: int) -> ItemState:
        return self.states[position]
