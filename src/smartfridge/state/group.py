"""Per-type item collection."""

from __future__ import annotations

from uuid import UUID

from smartfridge.config import EMPTY_FILL_THRESHOLD, check_empty_fill_threshold
from smartfridge.exceptions import InvalidArgumentError
from smartfridge.models.item import Item
from smartfridge.state.policy import average_fill


class TypeGroup:
    """Items of one type, keyed by identifier.

    A group also records whether its type has been forgotten. Once set, the
    flag stays set for the life of the group.
    """

    def __init__(self, item_type: int, *, empty_threshold: float = EMPTY_FILL_THRESHOLD) -> None:
        self._item_type = item_type
        self._empty_threshold = check_empty_fill_threshold(empty_threshold)
        self._items: dict[UUID, Item] = {}
        self.forgotten = False

    def __repr__(self) -> str:
        return f"TypeGroup(item_type={self._item_type}, items={len(self._items)}, forgotten={self.forgotten})"

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    @property
    def item_type(self) -> int:
        return self._item_type

    @property
    def fill_factor(self) -> float:
        """Average fill of the non-empty items, or ``0.0`` if all are empty."""
        return average_fill((item.fill_factor for item in self._items.values()), self._empty_threshold)

    @property
    def items(self) -> tuple[Item, ...]:
        """Snapshot of the contained items."""
        return tuple(self._items.values())

    def add(self, item: Item) -> None:
        """Add *item* to the group.

        Raises
        ------
        InvalidArgumentError
            If the item's type differs from the group's, or its identifier
            is already present.
        """
        if item.type != self._item_type:
            raise InvalidArgumentError("item", "item must be the same type as the collection", value=item)
        if item.id in self._items:
            raise InvalidArgumentError("item", f"item {item.id} is already in the collection", value=item)
        self._items[item.id] = item

    def remove(self, item_id: UUID) -> None:
        self._items.pop(item_id, None)
