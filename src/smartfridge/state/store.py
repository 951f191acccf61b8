"""In-memory inventory store.

Holds every stocked item twice: once by identifier (the owning index) and
once inside the :class:`TypeGroup` of its type. Every mutation validates
first and only then touches the indexes, so both always describe the same
set of items.
"""

from __future__ import annotations

import logging
from uuid import UUID

from smartfridge.config import EMPTY_FILL_THRESHOLD, DuplicatePolicy, FridgeConfig, check_empty_fill_threshold
from smartfridge.exceptions import InvalidArgumentError
from smartfridge.models.item import Item
from smartfridge.models.report import ReportEntry
from smartfridge.state.group import TypeGroup

_logger = logging.getLogger(__name__)


class InventoryStore:
    """Memory based, non persistent inventory repository."""

    def __init__(
        self,
        *,
        empty_fill_threshold: float = EMPTY_FILL_THRESHOLD,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT,
    ) -> None:
        self._empty_fill_threshold = check_empty_fill_threshold(empty_fill_threshold)
        self._duplicate_policy = duplicate_policy
        self._items: dict[UUID, Item] = {}
        self._groups: dict[int, TypeGroup] = {}

    @classmethod
    def from_config(cls, config: FridgeConfig) -> InventoryStore:
        return cls(
            empty_fill_threshold=config.empty_fill_threshold,
            duplicate_policy=config.duplicate_policy,
        )

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def _group(self, item_type: int) -> TypeGroup:
        group = self._groups.get(item_type)
        if group is None:
            group = TypeGroup(item_type, empty_threshold=self._empty_fill_threshold)
            self._groups[item_type] = group
        return group

    def _discard(self, item: Item) -> None:
        del self._items[item.id]
        self._groups[item.type].remove(item.id)

    def add(self, item_type: int, item_id: UUID, name: str | None, fill_factor: float) -> Item:
        """Stock a new item.

        Raises
        ------
        InvalidArgumentError
            If the item is invalid, or the identifier is already stocked
            and the duplicate policy is ``reject``. Nothing is changed.
        """
        item = Item(type=item_type, id=item_id, name=name, fill_factor=fill_factor)

        existing = self._items.get(item.id)
        if existing is not None:
            if self._duplicate_policy is DuplicatePolicy.REJECT:
                raise InvalidArgumentError("id", f"item {item.id} is already stocked", value=item.id)
            _logger.debug("Replacing item id=%s type=%d", item.id, existing.type)
            self._discard(existing)

        self._group(item.type).add(item)
        self._items[item.id] = item
        _logger.debug("Added item id=%s type=%d fill=%.3f", item.id, item.type, item.fill_factor)
        return item

    def remove(self, item_id: UUID) -> None:
        """Remove an item; unknown identifiers are ignored."""
        item = self._items.get(item_id)
        if item is None:
            _logger.debug("Ignoring removal of unknown item id=%s", item_id)
            return
        self._discard(item)
        _logger.debug("Removed item id=%s type=%d", item_id, item.type)

    def get(self, item_id: UUID) -> Item | None:
        return self._items.get(item_id)

    def fill_factor(self, item_type: int) -> float:
        """Average fill factor for the type; ``0.0`` for an unknown type."""
        group = self._groups.get(item_type)
        if group is None:
            return 0.0
        return group.fill_factor

    def forget(self, item_type: int) -> None:
        """Exclude *item_type* from reports, now and after later restocking."""
        self._group(item_type).forgotten = True
        _logger.debug("Forgot item type=%d", item_type)

    def is_forgotten(self, item_type: int) -> bool:
        group = self._groups.get(item_type)
        return group is not None and group.forgotten

    def item_types(self) -> list[int]:
        return list(self._groups)

    def get_items(self, fill_factor: float) -> list[ReportEntry]:
        """Report the types running low.

        Returns one entry per type that is not forgotten and whose fill
        factor is at or below *fill_factor*, least full type first. Each
        entry lists the type's items, least full first.
        """
        candidates: list[tuple[float, TypeGroup]] = []
        for group in self._groups.values():
            if group.forgotten:
                continue
            group_fill = group.fill_factor
            if group_fill <= fill_factor:
                candidates.append((group_fill, group))

        # list.sort is stable, so ties keep group creation order.
        candidates.sort(key=lambda candidate: candidate[0])
        return [
            ReportEntry(
                type=group.item_type,
                fill_factor=group_fill,
                items=tuple(sorted(group.items, key=lambda item: item.fill_factor)),
            )
            for group_fill, group in candidates
        ]
