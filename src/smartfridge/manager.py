"""Smart fridge manager.

Entry point for the appliance: it receives item added/removed
notifications carrying identifier text, and answers the display's
fill-level queries.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from smartfridge.config import FridgeConfig
from smartfridge.exceptions import InvalidArgumentError
from smartfridge.ingestion.normalize import parse_item_uuid
from smartfridge.models.report import ReportEntry
from smartfridge.repository import InventoryRepository
from smartfridge.state.events import InventoryEvent, ItemAdded, ItemRemoved
from smartfridge.state.store import InventoryStore

_logger = logging.getLogger(__name__)


class FridgeManager:
    """Routes appliance events into a repository and exposes its queries.

    Parameters
    ----------
    repository : InventoryRepository
        Where items are stored. Use :meth:`from_config` for the default
        in-memory store.

    Example
    -------
    ::

        manager = FridgeManager.from_config(FridgeConfig.from_env())
        manager.handle_item_added(1, "{11111111-1111-1111-1111-111111111111}", "Milk", 0.8)
        for entry in manager.get_items(0.5):
            print(entry.type, entry.fill_factor)
    """

    def __init__(self, repository: InventoryRepository) -> None:
        self._repository = repository

    @classmethod
    def from_config(cls, config: FridgeConfig | None = None) -> FridgeManager:
        return cls(InventoryStore.from_config(config or FridgeConfig()))

    @property
    def repository(self) -> InventoryRepository:
        return self._repository

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def handle_item_removed(self, item_uuid: str) -> None:
        """Called every time an item is taken out of the fridge.

        Raises
        ------
        InvalidArgumentError
            When *item_uuid* cannot be parsed.
        """
        item_id = self._parse(item_uuid)
        self._repository.remove(item_id)

    def handle_item_added(self, item_type: int, item_uuid: str, name: str | None, fill_factor: float) -> None:
        """Called every time an item is stored, or re-inserted with an updated fill.

        Raises
        ------
        InvalidArgumentError
            When *item_uuid* cannot be parsed or the item is invalid.
        """
        item_id = self._parse(item_uuid)
        self._repository.add(item_type, item_id, name, fill_factor)

    def apply(self, event: InventoryEvent) -> None:
        """Apply a normalized inbound event."""
        if isinstance(event, ItemAdded):
            self._repository.add(event.item_type, event.item_id, event.name, event.fill_factor)
        elif isinstance(event, ItemRemoved):
            self._repository.remove(event.item_id)
        else:
            raise InvalidArgumentError("event", f"unsupported event {type(event).__name__}", value=event)

    @staticmethod
    def _parse(item_uuid: Any) -> UUID:
        try:
            return parse_item_uuid(item_uuid)
        except InvalidArgumentError:
            _logger.debug("Rejected item identifier %r", item_uuid)
            raise

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_items(self, fill_factor: float) -> list[ReportEntry]:
        """Types at or below *fill_factor*, for the replenishment display.

        ``get_items(0.5)`` returns every type that is 50% full or less,
        including depleted ones. Only non-empty containers count toward a
        type's fill unless all of them are empty.
        """
        return self._repository.get_items(fill_factor)

    def get_fill_factor(self, item_type: int) -> float:
        return self._repository.fill_factor(item_type)

    def forget_item(self, item_type: int) -> None:
        """Stop reporting *item_type*; the owner will no longer stock it."""
        self._repository.forget(item_type)
