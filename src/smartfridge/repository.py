"""Repository contract the manager is written against."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from smartfridge.models.report import ReportEntry


class InventoryRepository(Protocol):
    """Storage of stocked items with per-type queries.

    :class:`smartfridge.state.store.InventoryStore` is the in-memory
    implementation.
    """

    def add(self, item_type: int, item_id: UUID, name: str | None, fill_factor: float) -> object: ...

    def remove(self, item_id: UUID) -> None: ...

    def fill_factor(self, item_type: int) -> float: ...

    def forget(self, item_type: int) -> None: ...

    def get_items(self, fill_factor: float) -> list[ReportEntry]: ...
