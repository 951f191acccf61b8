"""Normalized inbound events.

The appliance reports additions and removals with identifier text; these
events carry the parsed identifier so the manager can hand them to the
repository unchanged.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from smartfridge.ingestion.normalize import parse_item_uuid


class _ItemEvent(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    item_id: UUID

    @field_validator("item_id", mode="before")
    @classmethod
    def _parse_item_id(cls, value: Any) -> UUID:
        return parse_item_uuid(value)


class ItemAdded(_ItemEvent):
    """An item was stocked, or a removed item was put back with a new fill."""

    item_type: int
    name: str | None = None
    fill_factor: float


class ItemRemoved(_ItemEvent):
    """An item was taken out of the fridge."""


InventoryEvent = ItemAdded | ItemRemoved
