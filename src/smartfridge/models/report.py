"""Low-stock report model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from smartfridge.models.item import Item


class ReportEntry(BaseModel):
    """One under-stocked type in a :meth:`InventoryStore.get_items` report.

    Parameters
    ----------
    type : int
        The item type tag.
    fill_factor : float
        Average fill factor of the type's non-empty containers.
    items : tuple of Item
        Every item of the type, least full first.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: int
    fill_factor: float
    items: tuple[Item, ...] = ()
