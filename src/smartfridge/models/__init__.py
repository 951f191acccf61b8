"""Typed models for smartfridge."""

from smartfridge.models.item import NIL_UUID, Item
from smartfridge.models.report import ReportEntry

__all__ = [
    "NIL_UUID",
    "Item",
    "ReportEntry",
]
