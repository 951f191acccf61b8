"""Ingestion layer.

Adapters that turn raw appliance notifications into normalized values.
"""

from smartfridge.ingestion.normalize import parse_item_uuid, safe_uuid

__all__ = [
    "parse_item_uuid",
    "safe_uuid",
]
