from __future__ import annotations

from uuid import UUID

import pytest

from smartfridge.exceptions import InvalidArgumentError
from smartfridge.state.events import ItemAdded, ItemRemoved

ITEM_ID = UUID("11111111-1111-1111-1111-111111111111")


def test_item_added_parses_identifier_text() -> None:
    event = ItemAdded(item_type=1, item_id="{11111111-1111-1111-1111-111111111111}", name="Milk", fill_factor=0.5)

    assert event.item_id == ITEM_ID
    assert event.name == "Milk"


def test_item_removed_accepts_uuid() -> None:
    assert ItemRemoved(item_id=ITEM_ID).item_id == ITEM_ID


def test_unparsable_identifier_raises_invalid_argument() -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        ItemRemoved(item_id="Not a GUID")

    assert exc_info.value.param == "item_uuid"


def test_item_added_name_is_optional_until_stocked() -> None:
    event = ItemAdded(item_type=1, item_id=ITEM_ID, fill_factor=0.5)

    assert event.name is None


def test_events_are_frozen() -> None:
    event = ItemRemoved(item_id=ITEM_ID)

    with pytest.raises(ValueError):
        event.item_id = UUID(int=1)  # type: ignore[misc]
