from __future__ import annotations

import math
from uuid import UUID, uuid4

import pytest

from smartfridge.exceptions import FridgeError, InvalidArgumentError
from smartfridge.models import NIL_UUID, Item


def test_valid_item_keeps_fields() -> None:
    item_id = uuid4()
    item = Item(type=7, id=item_id, name="Milk", fill_factor=0.5)

    assert item.type == 7
    assert item.id == item_id
    assert item.name == "Milk"
    assert item.fill_factor == 0.5


@pytest.mark.parametrize("fill_factor", [0.0, 1.0, 0.25])
def test_fill_factor_bounds_are_inclusive(fill_factor: float) -> None:
    item = Item(type=1, id=uuid4(), name="Juice", fill_factor=fill_factor)
    assert item.fill_factor == fill_factor


def test_item_accepts_uuid_text() -> None:
    item = Item(type=1, id="11111111-1111-1111-1111-111111111111", name="Milk", fill_factor=0.1)
    assert item.id == UUID("11111111-1111-1111-1111-111111111111")


def test_nil_id_rejected() -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        Item(type=1, id=NIL_UUID, name="Milk", fill_factor=0.5)

    assert exc_info.value.param == "id"


@pytest.mark.parametrize("fill_factor", [-1.0, 1.1])
def test_out_of_range_fill_factor_rejected(fill_factor: float) -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        Item(type=1, id=uuid4(), name="Milk", fill_factor=fill_factor)

    assert exc_info.value.param == "fill_factor"
    assert exc_info.value.value == fill_factor


def test_nan_fill_factor_rejected() -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        Item(type=1, id=uuid4(), name="Milk", fill_factor=math.nan)

    assert exc_info.value.param == "fill_factor"


@pytest.mark.parametrize("name", ["", None])
def test_missing_name_rejected(name: str | None) -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        Item(type=1, id=uuid4(), name=name, fill_factor=0.5)

    assert exc_info.value.param == "name"


def test_id_checked_before_fill_factor_and_name() -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        Item(type=1, id=NIL_UUID, name="", fill_factor=2.0)

    assert exc_info.value.param == "id"


def test_invalid_argument_is_a_fridge_error() -> None:
    with pytest.raises(FridgeError, match="fill_factor"):
        Item(type=1, id=uuid4(), name="Milk", fill_factor=-0.1)


def test_item_is_immutable() -> None:
    item = Item(type=1, id=uuid4(), name="Milk", fill_factor=0.5)

    with pytest.raises(ValueError):
        item.fill_factor = 0.9  # type: ignore[misc]

    assert item.fill_factor == 0.5


@pytest.mark.parametrize(
    ("overrides", "param"),
    [
        ({"id": None}, "id"),
        ({"id": "not-a-uuid"}, "id"),
        ({"id": 42}, "id"),
        ({"fill_factor": None}, "fill_factor"),
        ({"fill_factor": "full"}, "fill_factor"),
        ({"fill_factor": "0.5"}, "fill_factor"),
        ({"fill_factor": True}, "fill_factor"),
        ({"name": 123}, "name"),
        ({"type": "1"}, "type"),
        ({"type": None}, "type"),
    ],
)
def test_wrong_type_arguments_raise_invalid_argument(overrides: dict[str, object], param: str) -> None:
    fields: dict[str, object] = {"type": 1, "id": uuid4(), "name": "Milk", "fill_factor": 0.5}
    fields.update(overrides)

    with pytest.raises(InvalidArgumentError) as exc_info:
        Item(**fields)

    assert exc_info.value.param == param
    assert exc_info.value.value == overrides[param]


def test_integer_fill_factor_becomes_float() -> None:
    item = Item(type=1, id=uuid4(), name="Milk", fill_factor=1)

    assert item.fill_factor == 1.0
    assert isinstance(item.fill_factor, float)
