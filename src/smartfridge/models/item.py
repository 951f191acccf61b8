"""Stocked item model."""

from __future__ import annotations

import math
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from smartfridge.exceptions import InvalidArgumentError
from smartfridge.ingestion.normalize import safe_uuid

NIL_UUID = UUID(int=0)


class Item(BaseModel):
    """One physical container stocked in the fridge.

    Validation runs in field order (``id``, ``fill_factor``, ``name``,
    ``type``) and raises :class:`~smartfridge.exceptions.InvalidArgumentError`
    for the first offending field, so no partially valid item is ever built.
    Values are checked before pydantic coerces them: a fill factor of
    ``"0.5"`` is rejected, not converted.

    Parameters
    ----------
    id : UUID
        Globally unique identity; UUID text is accepted, the nil UUID is not.
    fill_factor : float
        How full the container is, between 0 and 1 inclusive.
    name : str
        Display name, at least one character.
    type : int
        Category tag grouping interchangeable items.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    id: UUID
    fill_factor: float
    name: str
    type: int

    @field_validator("id", mode="before")
    @classmethod
    def _check_id(cls, value: Any) -> UUID:
        item_id = safe_uuid(value)
        if item_id is None:
            raise InvalidArgumentError("id", "must provide a UUID", value=value)
        if item_id == NIL_UUID:
            raise InvalidArgumentError("id", "must provide a non-empty UUID", value=value)
        return item_id

    @field_validator("fill_factor", mode="before")
    @classmethod
    def _check_fill_factor(cls, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidArgumentError("fill_factor", "must be a number", value=value)
        if math.isnan(value) or not 0.0 <= value <= 1.0:
            raise InvalidArgumentError("fill_factor", "must be between 0 and 1 inclusively", value=value)
        return float(value)

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: Any) -> str:
        if value is None or value == "":
            raise InvalidArgumentError("name", "must supply at least one character", value=value)
        if not isinstance(value, str):
            raise InvalidArgumentError("name", "must be a string", value=value)
        return value

    @field_validator("type", mode="before")
    @classmethod
    def _check_type(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError("type", "must be an integer", value=value)
        return value
