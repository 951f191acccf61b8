"""Configuration for smartfridge."""

from __future__ import annotations

import dataclasses
import enum
import os
from typing import Any

from smartfridge.exceptions import FridgeConfigError

#: Fill factors at or below this value count as an empty container.
EMPTY_FILL_THRESHOLD: float = 1e-7


def check_empty_fill_threshold(value: float) -> float:
    """Return *value* if it is a usable empty-container threshold.

    Raises
    ------
    FridgeConfigError
        When *value* is outside [0, 1).
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0.0 <= value < 1.0:
        raise FridgeConfigError(f"empty_fill_threshold must be in [0, 1), got {value!r}")
    return float(value)


class DuplicatePolicy(enum.StrEnum):
    """What the store does when an already stocked identifier is added again."""

    REJECT = "reject"
    REPLACE = "replace"


@dataclasses.dataclass(frozen=True)
class FridgeConfig:
    """Inventory configuration.

    Parameters
    ----------
    empty_fill_threshold : float
        Containers whose fill factor is at or below this value are left out
        of a type's average, unless every container of the type is empty.
    duplicate_policy : DuplicatePolicy
        ``reject`` raises on a repeated identifier, ``replace`` swaps the
        stored item for the new one.
    """

    empty_fill_threshold: float = EMPTY_FILL_THRESHOLD
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT

    def __post_init__(self) -> None:
        check_empty_fill_threshold(self.empty_fill_threshold)
        if not isinstance(self.duplicate_policy, DuplicatePolicy):
            try:
                policy = DuplicatePolicy(self.duplicate_policy)
            except ValueError as err:
                raise FridgeConfigError(f"unknown duplicate_policy {self.duplicate_policy!r}") from err
            object.__setattr__(self, "duplicate_policy", policy)

    @classmethod
    def from_env(cls, **overrides: Any) -> FridgeConfig:
        """Create configuration from environment variables.

        Reads ``SMARTFRIDGE_EMPTY_FILL_THRESHOLD`` and
        ``SMARTFRIDGE_DUPLICATE_POLICY``. Explicit keyword arguments
        override environment values.

        Raises
        ------
        FridgeConfigError
            When an environment value cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        threshold_env = env.get("SMARTFRIDGE_EMPTY_FILL_THRESHOLD")
        if threshold_env is not None and "empty_fill_threshold" not in overrides:
            try:
                config_kwargs["empty_fill_threshold"] = float(threshold_env)
            except ValueError as err:
                raise FridgeConfigError(f"SMARTFRIDGE_EMPTY_FILL_THRESHOLD is not a number: {threshold_env!r}") from err

        policy_env = env.get("SMARTFRIDGE_DUPLICATE_POLICY")
        if policy_env is not None and "duplicate_policy" not in overrides:
            config_kwargs["duplicate_policy"] = policy_env.strip().lower()

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
