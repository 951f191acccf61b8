"""Custom exception hierarchy for smartfridge."""

from __future__ import annotations

from typing import Any


class FridgeError(Exception):
    """Base exception for all smartfridge errors."""


class FridgeConfigError(FridgeError):
    """Invalid or missing configuration."""


class InvalidArgumentError(FridgeError):
    """A caller supplied a bad argument.

    Raised before any state is mutated, so the store is unchanged when this
    propagates.  Callers should treat it as a bug in their input rather than
    a transient condition.

    Parameters
    ----------
    param : str
        Name of the offending parameter (e.g. ``"fill_factor"``).
    message : str
        Human readable reason.
    value : Any
        The offending value, where meaningful.
    """

    def __init__(
        self,
        param: str,
        message: str,
        *,
        value: Any = None,
    ) -> None:
        self.param = param
        self.value = value
        super().__init__(f"{param}: {message}")
