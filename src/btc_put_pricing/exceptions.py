"""Typed errors raised by the pricing core."""

from __future__ import annotations

from typing import Any


class PricingError(ValueError):
    """Base class for pricing failures surfaced to callers."""


class InvalidParameter(PricingError):
    """An input violates its precondition (non-positive, non-finite, missing).

    `name` is the offending field and `value` the rejected input, so boundary
    layers can build a client-facing message without parsing the text.
    """

    def __init__(
        self,
        name: str,
        value: Any,
        reason: str,
        *,
        message: str | None = None,
    ) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(message or f"{name} {reason} (got {value!r})")


class NumericInstability(PricingError):
    """A formula produced a non-finite intermediate or result."""
