"""Error handling drills."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width with strict syntax."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value >= 2 ** (bits - 1):
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of the typed-in quantity: 5 tokens each plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    cost = qty * cost_per_item + processing_fee
    if not -(2**31) <= cost < 2**31:
        raise OverflowError("attempt to multiply with overflow")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> str:
    """Describe the outcome of buying item_quantity items with tokens."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationError(ValueError):
    """A value that cannot be a positive nonzero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.reason == other.reason

    def __hash__(self) -> int:
        return hash(self.reason)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Either the text was not an integer or the integer was not positive."""

    def __init__(self, error: ValueError):
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a positive nonzero 64-bit integer."""
    try:
        value = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc