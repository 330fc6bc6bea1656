"""Basic drills: generic wrappers, small functions and checked construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off even prices, three off odd ones."""
    if is_even(price):
        return price - 10
    return price - 3


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with positive sides."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")