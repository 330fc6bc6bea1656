"""Record type drills: named fields, positional fields and methods."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class ColorClassicStruct:
    """A colour with named components."""

    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    """A colour whose components are reached by position."""

    red: int
    green: int
    blue: int


class UnitLikeStruct:
    """A type with no fields."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitLikeStruct)

    def __hash__(self) -> int:
        return hash(UnitLikeStruct)


@dataclass(frozen=True)
class Order:
    """An order placed by a customer."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The order that new orders are derived from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package sent between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram