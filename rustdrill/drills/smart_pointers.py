"""Ownership drills: recursive lists, copy on write and shared handles."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cons list cell; None stands for the empty list."""

    value: int
    next: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.next


def create_empty_list() -> Cons | None:
    return None


def create_non_empty_list() -> Cons | None:
    return Cons(1, Cons(2))


class Cow:
    """Borrowed data that is copied the first time it has to change."""

    def __init__(self, data: Sequence[int], *, owned: bool = False):
        self._data = data
        self._owned = owned

    @property
    def is_owned(self) -> bool:
        return self._owned

    def to_mut(self) -> list[int]:
        """The data as a list that may be changed, copying it if borrowed."""
        if not self._owned or not isinstance(self._data, list):
            self._data = list(self._data)
            self._owned = True
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)


def abs_all(cow: Cow) -> Cow:
    """Make every element non-negative, copying only if something changes."""
    for index, value in enumerate(list(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow


class _Cell:
    __slots__ = ("value", "count")

    def __init__(self, value: object):
        self.value = value
        self.count = 1


class Shared:
    """A counted handle to a value shared by several owners."""

    def __init__(self, value: object):
        self._cell = _Cell(value)
        self._dropped = False

    @property
    def value(self) -> object:
        return self._cell.value

    @property
    def strong_count(self) -> int:
        return self._cell.count

    def clone(self) -> Shared:
        """Another handle to the same value."""
        if self._dropped:
            raise RuntimeError("handle already dropped")
        handle = object.__new__(Shared)
        handle._cell = self._cell
        handle._dropped = False
        self._cell.count += 1
        return handle

    def drop(self) -> None:
        """Give up this handle."""
        if self._dropped:
            raise RuntimeError("handle already dropped")
        self._dropped = True
        self._cell.count -= 1


@dataclass(frozen=True)
class Sun:
    """The star the planets revolve around."""


PLANET_NAMES = (
    "Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune",
)


@dataclass
class Planet:
    """A planet holding a shared handle to its sun."""

    name: str
    sun: Shared

    def __post_init__(self) -> None:
        if self.name not in PLANET_NAMES:
            raise ValueError(f"unknown planet: {self.name}")

    def details(self) -> str:
        return f"Hi from {self.name}(Sun)!"


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum, in one thread per offset, the numbers congruent to that offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def total(offset: int) -> int:
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(total, range(workers)))