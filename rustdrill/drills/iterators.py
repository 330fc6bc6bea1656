"""Iterator drills: mapping, collecting and counting."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping

_U64_MAX = 2**64 - 1


def capitalize_first(text: str) -> str:
    """Upper-case the first character: 'hello' -> 'Hello'."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize every word: ['hello', 'world'] -> ['Hello', 'World']."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize every word and join them: ['hello', ' ', 'world'] -> 'Hello World'."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """A division that cannot give an integer result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Return a / b when a is evenly divisible by b."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """Divide each number by 27; raise the first error met."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping each result or its error."""
    results: list[int | DivisionError] = []
    for n in _NUMBERS:
        try:
            results.append(divide(n, 27))
        except DivisionError as exc:
            results.append(exc)
    return results


def factorial(num: int) -> int:
    """num! for an unsigned 64-bit num; overflowing results raise."""
    if num < 0:
        raise ValueError("factorial of a negative number")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(enum.Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in mapping.values():
        if progress == value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in mapping.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps, with loops."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps."""
    return sum(count_iterator(mapping, value) for mapping in collection)