"""Quiz drills combining earlier topics."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


def calculate_price_of_apples(quantity: int) -> int:
    """Two per apple, or one per apple for orders above 40."""
    if quantity > 40:
        return quantity
    return quantity * 2


class CommandKind(enum.Enum):
    """What to do with a string."""

    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A command; times is how often 'bar' is appended for APPEND."""

    kind: CommandKind
    times: int = 0


def transformer(inputs: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    output = []
    for text, command in inputs:
        if command.kind is CommandKind.UPPERCASE:
            output.append(text.upper())
        elif command.kind is CommandKind.TRIM:
            output.append(text.strip())
        else:
            output.append(text + "bar" * command.times)
    return output


def _format_grade(grade: float | str) -> str:
    if isinstance(grade, float) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    """A student's report card with a numeric or alphabetic grade."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_format_grade(self.grade)}"
        )