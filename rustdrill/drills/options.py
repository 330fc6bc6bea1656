"""Optional value drills."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at a 24-hour time of day.

    Five are left before 22:00, none from then on, and None is returned
    for hours past 23.
    """
    if time_of_day < 0:
        raise ValueError("time of day cannot be negative")
    if time_of_day > 23:
        return None
    if time_of_day >= 22:
        return 0
    return 5