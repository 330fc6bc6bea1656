"""Conditional drills."""


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"