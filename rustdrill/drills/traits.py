"""Protocol drills: shared behaviour with default implementations."""

from __future__ import annotations

from dataclasses import dataclass


def append_bar(value: str | list[str]) -> str | list[str]:
    """Append "Bar": to the end of a string, or as a new element of a list."""
    if isinstance(value, str):
        return value + "Bar"
    if isinstance(value, list):
        return [*value, "Bar"]
    raise TypeError(f"cannot append 'Bar' to {type(value).__name__}")


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software versioned with a number."""

    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    """Software versioned with a string."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class _SomeTrait:
    def some_function(self) -> bool:
        return True


class _OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(_SomeTrait, _OtherTrait):
    """Has both some_function and other_function."""


class OtherStruct(_SomeTrait, _OtherTrait):
    """Has both some_function and other_function."""


def some_func(item: _SomeTrait) -> bool:
    """Call both functions that item must provide."""
    return item.some_function() and item.other_function()