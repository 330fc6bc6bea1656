"""Enumeration drills: messages driving a small state machine."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Point:
    """A position on a grid."""

    x: int
    y: int


class Message:
    """A message for MachineState; see its ChangeColor, Echo, Move and Quit kinds."""

    __slots__ = ()


@dataclass(frozen=True)
class _ChangeColor(Message):
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class _Echo(Message):
    text: str


@dataclass(frozen=True)
class _Move(Message):
    point: Point


@dataclass(frozen=True)
class _Quit(Message):
    pass


Message.ChangeColor = _ChangeColor
Message.Echo = _Echo
Message.Move = _Move
Message.Quit = _Quit


@dataclass
class MachineState:
    """Colour, position and quit flag changed by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case _ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case _Echo(text=text):
                print(text)
            case _Move(point=point):
                self.position = point
            case _Quit():
                self.quit = True
            case _:
                raise TypeError(f"not a message: {message!r}")