import pytest

from rustdrill.drills.strings import (
    compose_me,
    current_favorite_color,
    is_a_color_word,
    replace_me,
    trim_me,
)


def test_current_favorite_color():
    assert current_favorite_color() == "blue"


@pytest.mark.parametrize("word,expected", [
    ("green", True), ("blue", True), ("red", True), ("purple", False), ("", False),
])
def test_is_a_color_word(word, expected):
    assert is_a_color_word(word) is expected


def test_trim_a_string():
    assert trim_me("Hello!     ") == "Hello!"
    assert trim_me("  What's up!") == "What's up!"
    assert trim_me("   Hola!  ") == "Hola!"


def test_compose_a_string():
    assert compose_me("Hello") == "Hello world!"
    assert compose_me("Goodbye") == "Goodbye world!"


def test_replace_a_string():
    assert replace_me("I think cars are cool") == "I think balloons are cool"
    assert replace_me("I love to look at cars") == "I love to look at balloons"