import pytest

from rustdrill.drills.basics import Rectangle, Wrapper, is_even, sale_price


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_is_true_when_even():
    assert is_even(4) is True


def test_is_false_when_odd():
    assert is_even(5) is False


def test_sale_price_odd():
    assert sale_price(51) == 48


def test_sale_price_even():
    assert sale_price(50) == 40


def test_correct_width_and_height():
    rect = Rectangle(10, 20)
    assert rect.width == 10
    assert rect.height == 20


def test_negative_width():
    with pytest.raises(ValueError, match="cannot be negative"):
        Rectangle(-10, 10)


def test_negative_height():
    with pytest.raises(ValueError, match="cannot be negative"):
        Rectangle(10, -10)