import pytest

from rustlings.solutions.basics import bigger, foo_if_fizz, is_even, sale_price, square


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_bigger_of_equal_values():
    assert bigger(7, 7) == 7


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


def test_is_true_when_even():
    assert is_even(2)


def test_is_false_when_odd():
    assert not is_even(5)


@pytest.mark.parametrize("price, expected", [(51, 48), (50, 40)])
def test_sale_price(price, expected):
    assert sale_price(price) == expected


def test_square_of_three():
    assert square(3) == 9


def test_square_of_negative():
    assert square(-4) == 16