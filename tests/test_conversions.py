import pytest

from rustlings.solutions.conversions import (
    Color,
    IntoColorError,
    IntoColorErrorKind,
    ParsePersonError,
    ParsePersonErrorKind,
    Person,
    parse_person,
    person_from,
)


def test_default():
    person = Person.default()
    assert person.name == "John"
    assert person.age == 30


@pytest.mark.parametrize(
    "text",
    ["", "Mark,twenty", "Mark", "Mark,", ",1", ",", ",one", "Mike,32,", "Mike,32,man"],
)
def test_person_from_falls_back_to_default(text):
    person = person_from(text)
    assert person.name == "John"
    assert person.age == 30


def test_person_from_good_convert():
    person = person_from("Mark,20")
    assert person.name == "Mark"
    assert person.age == 20


def test_parse_person_good_input():
    person = parse_person("John,32")
    assert person == Person(name="John", age=32)


@pytest.mark.parametrize(
    "text, kind",
    [
        ("", ParsePersonErrorKind.EMPTY),
        ("John,", ParsePersonErrorKind.PARSE_INT),
        ("John,twenty", ParsePersonErrorKind.PARSE_INT),
        ("John", ParsePersonErrorKind.BAD_LEN),
        (",1", ParsePersonErrorKind.NO_NAME),
        ("John,32,", ParsePersonErrorKind.BAD_LEN),
        ("John,32,man", ParsePersonErrorKind.BAD_LEN),
    ],
)
def test_parse_person_errors(text, kind):
    with pytest.raises(ParsePersonError) as info:
        parse_person(text)
    assert info.value.kind is kind


@pytest.mark.parametrize("text", [",", ",one"])
def test_parse_person_missing_name(text):
    with pytest.raises(ParsePersonError) as info:
        parse_person(text)
    assert info.value.kind in (ParsePersonErrorKind.NO_NAME, ParsePersonErrorKind.PARSE_INT)


def test_parse_person_invalid_age_message():
    with pytest.raises(ParsePersonError) as info:
        parse_person("John,twenty")
    assert str(info.value) == "invalid digit found in string"


@pytest.mark.parametrize("values", [(256, 1000, 10000), (-1, -10, -256), (-1, 255, 255)])
def test_tuple_out_of_range(values):
    with pytest.raises(IntoColorError) as info:
        Color.from_tuple(values)
    assert info.value.kind is IntoColorErrorKind.INT_CONVERSION


def test_tuple_correct():
    assert Color.from_tuple((183, 65, 14)) == Color(red=183, green=65, blue=14)


@pytest.mark.parametrize("values", [[1000, 10000, 256], [-10, -256, -1], [-1, 255, 255]])
def test_array_out_of_range(values):
    with pytest.raises(IntoColorError) as info:
        Color.from_sequence(values)
    assert info.value.kind is IntoColorErrorKind.INT_CONVERSION


def test_array_correct():
    assert Color.from_sequence([183, 65, 14]) == Color(red=183, green=65, blue=14)


@pytest.mark.parametrize("values", [[10000, 256, 1000], [-256, -1, -10], [-1, 255, 255]])
def test_slice_out_of_range(values):
    with pytest.raises(IntoColorError) as info:
        Color.from_sequence(values[:])
    assert info.value.kind is IntoColorErrorKind.INT_CONVERSION


def test_slice_correct():
    values = [183, 65, 14]
    assert Color.from_sequence(values[:]) == Color(red=183, green=65, blue=14)


@pytest.mark.parametrize("values", [[0, 0, 0, 0], [0, 0]])
def test_slice_bad_length(values):
    with pytest.raises(IntoColorError) as info:
        Color.from_sequence(values)
    assert info.value.kind is IntoColorErrorKind.BAD_LEN