import pytest

from rustlings.solutions.quizzes import (
    Command,
    CommandKind,
    ReportCard,
    calculate_price_of_apples,
    transformer,
)


def test_verify_prices():
    assert calculate_price_of_apples(35) == 70
    assert calculate_price_of_apples(40) == 80
    assert calculate_price_of_apples(41) == 41
    assert calculate_price_of_apples(65) == 65


def test_transformer_it_works():
    output = transformer(
        [
            ("hello", Command.uppercase()),
            (" all roads lead to rome! ", Command.trim()),
            ("foo", Command.append(1)),
            ("bar", Command.append(5)),
        ]
    )
    assert output[0] == "HELLO"
    assert output[1] == "all roads lead to rome!"
    assert output[2] == "foobar"
    assert output[3] == "barbarbarbarbarbar"


def test_transformer_empty_and_zero_append():
    assert transformer([]) == []
    assert transformer([("foo", Command.append(0))]) == ["foo"]


def test_command_constructors():
    assert Command.trim().kind is CommandKind.TRIM
    assert Command.append(3) == Command(CommandKind.APPEND, 3)
    with pytest.raises(ValueError):
        Command.append(-1)


def test_generate_numeric_report_card():
    card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.render() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert card.render() == "Gary Plotter (11) - achieved a grade of A+"


def test_whole_float_grade_has_no_fraction():
    card = ReportCard(grade=5.0, student_name="Tom Wriggle", student_age=12)
    assert card.render().endswith("grade of 5")