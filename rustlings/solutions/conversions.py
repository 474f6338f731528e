"""Worked solutions to the conversion exercises."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Sequence

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_usize(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Person:
    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        return cls(name="John", age=30)


def person_from(text: str) -> Person:
    """Parse "name,age", falling back to the default person on any problem."""
    try:
        return parse_person(text)
    except ParsePersonError:
        return Person.default()


class ParsePersonErrorKind(enum.Enum):
    EMPTY = "empty input string"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "invalid age"


class ParsePersonError(ValueError):
    """Why a string could not be parsed into a Person."""

    def __init__(self, kind: ParsePersonErrorKind, detail: str | None = None):
        super().__init__(detail if detail is not None else kind.value)
        self.kind = kind


def parse_person(text: str) -> Person:
    """Parse exactly "name,age"; raise ParsePersonError otherwise."""
    if not text:
        raise ParsePersonError(ParsePersonErrorKind.EMPTY)
    fields = text.split(",")
    if len(fields) != 2:
        raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
    name, age = fields
    if not name:
        raise ParsePersonError(ParsePersonErrorKind.NO_NAME)
    try:
        return Person(name=name, age=_parse_usize(age))
    except ValueError as err:
        raise ParsePersonError(ParsePersonErrorKind.PARSE_INT, str(err)) from err


class IntoColorErrorKind(enum.Enum):
    BAD_LEN = "incorrect length"
    INT_CONVERSION = "component out of range"


class IntoColorError(ValueError):
    """Why values could not be turned into a Color."""

    def __init__(self, kind: IntoColorErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def from_tuple(cls, values: tuple[int, int, int]) -> Color:
        """Build a color from exactly three components in 0..=255."""
        return cls.from_sequence(tuple(values))

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> Color:
        """Build a color from a sequence, which must hold three components in 0..=255."""
        if len(values) != 3:
            raise IntoColorError(IntoColorErrorKind.BAD_LEN)
        if any(not 0 <= value <= 255 for value in values):
            raise IntoColorError(IntoColorErrorKind.INT_CONVERSION)
        red, green, blue = values
        return cls(red=red, green=green, blue=blue)