"""Worked solutions to the error handling exercises."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_SIGNED = re.compile(r"[+-]?[0-9]+")

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


class ParseIntError(ValueError):
    """A string could not be parsed as an integer."""


def _parse_signed(text: str, bits: int) -> int:
    if not text:
        raise ParseIntError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ParseIntError("invalid digit found in string")
    value = int(text)
    limit = 2 ** (bits - 1)
    if value >= limit:
        raise ParseIntError("number too large to fit in target type")
    if value < -limit:
        raise ParseIntError("number too small to fit in target type")
    return value


def parse_int(text: str) -> int:
    """Parse a signed 64-bit integer written in decimal; raise ParseIntError."""
    return _parse_signed(text, 64)


def total_cost(item_quantity: str) -> int:
    """Cost of the items at 5 tokens each plus a fee of 1; raise ParseIntError."""
    quantity = _parse_signed(item_quantity, 32)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(2**31) <= cost < 2**31:
        raise OverflowError("attempt to compute the cost overflowed")
    return cost


def buy(tokens: int, item_quantity: str) -> int:
    """Buy the items if affordable and return the tokens left; raise ParseIntError."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationErrorKind(enum.Enum):
    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value could not become a PositiveNonzeroInteger."""

    def __init__(self, kind: CreationErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing failed, either as an integer or as a positive nonzero one."""

    def __init__(self, error: CreationError | ParseIntError):
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse a positive nonzero integer; raise ParsePosNonzeroError."""
    try:
        value = parse_int(text)
    except ParseIntError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err