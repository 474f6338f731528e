"""Small library functions and a validated guess."""

from __future__ import annotations

from dataclasses import dataclass


def add(left: int, right: int) -> int:
    return left + right


def add_two(a: int) -> int:
    return a + 2


def greeting(name: str) -> str:
    return f"Hello {name}!"


@dataclass(frozen=True)
class Guess:
    """A guess between 1 and 100 inclusive."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError(
                f"Guess value must be greater than or equal to 1, got {self.value}."
            )
        if self.value > 100:
            raise ValueError(
                f"Guess value must be less than or equal to 100, got {self.value}."
            )