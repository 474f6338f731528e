"""Worked solutions to the vector exercises."""

from __future__ import annotations

from typing import Iterable


def array_and_vec() -> tuple[tuple[int, int, int, int], list[int]]:
    """A fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    vector = [10, 20, 30, 40]
    return array, vector


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]