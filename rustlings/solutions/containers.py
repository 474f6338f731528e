"""Worked solutions to the option, generics and smart pointer exercises."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at the given hour: 5 before 22, 0 until 23, None past the day."""
    if time_of_day < 0:
        raise ValueError("time of day must not be negative")
    if time_of_day <= 21:
        return 5
    if time_of_day <= 23:
        return 0
    return None


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@dataclass(frozen=True)
class Cons:
    """A cons cell; the empty list is None."""

    head: int
    tail: Cons | None = None


def create_empty_list() -> Cons | None:
    return None


def create_non_empty_list() -> Cons | None:
    return Cons(1, Cons(2, Cons(3)))


class Cow:
    """A sequence that is copied into an owned list the first time it is mutated."""

    def __init__(self, values: Sequence[int], owned: bool):
        self._data: Sequence[int] = values
        self.is_owned = owned

    @classmethod
    def borrowed(cls, values: Sequence[int]) -> Cow:
        return cls(values, owned=False)

    @classmethod
    def owned(cls, values: Sequence[int]) -> Cow:
        return cls(list(values), owned=True)

    def to_mut(self) -> list[int]:
        """Return the owned list, copying borrowed data first."""
        if not self.is_owned:
            self._data = list(self._data)
            self.is_owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self.is_owned else "Borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every element non-negative, copying borrowed data only if needed."""
    negatives = [i for i, value in enumerate(cow) if value < 0]
    if negatives:
        data = cow.to_mut()
        for i in negatives:
            data[i] = -data[i]
    return cow