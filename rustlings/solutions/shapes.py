"""Rectangles with area and containment checks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    width: int
    height: int

    def area(self) -> int:
        return self.width * self.height

    def can_hold(self, other: Rectangle) -> bool:
        """Whether the other rectangle fits strictly inside this one."""
        return self.width > other.width and self.height > other.height

    @classmethod
    def square(cls, size: int) -> Rectangle:
        return cls(size, size)

    @classmethod
    def validated(cls, width: int, height: int) -> Rectangle:
        """Build a rectangle whose sides must both be positive."""
        if width <= 0 or height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")
        return cls(width, height)