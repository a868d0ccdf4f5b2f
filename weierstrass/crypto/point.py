"""Curve points: affine ``Coordinate(x, y)`` or the point at infinity.

Both are immutable value types with structural equality.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Coordinate:
    """An affine point; x and y are interpreted modulo the curve's p."""

    x: int
    y: int

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class _Identity:
    """The group's neutral element (point at infinity)."""

    def __repr__(self) -> str:
        return "Identity"


IDENTITY = _Identity()

Point = Union[Coordinate, _Identity]


def is_identity(point: Point) -> bool:
    return isinstance(point, _Identity)
