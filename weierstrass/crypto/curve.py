"""Short Weierstrass curves  y^2 = x^3 + a*x + b  over F_p.

API
---
EllipticCurve(a=..., b=..., p=...)
    .is_on_curve(P)      -> bool
    .add(P, Q)           -> P + Q      (P != Q; use double for P + P)
    .double(P)           -> 2P
    .negate(P)           -> -P
    .subtract(P, Q)      -> P - Q
    .scalar_mul(P, k)    -> kP         (k >= 1)
    .points()            -> every affine point (small p only)

All coordinate arithmetic goes through ``weierstrass.crypto.field`` with
the curve's modulus, so every intermediate value stays in [0, p).
"""

from __future__ import annotations

import logging
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from weierstrass.config import NAMED_CURVES
from weierstrass.crypto import field
from weierstrass.crypto.errors import (
    EqualOperandsError,
    InvalidScalarError,
    PointNotOnCurveError,
)
from weierstrass.crypto.point import IDENTITY, Coordinate, Point, is_identity

logger = logging.getLogger(__name__)


class EllipticCurve(BaseModel):
    """Curve parameters (a, b, p).  *p* is assumed prime but not checked."""

    model_config = ConfigDict(frozen=True)

    a: int = Field(ge=0)
    b: int = Field(ge=0)
    p: int = Field(ge=2)

    @classmethod
    def from_name(cls, name: str) -> "EllipticCurve":
        """Build a curve from ``config.NAMED_CURVES``."""
        if name not in NAMED_CURVES:
            raise ValueError(f"Unknown curve: {name!r}")
        a, b, p = NAMED_CURVES[name]
        return cls(a=a, b=b, p=p)

    # ---------- membership ----------

    def is_on_curve(self, point: Point) -> bool:
        """Check y^2 == x^3 + a*x + b (mod p).  Identity is always on it."""
        if is_identity(point):
            return True
        x, y, p = point.x, point.y, self.p
        if not (0 <= x < p and 0 <= y < p):
            return False
        lhs = field.power(y, 2, p)
        rhs = field.add(field.power(x, 3, p), field.multiply(self.a, x, p), p)
        return lhs == field.add(rhs, self.b, p)

    def _require_on_curve(self, *points: Point) -> None:
        for point in points:
            if not self.is_on_curve(point):
                logger.debug("point %r rejected by %r", point, self)
                raise PointNotOnCurveError(f"Point is not on the curve: {point!r}")

    # ---------- group law ----------

    def add(self, c: Point, d: Point) -> Point:
        """Chord rule for two *distinct* points."""
        self._require_on_curve(c, d)
        if c == d:
            raise EqualOperandsError(f"Points should not be the same: {c!r}, {d!r}")

        if is_identity(c):
            return d
        if is_identity(d):
            return c

        p = self.p
        x1, y1, x2, y2 = c.x, c.y, d.x, d.y
        # Vertical reflections sum to the point at infinity
        if x1 == x2 and field.add(y1, y2, p) == 0:
            return IDENTITY

        # s = (y2 - y1) / (x2 - x1)
        s = field.divide(field.subtract(y2, y1, p), field.subtract(x2, x1, p), p)
        # x3 = s^2 - x1 - x2
        x3 = field.subtract(field.subtract(field.power(s, 2, p), x1, p), x2, p)
        # y3 = s(x1 - x3) - y1
        y3 = field.subtract(field.multiply(s, field.subtract(x1, x3, p), p), y1, p)
        return Coordinate(x3, y3)

    def double(self, c: Point) -> Point:
        """Tangent rule.  A point with y == 0 has a vertical tangent: 2P = Identity."""
        self._require_on_curve(c)
        if is_identity(c):
            return IDENTITY

        p = self.p
        x1, y1 = c.x, c.y
        if y1 == 0:
            return IDENTITY

        # s = (3 * x1^2 + a) / (2 * y1)
        numerator = field.add(field.multiply(3, field.power(x1, 2, p), p), self.a, p)
        denominator = field.multiply(2, y1, p)
        s = field.divide(numerator, denominator, p)
        # x2 = s^2 - 2 * x1
        x2 = field.subtract(field.power(s, 2, p), field.multiply(2, x1, p), p)
        # y2 = s(x1 - x2) - y1
        y2 = field.subtract(field.multiply(s, field.subtract(x1, x2, p), p), y1, p)
        return Coordinate(x2, y2)

    def negate(self, c: Point) -> Point:
        """Reflection across the x-axis: (x, y) -> (x, -y)."""
        self._require_on_curve(c)
        if is_identity(c):
            return IDENTITY
        return Coordinate(c.x, field.inverse_addition(c.y, self.p))

    def subtract(self, c: Point, d: Point) -> Point:
        """c - d, i.e. c + (-d)."""
        minus_d = self.negate(d)
        if c == minus_d:
            return self.double(c)
        return self.add(c, minus_d)

    def scalar_mul(self, point: Point, k: int) -> Point:
        """Compute k * point by MSB-first double-and-add.

        The accumulator starts at *point*, which consumes the top bit of k.
        A step whose accumulator already equals *point* is doubled rather
        than added, so scalars past the group order stay well defined.
        """
        if k < 1:
            raise InvalidScalarError(f"Scalar must be >= 1: k={k}")
        self._require_on_curve(point)
        logger.debug("scalar_mul over %d bits", k.bit_length())

        acc = point
        for i in reversed(range(k.bit_length() - 1)):
            acc = self.double(acc)
            if (k >> i) & 1:
                acc = self.double(acc) if acc == point else self.add(acc, point)
        return acc

    # ---------- enumeration ----------

    def points(self) -> List[Coordinate]:
        """Every affine point, by brute force over F_p.  Only for small p."""
        p = self.p
        roots: Dict[int, List[int]] = {}
        for y in range(p):
            roots.setdefault(field.power(y, 2, p), []).append(y)
        result: List[Coordinate] = []
        for x in range(p):
            rhs = field.add(
                field.add(field.power(x, 3, p), field.multiply(self.a, x, p), p),
                self.b,
                p,
            )
            for y in roots.get(rhs, []):
                result.append(Coordinate(x, y))
        return result
