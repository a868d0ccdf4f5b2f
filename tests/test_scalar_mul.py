"""Tests for double-and-add scalar multiplication."""

import pytest

from weierstrass.config import (
    SECP256K1_GENERATOR,
    SECP256K1_ORDER,
    TOY_GENERATOR,
    TOY_ORDER,
)
from weierstrass.crypto.curve import EllipticCurve
from weierstrass.crypto.errors import InvalidScalarError, PointNotOnCurveError
from weierstrass.crypto.point import IDENTITY, Coordinate


@pytest.fixture()
def curve():
    return EllipticCurve.from_name("toy17")


@pytest.fixture()
def g():
    return Coordinate(*TOY_GENERATOR)


def _multiples(curve, pt, count):
    """[0*pt, 1*pt, ..., (count-1)*pt] by repeated addition."""
    out = [IDENTITY]
    for _ in range(count - 1):
        acc = out[-1]
        out.append(curve.double(acc) if acc == pt else curve.add(acc, pt))
    return out


def test_known_multiples(curve, g):
    assert curve.scalar_mul(g, 1) == g
    assert curve.scalar_mul(g, 2) == Coordinate(6, 3)
    assert curve.scalar_mul(g, 10) == Coordinate(7, 11)
    assert curve.scalar_mul(g, TOY_ORDER) == IDENTITY


def test_two_matches_double(curve):
    for pt in curve.points():
        assert curve.scalar_mul(pt, 2) == curve.double(pt)


def test_matches_repeated_addition(curve, g):
    expected = _multiples(curve, g, TOY_ORDER)
    for k in range(1, 3 * TOY_ORDER):
        assert curve.scalar_mul(g, k) == expected[k % TOY_ORDER]


def test_accumulator_meeting_point_is_doubled(curve, g):
    # 21 = 0b10101: after the prefix 0b1010 the accumulator is 20G == G
    assert curve.scalar_mul(g, 21) == curve.double(g)


def test_every_point_has_order_dividing_group(curve):
    for pt in curve.points():
        assert curve.scalar_mul(pt, TOY_ORDER) == IDENTITY


def test_identity_times_k(curve):
    assert curve.scalar_mul(IDENTITY, 7) == IDENTITY


def test_two_torsion_multiples():
    curve = EllipticCurve(a=1, b=0, p=23)
    pt = Coordinate(0, 0)
    assert curve.scalar_mul(pt, 2) == IDENTITY
    assert curve.scalar_mul(pt, 3) == pt


def test_zero_scalar_rejected(curve, g):
    with pytest.raises(InvalidScalarError, match="k=0"):
        curve.scalar_mul(g, 0)
    with pytest.raises(InvalidScalarError):
        curve.scalar_mul(g, -3)


def test_off_curve_rejected(curve):
    with pytest.raises(PointNotOnCurveError):
        curve.scalar_mul(Coordinate(1, 1), 3)


# ---------- secp256k1 (large integers) --------------------------------------

@pytest.fixture()
def secp():
    return EllipticCurve.from_name("secp256k1")


def test_secp256k1_double(secp):
    g = Coordinate(*SECP256K1_GENERATOR)
    two_g = Coordinate(
        0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
        0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A,
    )
    assert secp.is_on_curve(g)
    assert secp.double(g) == two_g
    assert secp.scalar_mul(g, 2) == two_g


def test_secp256k1_order(secp):
    g = Coordinate(*SECP256K1_GENERATOR)
    assert secp.scalar_mul(g, SECP256K1_ORDER) == IDENTITY
    assert secp.scalar_mul(g, SECP256K1_ORDER - 1) == secp.negate(g)
