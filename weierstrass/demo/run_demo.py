#!/usr/bin/env python3
"""weierstrass walk-through.

Usage:
    python -m weierstrass.demo.run_demo

The script:
1. Builds the curve named by WEIERSTRASS_DEMO_CURVE (default ``toy17``).
2. Lists its affine points (small curves only).
3. Walks the multiples 1*G ... n*G of the generator.
4. Shows the add / double / negate group law on G.
5. Triggers a contract violation on purpose.
"""

from __future__ import annotations

import logging

from weierstrass.config import DEMO_CURVE, LOG_LEVEL, NAMED_GENERATORS
from weierstrass.crypto.curve import EllipticCurve
from weierstrass.crypto.errors import ContractViolation
from weierstrass.crypto.point import Coordinate

# Enumerating points is brute force over F_p
MAX_ENUMERATED_P = 1000
MAX_WALKED_MULTIPLES = 32


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def main(curve_name: str = DEMO_CURVE) -> None:
    logging.basicConfig(level=LOG_LEVEL)

    # ---- 1. Curve ----
    banner(f"1) Curve {curve_name}")
    curve = EllipticCurve.from_name(curve_name)
    (gx, gy), order = NAMED_GENERATORS[curve_name]
    g = Coordinate(gx, gy)
    print(f"   y^2 = x^3 + {curve.a}x + {curve.b}  (mod {curve.p})")
    print(f"   G = {g!r}, order n = {order}")

    # ---- 2. Points ----
    banner("2) Affine points")
    if curve.p <= MAX_ENUMERATED_P:
        pts = curve.points()
        print(f"   {len(pts)} affine points + Identity")
        print("   " + " ".join(repr(pt) for pt in pts))
    else:
        print(f"   p too large to enumerate (> {MAX_ENUMERATED_P})")

    # ---- 3. Multiples of G ----
    banner("3) Multiples of G")
    for k in range(1, min(order, MAX_WALKED_MULTIPLES) + 1):
        print(f"   {k:>3} * G = {curve.scalar_mul(g, k)!r}")
    print(f"   n * G = {curve.scalar_mul(g, order)!r}")

    # ---- 4. Group law ----
    banner("4) Group law")
    two_g = curve.double(g)
    print(f"   double(G)    = {two_g!r}")
    print(f"   G + 2G       = {curve.add(g, two_g)!r}")
    print(f"   -G           = {curve.negate(g)!r}")
    print(f"   G + (-G)     = {curve.add(g, curve.negate(g))!r}")

    # ---- 5. Contract violation ----
    banner("5) Contract violation")
    try:
        curve.add(g, g)
    except ContractViolation as exc:
        print(f"   {type(exc).__name__}: {exc}")


if __name__ == "__main__":
    main()
