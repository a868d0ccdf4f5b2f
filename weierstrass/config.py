"""Global configuration for weierstrass."""

import os

# ---------- Toy curve  y^2 = x^3 + 2x + 2  over F_17 ----------
# Small enough to enumerate by hand; the generator has prime order 19.
TOY_CURVE = (2, 2, 17)   # (a, b, p)
TOY_GENERATOR = (5, 1)
TOY_ORDER = 19

# ---------- secp256k1  y^2 = x^3 + 7  over F_p ----------
# Used as a large-integer fixture only; no standards validation is done.
SECP256K1_P = 2**256 - 2**32 - 977
SECP256K1 = (0, 7, SECP256K1_P)
SECP256K1_GENERATOR = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# ---------- Named curves (name -> (a, b, p)) ----------
NAMED_CURVES = {
    "toy17": TOY_CURVE,
    "secp256k1": SECP256K1,
}

# Generators and their orders, keyed like NAMED_CURVES
NAMED_GENERATORS = {
    "toy17": (TOY_GENERATOR, TOY_ORDER),
    "secp256k1": (SECP256K1_GENERATOR, SECP256K1_ORDER),
}

# ---------- Demo / logging ----------
DEMO_CURVE = os.environ.get("WEIERSTRASS_DEMO_CURVE", "toy17")
LOG_LEVEL = os.environ.get("WEIERSTRASS_LOG_LEVEL", "WARNING")
