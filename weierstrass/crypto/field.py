"""Prime-field arithmetic F_p.

Stateless: every function takes the modulus *p* explicitly, so the field
modulus and a group order can never be mixed up through shared state.
Inputs are assumed reduced into [0, p); all results are.
"""

from __future__ import annotations

import logging

from weierstrass.crypto.errors import OperandExceedsModulusError

logger = logging.getLogger(__name__)


def add(c: int, d: int, p: int) -> int:
    """Field addition."""
    return (c + d) % p


def multiply(c: int, d: int, p: int) -> int:
    """Field multiplication."""
    return (c * d) % p


def inverse_addition(c: int, p: int) -> int:
    """Additive inverse ``p - c``.

    *c* must already be reduced; anything else means a corrupt value
    upstream and raises ``OperandExceedsModulusError``.
    """
    if c >= p:
        logger.debug("inverse_addition rejected c=%d p=%d", c, p)
        raise OperandExceedsModulusError(
            f"Operand exceeds modulus: c={c}, p={p}"
        )
    return (p - c) % p


def subtract(c: int, d: int, p: int) -> int:
    """Field subtraction, ``c + (-d)``."""
    return add(c, inverse_addition(d, p), p)


def inverse_multiplication(c: int, p: int) -> int:
    """Multiplicative inverse via Fermat's little theorem (p must be prime).

    Primality of *p* is not checked; for composite *p* the result is wrong.
    """
    if c % p == 0:
        raise ZeroDivisionError(f"Cannot invert zero in F_p: c={c}, p={p}")
    return pow(c, p - 2, p)


def divide(c: int, d: int, p: int) -> int:
    """Field division, ``c * d^-1``."""
    return multiply(c, inverse_multiplication(d, p), p)


def power(c: int, e: int, p: int) -> int:
    """Modular exponentiation ``c^e mod p`` for e >= 0."""
    return pow(c, e, p)


def reduce(c: int, p: int) -> int:
    """Reduce an integer into [0, p)."""
    return c % p
