"""Contract violations raised by the field and curve arithmetic.

Each of these signals a caller bug (an un-reduced value, a point that is
not on the curve, ...) rather than an expected runtime condition.
Messages follow the ``<what failed>: <operands>`` form.
"""

from __future__ import annotations


class ContractViolation(ValueError):
    """Base class for arithmetic precondition failures."""


class OperandExceedsModulusError(ContractViolation):
    """A field operand was not reduced into [0, p)."""


class PointNotOnCurveError(ContractViolation):
    """A point does not satisfy the curve equation."""


class EqualOperandsError(ContractViolation):
    """``add`` was called with two equal points; use ``double`` instead."""


class InvalidScalarError(ContractViolation):
    """Scalar multiplication was asked for a scalar below 1."""
