"""Epsilon-tolerant floating-point scalar.

Every component stored by a Tuple or Color is a Scalar. Comparing two
Scalars never checks for bit-exact equality: two values are equal when
they differ by less than EPSILON, which keeps comparisons stable in the
presence of accumulated rounding error.

Approximate equality is not transitive (a≈b and b≈c does not imply a≈c),
so Scalars are deliberately unhashable.

Example:
    >>> from rtlib.core.scalar import Scalar
    >>> Scalar(0.1) == Scalar(0.1000001)
    True
    >>> Scalar(0.1) < Scalar(0.1000001)
    False
    >>> str(Scalar(1.0) / Scalar(4.0))
    '0.25'
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from typing import Union

import numpy as np

# Tolerance used by every approximate comparison
EPSILON = 1e-5

ScalarLike = Union["Scalar", float, int]


def format_float(value: float) -> str:
    """Render a float as its shortest positional decimal.

    Integral values drop their fractional part ("1", "-0"), everything else
    keeps only the digits needed to round-trip ("0.5", "0.26726").
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(value, trim="-")


def approx_equals(a: ScalarLike, b: ScalarLike) -> bool:
    """Return True if ``|a - b| < EPSILON``.

    Args:
        a: A Scalar or real number.
        b: A Scalar or real number.

    Returns:
        Whether the two values are close enough to be treated as equal.
    """
    return abs(float(a) - float(b)) < EPSILON


def _divide(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        # IEEE-754 result (inf or nan) instead of an exception
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(numerator) / np.float64(denominator))


class Scalar:
    """A 64-bit float with approximate equality and ordering.

    Attributes:
        value: The wrapped float.
    """

    __slots__ = ("_value",)

    def __init__(self, value: ScalarLike = 0.0) -> None:
        """Wrap a real number.

        Raises:
            TypeError: If value is neither a Scalar nor a real number.
        """
        if isinstance(value, Scalar):
            value = value.value
        elif not isinstance(value, numbers.Real):
            raise TypeError(f"Expected a Scalar or real number, got {type(value).__name__}")
        object.__setattr__(self, "_value", float(value))

    @property
    def value(self) -> float:
        """The wrapped float (read-only)."""
        return self._value

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Scalar is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Scalar is immutable, cannot delete {name!r}")

    @classmethod
    def sum(cls, values: Iterable[ScalarLike]) -> Scalar:
        """Fold a sequence of Scalars (or numbers) into their sum."""
        return cls(sum((float(v) for v in values), 0.0))

    def sqrt(self) -> Scalar:
        """Square root; negative values give NaN."""
        with np.errstate(invalid="ignore"):
            return Scalar(float(np.sqrt(self.value)))

    def compare(self, other: ScalarLike) -> int | None:
        """Three-way comparison.

        Returns:
            0 if approximately equal, -1 if less, 1 if greater, or None when
            the values are unordered (NaN involved).
        """
        other_value = float(other)
        if approx_equals(self.value, other_value):
            return 0
        if self.value < other_value:
            return -1
        if self.value > other_value:
            return 1
        return None

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not is_scalar_like(other):
            return NotImplemented
        return approx_equals(self.value, other)  # type: ignore[arg-type]

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: ScalarLike) -> bool:
        if not is_scalar_like(other):
            return NotImplemented
        return self.compare(other) == -1

    def __gt__(self, other: ScalarLike) -> bool:
        if not is_scalar_like(other):
            return NotImplemented
        return self.compare(other) == 1

    def __le__(self, other: ScalarLike) -> bool:
        if not is_scalar_like(other):
            return NotImplemented
        return self.compare(other) in (-1, 0)

    def __ge__(self, other: ScalarLike) -> bool:
        if not is_scalar_like(other):
            return NotImplemented
        return self.compare(other) in (0, 1)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: ScalarLike) -> Scalar:
        if not is_scalar_like(other):
            return NotImplemented
        return Scalar(self.value + float(other))

    def __radd__(self, other: ScalarLike) -> Scalar:
        if not is_scalar_like(other):
            return NotImplemented
        return Scalar(float(other) + self.value)

    def __sub__(self, other: ScalarLike) -> Scalar:
        if not is_scalar_like(other):
            return NotImplemented
        return Scalar(self.value - float(other))

    def __rsub__(self, other: ScalarLike) -> Scalar:
        if not is_scalar_like(other):
            return NotImplemented
        return Scalar(float(other) - self.value)

    def __mul__(self, other: ScalarLike) -> Scalar:
        if not is_scalar_like(other):
            return NotImplemented
        return Scalar(self.value * float(other))

    def __rmul__(self, other: ScalarLike) -> Scalar:
        if not is_scalar_like(other):
            return NotImplemented
        return Scalar(float(other) * self.value)

    def __truediv__(self, other: ScalarLike) -> Scalar:
        if not is_scalar_like(other):
            return NotImplemented
        return Scalar(_divide(self.value, float(other)))

    def __rtruediv__(self, other: ScalarLike) -> Scalar:
        if not is_scalar_like(other):
            return NotImplemented
        return Scalar(_divide(float(other), self.value))

    def __neg__(self) -> Scalar:
        return Scalar(-self.value)

    def __abs__(self) -> Scalar:
        return Scalar(abs(self.value))

    # -------------------------------------------------------------------------
    # Conversion and display
    # -------------------------------------------------------------------------

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"Scalar({self.value!r})"

    def __str__(self) -> str:
        return format_float(self.value)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return format(self.value, format_spec)


def is_scalar_like(value: object) -> bool:
    return isinstance(value, (Scalar, numbers.Real))


def as_scalar(value: ScalarLike) -> Scalar:
    """Coerce a number to a Scalar, passing Scalars through unchanged.

    Raises:
        TypeError: If value is neither a Scalar nor a real number.
    """
    if isinstance(value, Scalar):
        return value
    return Scalar(value)
