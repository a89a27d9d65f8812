"""Homogeneous-coordinate 4-tuples shared by points and vectors.

A Tuple stores four Scalars (x, y, z, w). There are no separate point and
vector types: the w component alone decides the role of a value.

    w ≈ 1  ->  point
    w ≈ 0  ->  vector
    other  ->  neither (e.g. the result of point + point, w = 2)

Arithmetic works component-wise on all four fields, so the usual affine
rules fall out of the representation:

    point  - point   = vector
    point  + vector  = point
    vector + vector  = vector

Scaling multiplies w as well. A point scaled by a non-unit factor is no
longer classified as a point.

Example:
    >>> from rtlib.core.tuple import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 1.0, 0.0)
    >>> print(p + v)
    Point(1, 3, 3)
    >>> print(p - point(0.0, 0.0, 0.0))
    Vector(1, 2, 3)
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from rtlib.core.scalar import Scalar, ScalarLike, as_scalar, is_scalar_like


class TupleKind(Enum):
    """Semantic role of a Tuple, derived from its w component.

    The enum values double as the display labels.
    """

    POINT = "Point"
    VECTOR = "Vector"
    NEITHER = "Tuple"


class Tuple:
    """A mutable homogeneous 4-tuple (x, y, z, w).

    Attributes:
        elements: The four Scalar components in x, y, z, w order.
    """

    __slots__ = ("elements",)

    def __init__(
        self,
        x: ScalarLike,
        y: ScalarLike,
        z: ScalarLike,
        w: ScalarLike,
    ) -> None:
        self.elements = [as_scalar(x), as_scalar(y), as_scalar(z), as_scalar(w)]

    @classmethod
    def point(cls, x: ScalarLike, y: ScalarLike, z: ScalarLike) -> Tuple:
        """Create a point (w = 1)."""
        return cls(x, y, z, 1.0)

    @classmethod
    def vector(cls, x: ScalarLike, y: ScalarLike, z: ScalarLike) -> Tuple:
        """Create a vector (w = 0)."""
        return cls(x, y, z, 0.0)

    @classmethod
    def zero(cls) -> Tuple:
        """Create the all-zero tuple, which is also the zero vector."""
        return cls(0.0, 0.0, 0.0, 0.0)

    def copy(self) -> Tuple:
        return Tuple(*self.elements)

    # -------------------------------------------------------------------------
    # Component access
    # -------------------------------------------------------------------------

    @property
    def x(self) -> Scalar:
        return self.elements[0]

    @x.setter
    def x(self, value: ScalarLike) -> None:
        self.elements[0] = as_scalar(value)

    @property
    def y(self) -> Scalar:
        return self.elements[1]

    @y.setter
    def y(self, value: ScalarLike) -> None:
        self.elements[1] = as_scalar(value)

    @property
    def z(self) -> Scalar:
        return self.elements[2]

    @z.setter
    def z(self, value: ScalarLike) -> None:
        self.elements[2] = as_scalar(value)

    @property
    def w(self) -> Scalar:
        return self.elements[3]

    @w.setter
    def w(self, value: ScalarLike) -> None:
        self.elements[3] = as_scalar(value)

    def __getitem__(self, index: int) -> Scalar:
        return self.elements[index]

    def __setitem__(self, index: int, value: ScalarLike) -> None:
        self.elements[index] = as_scalar(value)

    def __len__(self) -> int:
        return 4

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self.elements)

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def classify(self) -> TupleKind:
        """Return the semantic role of this tuple.

        A w close to 1 wins over a w close to 0; both cannot hold at once
        while EPSILON is below 0.5.
        """
        if self.is_point():
            return TupleKind.POINT
        if self.is_vector():
            return TupleKind.VECTOR
        return TupleKind.NEITHER

    # -------------------------------------------------------------------------
    # Vector operations
    # -------------------------------------------------------------------------

    def magnitude(self) -> Scalar:
        """Euclidean norm over all four components.

        For a vector (w = 0) this is the usual 3D length.
        """
        return Scalar.sum(e * e for e in self.elements).sqrt()

    def normalize(self) -> Tuple:
        """Return this tuple divided by its magnitude.

        A zero tuple has no direction; the result then holds NaN components.
        """
        return self / self.magnitude()

    def dot(self, other: Tuple) -> Scalar:
        """4D dot product, including the w components."""
        return Scalar.sum(a * b for a, b in zip(self.elements, other.elements))

    def cross(self, other: Tuple) -> Tuple:
        """Cross product of the x/y/z parts, returned as a vector.

        The w components of both operands are ignored.
        """
        return Tuple.vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __iadd__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        self.elements = [a + b for a, b in zip(self.elements, other.elements)]
        return self

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __isub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        self.elements = [a - b for a, b in zip(self.elements, other.elements)]
        return self

    def __neg__(self) -> Tuple:
        return Tuple(*(-e for e in self.elements))

    def __mul__(self, factor: ScalarLike) -> Tuple:
        if not is_scalar_like(factor):
            return NotImplemented
        result = self.copy()
        result *= factor
        return result

    __rmul__ = __mul__

    def __imul__(self, factor: ScalarLike) -> Tuple:
        if not is_scalar_like(factor):
            return NotImplemented
        self.elements = [e * factor for e in self.elements]
        return self

    def __truediv__(self, divisor: ScalarLike) -> Tuple:
        if not is_scalar_like(divisor):
            return NotImplemented
        result = self.copy()
        result /= divisor
        return result

    def __itruediv__(self, divisor: ScalarLike) -> Tuple:
        if not is_scalar_like(divisor):
            return NotImplemented
        self.elements = [e / divisor for e in self.elements]
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return all(a == b for a, b in zip(self.elements, other.elements))

    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        kind = self.classify()
        shown = self.elements if kind is TupleKind.NEITHER else self.elements[:3]
        return f"{kind.value}({', '.join(str(e) for e in shown)})"

    def __repr__(self) -> str:
        x, y, z, w = (e.value for e in self.elements)
        return f"Tuple({x!r}, {y!r}, {z!r}, {w!r})"


# =============================================================================
# Free-function API
# =============================================================================


def point(x: ScalarLike, y: ScalarLike, z: ScalarLike) -> Tuple:
    """Create a point (w = 1)."""
    return Tuple.point(x, y, z)


def vector(x: ScalarLike, y: ScalarLike, z: ScalarLike) -> Tuple:
    """Create a vector (w = 0)."""
    return Tuple.vector(x, y, z)


def dot(a: Tuple, b: Tuple) -> Scalar:
    """Compute the dot product of two tuples.

    Args:
        a: First tuple.
        b: Second tuple.

    Returns:
        The sum of the four pairwise component products.
    """
    return a.dot(b)


def cross(a: Tuple, b: Tuple) -> Tuple:
    """Compute the cross product of two tuples.

    Args:
        a: First tuple.
        b: Second tuple.

    Returns:
        The vector a x b. Anticommutative: cross(a, b) == -cross(b, a).
    """
    return a.cross(b)


def magnitude(t: Tuple) -> Scalar:
    """Compute the Euclidean length of a tuple over all four components."""
    return t.magnitude()


def normalize(t: Tuple) -> Tuple:
    """Scale a tuple to unit length.

    Args:
        t: The input tuple.

    Returns:
        t / magnitude(t). Zero-length input yields NaN components.
    """
    return t.normalize()
