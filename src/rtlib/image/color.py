"""RGB color values.

Channels are Scalars with no range restriction: intermediate results may
exceed 1 or drop below 0. Clamping happens only when a color is converted
to bytes for output (see rtlib.preview.ppm).

Example:
    >>> from rtlib.image.color import Color
    >>> print(Color(1.0, 0.5, 0.25) * Color(0.5, 1.0, 2.0))
    RGB(0.5, 0.5, 0.5)
"""

from __future__ import annotations

from collections.abc import Iterator

from rtlib.core.scalar import Scalar, ScalarLike, as_scalar, is_scalar_like


class Color:
    """A mutable (r, g, b) triple of Scalars.

    Attributes:
        elements: The three Scalar channels in r, g, b order.
    """

    __slots__ = ("elements",)

    def __init__(self, r: ScalarLike, g: ScalarLike, b: ScalarLike) -> None:
        self.elements = [as_scalar(r), as_scalar(g), as_scalar(b)]

    @classmethod
    def black(cls) -> Color:
        return cls(0.0, 0.0, 0.0)

    def copy(self) -> Color:
        return Color(*self.elements)

    def as_floats(self) -> tuple[float, float, float]:
        """Return the raw channel values."""
        r, g, b = (e.value for e in self.elements)
        return r, g, b

    @property
    def r(self) -> Scalar:
        return self.elements[0]

    @r.setter
    def r(self, value: ScalarLike) -> None:
        self.elements[0] = as_scalar(value)

    @property
    def g(self) -> Scalar:
        return self.elements[1]

    @g.setter
    def g(self, value: ScalarLike) -> None:
        self.elements[1] = as_scalar(value)

    @property
    def b(self) -> Scalar:
        return self.elements[2]

    @b.setter
    def b(self, value: ScalarLike) -> None:
        self.elements[2] = as_scalar(value)

    def __getitem__(self, index: int) -> Scalar:
        return self.elements[index]

    def __setitem__(self, index: int, value: ScalarLike) -> None:
        self.elements[index] = as_scalar(value)

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self.elements)

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __iadd__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        self.elements = [a + b for a, b in zip(self.elements, other.elements)]
        return self

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __isub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        self.elements = [a - b for a, b in zip(self.elements, other.elements)]
        return self

    def __mul__(self, other: Color | ScalarLike) -> Color:
        """Per-channel product with another Color, or scaling by a scalar."""
        if not isinstance(other, Color) and not is_scalar_like(other):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __rmul__(self, factor: ScalarLike) -> Color:
        if not is_scalar_like(factor):
            return NotImplemented
        return self * factor

    def __imul__(self, other: Color | ScalarLike) -> Color:
        if isinstance(other, Color):
            self.elements = [a * b for a, b in zip(self.elements, other.elements)]
        elif is_scalar_like(other):
            self.elements = [e * other for e in self.elements]
        else:
            return NotImplemented
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return all(a == b for a, b in zip(self.elements, other.elements))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"RGB({', '.join(str(e) for e in self.elements)})"

    def __repr__(self) -> str:
        r, g, b = self.as_floats()
        return f"Color({r!r}, {g!r}, {b!r})"


def hadamard_product(a: Color, b: Color) -> Color:
    """Multiply two colors channel by channel.

    This is how a surface color filters incoming light; it is not a dot
    product.
    """
    return a * b
