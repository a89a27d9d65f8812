"""Integer pixel coordinates for canvases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coord2D:
    """A pixel coordinate, origin top-left, y growing downward.

    The same type doubles as a canvas dimension (x = width, y = height).

    Attributes:
        x: Column index.
        y: Row index.
    """

    x: int
    y: int

    @classmethod
    def from_index(cls, index: int, dim: Coord2D) -> Coord2D:
        """Convert a row-major linear index into a coordinate.

        Args:
            index: Linear index into a grid of shape dim.
            dim: Grid dimension (width, height).

        Returns:
            The coordinate (index % width, index // width).

        Raises:
            ValueError: If the grid width is not positive.
        """
        if dim.x <= 0:
            raise ValueError(f"Cannot map index {index} into a grid of width {dim.x}")
        return cls(index % dim.x, index // dim.x)

    def to_index(self, dim: Coord2D) -> int:
        """Convert this coordinate to a row-major linear index (x + width * y)."""
        return self.x + dim.x * self.y

    def __str__(self) -> str:
        return f"Coord2D({self.x}, {self.y})"
