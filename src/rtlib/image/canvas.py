"""A 2D grid of colors with PPM serialization.

The canvas owns a dense, row-major buffer of width * height colors, stored
as a (height, width, 3) float64 NumPy array. Pixels are addressed either
by linear index or by (x, y) coordinate with the origin in the top-left
corner; coordinate (x, y) maps to linear index x + width * y.

Reads return Color copies. To change a pixel, assign to it, or edit the
colors handed out by iter_mut().

Example:
    >>> from rtlib.image.canvas import Canvas
    >>> from rtlib.image.color import Color
    >>> from rtlib.image.coord import Coord2D
    >>> canvas = Canvas(10, 20)
    >>> canvas[Coord2D(2, 3)] = Color(1.0, 0.0, 0.0)
    >>> print(canvas[2, 3])
    RGB(1, 0, 0)
    >>> canvas.to_ppm()[:11]
    b'P3\\n10 20\\n255'
"""

from __future__ import annotations

import operator
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO, Union

import numpy as np
import numpy.typing as npt

from rtlib.core.scalar import EPSILON
from rtlib.image.color import Color
from rtlib.image.coord import Coord2D
from rtlib.preview.ppm import canvas_to_ppm, save_ppm, write_binary_ppm, write_ppm

# Anything that addresses a single pixel
PixelKey = Union[int, Coord2D, tuple[int, int]]


class Canvas:
    """A fixed-size grid of colors, initially all black.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate a black canvas.

        Args:
            width: Number of columns (>= 0).
            height: Number of rows (>= 0).

        Raises:
            ValueError: If either dimension is negative.
        """
        width = operator.index(width)
        height = operator.index(height)
        if width < 0 or height < 0:
            raise ValueError(f"Canvas dimensions must be non-negative, got {width}x{height}")
        self._dim = Coord2D(width, height)
        self._data = np.zeros((height, width, 3), dtype=np.float64)

    @property
    def width(self) -> int:
        return self._dim.x

    @property
    def height(self) -> int:
        return self._dim.y

    @property
    def dim(self) -> Coord2D:
        """The canvas dimension as (width, height)."""
        return self._dim

    @property
    def size(self) -> int:
        """Total number of pixels."""
        return self._dim.x * self._dim.y

    def __len__(self) -> int:
        return self.size

    # -------------------------------------------------------------------------
    # Pixel access
    # -------------------------------------------------------------------------

    def _resolve(self, key: PixelKey) -> tuple[int, int]:
        """Translate a pixel key into a bounds-checked (x, y) pair.

        Raises:
            IndexError: If the key lies outside the canvas.
            TypeError: If the key is not an index or a coordinate.
        """
        if isinstance(key, Coord2D):
            x, y = key.x, key.y
        elif isinstance(key, tuple) and len(key) == 2:
            x, y = operator.index(key[0]), operator.index(key[1])
        else:
            try:
                index = operator.index(key)
            except TypeError:
                raise TypeError(
                    f"Canvas indices must be int, Coord2D or (x, y), got {type(key).__name__}"
                ) from None
            if not 0 <= index < self.size:
                raise IndexError(f"Pixel index {index} out of range for canvas of size {self.size}")
            return index % self.width, index // self.width

        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"{Coord2D(x, y)} out of bounds for canvas of size {self.width}x{self.height}"
            )
        return x, y

    def __getitem__(self, key: PixelKey) -> Color:
        x, y = self._resolve(key)
        r, g, b = self._data[y, x]
        return Color(r, g, b)

    def __setitem__(self, key: PixelKey, color: Color) -> None:
        if not isinstance(color, Color):
            raise TypeError(f"Canvas pixels must be Color, got {type(color).__name__}")
        x, y = self._resolve(key)
        self._data[y, x] = color.as_floats()

    def fill(self, color: Color) -> None:
        """Set every pixel to color."""
        self._data[:, :] = color.as_floats()

    # -------------------------------------------------------------------------
    # Iteration
    # -------------------------------------------------------------------------

    def iter(self) -> Iterator[tuple[Coord2D, Color]]:
        """Iterate over (coordinate, color) pairs in row-major order.

        Each call starts a fresh pass, so the sequence can be re-read as long
        as the canvas is not modified in between.
        """
        for y in range(self.height):
            for x in range(self.width):
                r, g, b = self._data[y, x]
                yield Coord2D(x, y), Color(r, g, b)

    def __iter__(self) -> Iterator[tuple[Coord2D, Color]]:
        return self.iter()

    def iter_mut(self) -> Iterator[tuple[Coord2D, Color]]:
        """Iterate like iter(), storing edits made to the yielded colors.

        Each edited color is written back once the consumer asks for the next
        pixel, or when the iterator is closed (including by leaving a for loop
        early). Colors left unchanged are not written back, so a direct
        assignment such as canvas[coord] = ... inside the loop is kept.

        Example:
            >>> for coord, color in canvas.iter_mut():
            ...     color *= 2.0
        """
        for coord, color in self.iter():
            before = color.as_floats()
            try:
                yield coord, color
            finally:
                after = color.as_floats()
                # Bitwise so NaN channels left untouched count as unchanged
                if np.asarray(after).tobytes() != np.asarray(before).tobytes():
                    self._data[coord.y, coord.x] = after

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the raw (height, width, 3) channel array."""
        return self._data.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        if self._dim != other._dim:
            return False
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def write_ppm(self, sink: BinaryIO) -> None:
        """Write the canvas to sink as an ASCII (P3) PPM image."""
        write_ppm(self, sink)

    def write_binary_ppm(self, sink: BinaryIO) -> None:
        """Write the canvas to sink as a binary (P6) PPM image."""
        write_binary_ppm(self, sink)

    def to_ppm(self, binary: bool = False) -> bytes:
        """Serialize the canvas to PPM bytes (P6 if binary, else P3)."""
        return canvas_to_ppm(self, binary=binary)

    def save(self, filepath: str | Path, binary: bool = False) -> Path:
        """Write the canvas to a PPM file and return its path."""
        return save_ppm(self, filepath, binary=binary)
