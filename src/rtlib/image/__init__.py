"""Image data types.

Components:
    color: RGB colors with component-wise and Hadamard arithmetic
    coord: Integer pixel coordinates (Coord2D)
    canvas: Fixed-size row-major pixel grid with PPM output
"""

from .canvas import Canvas
from .color import Color, hadamard_product
from .coord import Coord2D

__all__ = [
    "Canvas",
    "Color",
    "Coord2D",
    "hadamard_product",
]
