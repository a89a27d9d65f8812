"""Numeric and image-output foundation for a ray tracer.

This package provides the building blocks later stages of the ray tracer
rest on:
- An epsilon-tolerant scalar type used for every stored component
- Homogeneous 4-tuples representing points (w = 1) and vectors (w = 0)
- RGB colors with per-channel arithmetic
- A pixel canvas that serializes to PPM (ASCII P3 and binary P6)

Subpackages:
    core: Scalar and Tuple algebra
    image: Colors, pixel coordinates and the canvas
    preview: PPM serialization, PNG export and a Matplotlib preview

The most used names are re-exported here:

    >>> from rtlib import Canvas, Color, point, vector
"""

from rtlib.core.scalar import EPSILON, Scalar, approx_equals
from rtlib.core.tuple import Tuple, TupleKind, cross, dot, point, vector
from rtlib.image.canvas import Canvas
from rtlib.image.color import Color
from rtlib.image.coord import Coord2D

__version__ = "0.1.0"

__all__ = [
    "EPSILON",
    "Scalar",
    "approx_equals",
    "Tuple",
    "TupleKind",
    "point",
    "vector",
    "dot",
    "cross",
    "Color",
    "Coord2D",
    "Canvas",
]
