"""Core numeric types.

Components:
    scalar: Epsilon-tolerant float wrapper (Scalar) and approximate equality
    tuple: Homogeneous 4-tuples for points and vectors, with dot/cross
        products, magnitude and normalization

Comparisons between Scalars, and therefore between Tuples, are always
approximate: two values are equal when they differ by less than EPSILON.
"""

from .scalar import (
    EPSILON,
    Scalar,
    ScalarLike,
    approx_equals,
    as_scalar,
    format_float,
    is_scalar_like,
)
from .tuple import (
    Tuple,
    TupleKind,
    cross,
    dot,
    magnitude,
    normalize,
    point,
    vector,
)

__all__ = [
    "EPSILON",
    "Scalar",
    "ScalarLike",
    "approx_equals",
    "as_scalar",
    "format_float",
    "is_scalar_like",
    "Tuple",
    "TupleKind",
    "point",
    "vector",
    "dot",
    "cross",
    "magnitude",
    "normalize",
]
