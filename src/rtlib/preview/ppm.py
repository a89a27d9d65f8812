"""PPM image serialization for canvases.

Two variants of the Netpbm color format are supported:

    P3 (ASCII):   P3\\n<width> <height>\\n255\\n followed by decimal channel
                  values separated by single spaces. Every canvas row starts
                  a new line, and lines are wrapped so they never exceed 70
                  characters.
    P6 (binary):  P6\\n<width> <height>\\n255\\n followed by 3 * width * height
                  raw bytes and a trailing newline.

Channel values are converted to bytes with round(value * 255) clamped to
[0, 255], rounding halves away from zero (0.5 -> 128).

Writers accept any binary sink with a write(bytes) method. Errors raised by
the sink abort the write and propagate to the caller unchanged. Wrap raw
streams in a buffered writer for large canvases; save_ppm() does this for
files.

Example:
    >>> import io
    >>> from rtlib.image.canvas import Canvas
    >>> from rtlib.preview.ppm import write_ppm
    >>> sink = io.BytesIO()
    >>> write_ppm(Canvas(5, 3), sink)
    >>> sink.getvalue().startswith(b"P3\\n5 3\\n255\\n")
    True
"""

from __future__ import annotations

import io
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Literal

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from rtlib.core.scalar import ScalarLike
    from rtlib.image.canvas import Canvas


PPM_ASCII_MAGIC = "P3"
PPM_BINARY_MAGIC = "P6"
PPM_MAX_COLOR_VALUE = 255
PPM_MAX_LINE_LENGTH = 70

PPMMagic = Literal["P3", "P6"]


# =============================================================================
# Channel conversion
# =============================================================================


def channels_to_bytes(values: npt.ArrayLike) -> npt.NDArray[np.uint8]:
    """Convert raw channel values to 8-bit color values.

    Computes clamp(round(value * 255), 0, 255) element-wise, rounding halves
    away from zero. NaN maps to 0 and +inf to 255.

    Args:
        values: Array of raw (unclamped) channel values, any shape.

    Returns:
        Array of the same shape with dtype uint8.
    """
    scaled = np.asarray(values, dtype=np.float64) * PPM_MAX_COLOR_VALUE
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=PPM_MAX_COLOR_VALUE, neginf=0.0)

    # np.round rounds halves to even; PPM output rounds them away from zero
    truncated = np.trunc(scaled)
    rounded = truncated + np.where(np.abs(scaled - truncated) >= 0.5, np.sign(scaled), 0.0)

    return np.clip(rounded, 0, PPM_MAX_COLOR_VALUE).astype(np.uint8)


def channel_to_byte(value: ScalarLike) -> int:
    """Convert one raw channel value to its 8-bit color value.

    Example:
        >>> channel_to_byte(0.5), channel_to_byte(1.5), channel_to_byte(-0.5)
        (128, 255, 0)
    """
    return int(channels_to_bytes(float(value)))


# =============================================================================
# Writers
# =============================================================================


def ppm_header(magic: PPMMagic, width: int, height: int) -> bytes:
    """Build the three-line PPM header.

    Args:
        magic: "P3" for ASCII or "P6" for binary.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        The header bytes, e.g. b"P3\\n5 3\\n255\\n".

    Raises:
        ValueError: If magic is not a supported PPM variant.
    """
    if magic not in (PPM_ASCII_MAGIC, PPM_BINARY_MAGIC):
        raise ValueError(f"Unknown PPM magic number: {magic}")
    return f"{magic}\n{width} {height}\n{PPM_MAX_COLOR_VALUE}\n".encode("ascii")


def _ascii_lines(pixels: npt.NDArray[np.uint8]) -> Iterator[str]:
    """Yield the P3 body lines for a (height, width, 3) byte array."""
    for row in pixels:
        line: list[str] = []
        line_length = 0
        for value in row.ravel().tolist():
            token = str(value)
            if line and line_length + 1 + len(token) > PPM_MAX_LINE_LENGTH:
                yield " ".join(line)
                line = []
                line_length = 0
            line_length += len(token) + (1 if line else 0)
            line.append(token)
        yield " ".join(line)


def write_ppm(canvas: Canvas, sink: BinaryIO) -> None:
    """Write a canvas as an ASCII (P3) PPM image.

    Args:
        canvas: The canvas to serialize.
        sink: Binary destination with a write(bytes) method.

    Raises:
        Whatever sink.write raises (typically OSError), unchanged.
    """
    sink.write(ppm_header(PPM_ASCII_MAGIC, canvas.width, canvas.height))

    if canvas.size == 0:
        sink.write(b"\n")
        return

    pixels = channels_to_bytes(canvas.to_numpy())
    for line in _ascii_lines(pixels):
        sink.write(line.encode("ascii") + b"\n")


def write_binary_ppm(canvas: Canvas, sink: BinaryIO) -> None:
    """Write a canvas as a binary (P6) PPM image.

    The body holds exactly 3 * width * height bytes in row-major RGB order,
    followed by a single newline.

    Args:
        canvas: The canvas to serialize.
        sink: Binary destination with a write(bytes) method.

    Raises:
        Whatever sink.write raises (typically OSError), unchanged.
    """
    sink.write(ppm_header(PPM_BINARY_MAGIC, canvas.width, canvas.height))

    pixels = channels_to_bytes(canvas.to_numpy())
    for row in pixels:
        sink.write(row.tobytes())

    sink.write(b"\n")


def canvas_to_ppm(canvas: Canvas, binary: bool = False) -> bytes:
    """Serialize a canvas to PPM bytes in memory."""
    buffer = io.BytesIO()
    if binary:
        write_binary_ppm(canvas, buffer)
    else:
        write_ppm(canvas, buffer)
    return buffer.getvalue()


def save_ppm(canvas: Canvas, filepath: str | Path, *, binary: bool = False) -> Path:
    """Save a canvas as a PPM file.

    The file is opened in buffered binary mode and closed on return, also
    when writing fails.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (conventionally ending in .ppm).
        binary: Write P6 instead of P3.

    Returns:
        The path of the written file.

    Raises:
        OSError: If the file cannot be created or written.
    """
    output_file = Path(filepath)
    with output_file.open("wb") as f:
        if binary:
            write_binary_ppm(canvas, f)
        else:
            write_ppm(canvas, f)
    return output_file
