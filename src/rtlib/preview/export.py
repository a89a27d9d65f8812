"""Image export utilities for canvases.

PPM output lives in rtlib.preview.ppm; this module covers formats written
through Pillow.

Supported formats:
    - PNG (8-bit RGB via Pillow)

Channel values go through the same conversion as PPM output, so a PNG and
a PPM written from the same canvas hold identical pixel bytes.

Example:
    >>> from rtlib.image.canvas import Canvas
    >>> from rtlib.preview.export import save_png
    >>>
    >>> canvas = Canvas(64, 32)
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from rtlib.preview.ppm import channels_to_bytes

if TYPE_CHECKING:
    from rtlib.image.canvas import Canvas


def canvas_to_uint8(canvas: Canvas) -> npt.NDArray[np.uint8]:
    """Convert a canvas to an 8-bit RGB array.

    Args:
        canvas: The canvas to convert.

    Returns:
        Array of shape (height, width, 3) with dtype uint8.
    """
    return channels_to_bytes(canvas.to_numpy())


def save_png(canvas: Canvas, filepath: str | Path) -> Path:
    """Save a canvas as a PNG file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .png).

    Returns:
        The path of the written file.

    Raises:
        ValueError: If the canvas has no pixels.
    """
    if canvas.size == 0:
        raise ValueError("Cannot save an empty canvas as PNG")

    output_file = Path(filepath)
    pil_image = PILImage.fromarray(canvas_to_uint8(canvas))
    pil_image.save(output_file, format="PNG")
    return output_file
