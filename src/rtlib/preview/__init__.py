"""Preview module for output and visualization.

Components:
    ppm: PPM (P3 ASCII and P6 binary) serialization
    export: PNG export via Pillow
    display: Matplotlib-based preview window

Example:
    >>> from rtlib.preview import save_ppm, save_png
    >>> save_ppm(canvas, "image.ppm")
    >>> save_ppm(canvas, "image_binary.ppm", binary=True)
    >>> save_png(canvas, "image.png")
"""

from rtlib.preview.display import show_canvas
from rtlib.preview.export import canvas_to_uint8, save_png
from rtlib.preview.ppm import (
    PPM_ASCII_MAGIC,
    PPM_BINARY_MAGIC,
    PPM_MAX_COLOR_VALUE,
    PPM_MAX_LINE_LENGTH,
    canvas_to_ppm,
    channel_to_byte,
    channels_to_bytes,
    ppm_header,
    save_ppm,
    write_binary_ppm,
    write_ppm,
)

__all__ = [
    # PPM serialization
    "write_ppm",
    "write_binary_ppm",
    "canvas_to_ppm",
    "save_ppm",
    "ppm_header",
    "channel_to_byte",
    "channels_to_bytes",
    "PPM_ASCII_MAGIC",
    "PPM_BINARY_MAGIC",
    "PPM_MAX_COLOR_VALUE",
    "PPM_MAX_LINE_LENGTH",
    # Export functions
    "save_png",
    "canvas_to_uint8",
    # Display functions
    "show_canvas",
]
