"""Matplotlib-based preview display for canvases.

Example:
    >>> from rtlib.image.canvas import Canvas
    >>> from rtlib.preview.display import show_canvas
    >>>
    >>> canvas = Canvas(900, 550)
    >>> show_canvas(canvas, title="Trajectory")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rtlib.preview.export import canvas_to_uint8

if TYPE_CHECKING:
    from rtlib.image.canvas import Canvas


def show_canvas(
    canvas: Canvas,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
    block: bool = True,
) -> None:
    """Display a canvas as a Matplotlib figure.

    Pixels are shown exactly as they would be written to a PPM file
    (clamped and quantized to 8 bits), with the origin in the top-left.

    Args:
        canvas: The canvas to display.
        title: Custom title (default shows the canvas size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until figure is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)

    ax.imshow(canvas_to_uint8(canvas), interpolation="nearest")
    ax.axis("off")

    if title is None:
        title = f"Canvas {canvas.width}x{canvas.height}"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
