"""Tests for PPM serialization.

Tests cover:
- Channel byte conversion (clamping and rounding)
- P3 header, body layout and 70-character line wrapping
- P6 header and raw body
- Sink error propagation
- File output
"""

import io

import numpy as np
import pytest
from PIL import Image as PILImage

from rtlib.image.canvas import Canvas
from rtlib.image.color import Color
from rtlib.image.coord import Coord2D
from rtlib.preview.ppm import (
    PPM_MAX_LINE_LENGTH,
    canvas_to_ppm,
    channel_to_byte,
    channels_to_bytes,
    ppm_header,
    save_ppm,
    write_binary_ppm,
    write_ppm,
)


def _split_ppm(data: bytes) -> tuple[bytes, bytes]:
    """Split serialized PPM into its three header lines and the body."""
    first, second, third, body = data.split(b"\n", 3)
    return b"\n".join([first, second, third]) + b"\n", body


class TestChannelConversion:
    """Tests for converting channel values to bytes."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.0, 0),
            (1.0, 255),
            (1.5, 255),
            (-0.5, 0),
            (0.5, 128),
            (0.8, 204),
            (0.6, 153),
            (0.2, 51),
            (1.0 / 255.0, 1),
            (100.0, 255),
        ],
    )
    def test_channel_to_byte(self, value, expected):
        """Test clamp(round(value * 255), 0, 255)."""
        assert channel_to_byte(value) == expected

    def test_half_rounds_up(self):
        """Test 0.5 * 255 = 127.5 rounds up to 128."""
        assert channels_to_bytes(np.array([0.5, 0.5])).tolist() == [128, 128]

    def test_non_finite_values(self):
        """Test NaN maps to 0 and infinities clamp."""
        assert channel_to_byte(float("nan")) == 0
        assert channel_to_byte(float("inf")) == 255
        assert channel_to_byte(float("-inf")) == 0

    def test_vectorized(self):
        """Test array conversion keeps shape and dtype."""
        values = np.array([[[1.5, 0.0, 0.0], [0.0, 0.5, -0.5]]])
        result = channels_to_bytes(values)
        assert result.dtype == np.uint8
        assert result.shape == (1, 2, 3)
        assert result.tolist() == [[[255, 0, 0], [0, 128, 0]]]


class TestAsciiPPM:
    """Tests for the P3 writer."""

    def test_header(self):
        """Test the P3 header is exact."""
        assert ppm_header("P3", 5, 3) == b"P3\n5 3\n255\n"

    def test_canvas_header(self, sink):
        """Test write_ppm starts with the exact header."""
        write_ppm(Canvas(5, 3), sink)
        header, _ = _split_ppm(sink.getvalue())
        assert header == b"P3\n5 3\n255\n"

    def test_unknown_magic_raises(self):
        """Test only P3 and P6 headers are produced."""
        with pytest.raises(ValueError, match="Unknown PPM magic"):
            ppm_header("P5", 1, 1)

    def test_pixel_data(self, sink):
        """Test body rows, clamping and rounding."""
        canvas = Canvas(5, 3)
        canvas[Coord2D(0, 0)] = Color(1.5, 0.0, 0.0)
        canvas[Coord2D(2, 1)] = Color(0.0, 0.5, 0.0)
        canvas[Coord2D(4, 2)] = Color(-0.5, 0.0, 1.0)
        write_ppm(canvas, sink)
        _, body = _split_ppm(sink.getvalue())
        assert body == (
            b"255 0 0 0 0 0 0 0 0 0 0 0 0 0 0\n"
            b"0 0 0 0 0 0 0 128 0 0 0 0 0 0 0\n"
            b"0 0 0 0 0 0 0 0 0 0 0 0 0 0 255\n"
        )

    def test_long_lines_are_wrapped(self, sink):
        """Test a 10x2 canvas wraps rows at 70 characters."""
        canvas = Canvas(10, 2)
        canvas.fill(Color(1.0, 0.8, 0.6))
        write_ppm(canvas, sink)
        _, body = _split_ppm(sink.getvalue())
        assert body == (
            b"255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204\n"
            b"153 255 204 153 255 204 153 255 204 153 255 204 153\n"
            b"255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204\n"
            b"153 255 204 153 255 204 153 255 204 153 255 204 153\n"
        )

    def test_no_line_exceeds_limit(self, sink):
        """Test every output line of a wide canvas fits in 70 characters."""
        canvas = Canvas(37, 4)
        for coord, color in canvas.iter_mut():
            color.r = coord.x / 36
            color.g = 1.0
            color.b = coord.y / 3
        write_ppm(canvas, sink)
        lines = sink.getvalue().decode("ascii").splitlines()
        assert all(len(line) <= PPM_MAX_LINE_LENGTH for line in lines)

    def test_rows_start_new_lines(self, sink):
        """Test each canvas row begins on its own line."""
        canvas = Canvas(2, 3)
        canvas[0, 1] = Color(1.0, 1.0, 1.0)
        write_ppm(canvas, sink)
        _, body = _split_ppm(sink.getvalue())
        assert body.splitlines() == [b"0 0 0 0 0 0", b"255 255 255 0 0 0", b"0 0 0 0 0 0"]

    def test_ends_with_newline(self, sink):
        """Test the output is terminated by a newline."""
        write_ppm(Canvas(5, 3), sink)
        assert sink.getvalue().endswith(b"\n")

    def test_empty_canvas(self, sink):
        """Test a canvas without pixels has an empty body line."""
        write_ppm(Canvas(0, 0), sink)
        assert sink.getvalue() == b"P3\n0 0\n255\n\n"


class TestBinaryPPM:
    """Tests for the P6 writer."""

    def test_header_and_size(self, sink):
        """Test header, 3*w*h bytes, then one newline."""
        write_binary_ppm(Canvas(5, 3), sink)
        data = sink.getvalue()
        header = b"P6\n5 3\n255\n"
        assert data.startswith(header)
        body = data[len(header):]
        assert len(body) == 3 * 5 * 3 + 1
        assert body.endswith(b"\n")

    def test_raw_bytes(self, sink):
        """Test pixel values are written as raw bytes without separators."""
        canvas = Canvas(2, 1)
        canvas[0] = Color(1.5, 0.5, -0.5)
        canvas[1] = Color(0.0, 0.8, 0.6)
        write_binary_ppm(canvas, sink)
        assert sink.getvalue() == b"P6\n2 1\n255\n" + bytes([255, 128, 0, 0, 204, 153]) + b"\n"

    def test_readable_by_pillow(self, sink):
        """Test Pillow decodes the same pixels that were written."""
        canvas = Canvas(4, 3)
        canvas[Coord2D(1, 2)] = Color(1.0, 0.5, 0.0)
        write_binary_ppm(canvas, sink)
        sink.seek(0)
        with PILImage.open(sink) as image:
            assert image.size == (4, 3)
            pixels = np.asarray(image.convert("RGB"))
        assert pixels[2, 1].tolist() == [255, 128, 0]
        assert pixels[0, 0].tolist() == [0, 0, 0]


class TestSinkErrors:
    """Tests for failures raised by the sink."""

    def test_header_write_failure_propagates(self, failing_sink):
        """Test an error on the first write aborts immediately."""
        broken = failing_sink(allowed_writes=0)
        with pytest.raises(OSError, match="No space left"):
            write_ppm(Canvas(5, 3), broken)
        assert broken.chunks == []

    def test_body_write_failure_propagates(self, failing_sink):
        """Test an error mid-body stops further writes."""
        broken = failing_sink(allowed_writes=2)
        with pytest.raises(OSError):
            write_ppm(Canvas(5, 3), broken)
        assert len(broken.chunks) == 2

    def test_binary_write_failure_propagates(self, failing_sink):
        """Test the binary writer propagates sink errors too."""
        broken = failing_sink(allowed_writes=1)
        with pytest.raises(OSError):
            write_binary_ppm(Canvas(5, 3), broken)
        assert broken.chunks == [b"P6\n5 3\n255\n"]


class TestPPMFiles:
    """Tests for in-memory and file output."""

    def test_canvas_to_ppm_matches_writer(self):
        """Test canvas_to_ppm returns what write_ppm writes."""
        canvas = Canvas(3, 2)
        canvas.fill(Color(0.25, 0.5, 0.75))
        sink = io.BytesIO()
        write_ppm(canvas, sink)
        assert canvas_to_ppm(canvas) == sink.getvalue()

    def test_save_ascii(self, tmp_path):
        """Test saving a P3 file."""
        path = save_ppm(Canvas(5, 3), tmp_path / "image.ppm")
        assert path.exists()
        assert path.read_bytes().startswith(b"P3\n5 3\n255\n")

    def test_save_binary(self, tmp_path):
        """Test saving a P6 file."""
        path = save_ppm(Canvas(5, 3), str(tmp_path / "image.ppm"), binary=True)
        assert len(path.read_bytes()) == len(b"P6\n5 3\n255\n") + 45 + 1

    def test_save_to_missing_directory_raises(self, tmp_path):
        """Test file errors surface as OSError."""
        with pytest.raises(OSError):
            save_ppm(Canvas(1, 1), tmp_path / "missing" / "image.ppm")
