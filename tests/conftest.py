"""Pytest configuration for rtlib tests.

This module provides shared fixtures for all test modules: in-memory and
failing byte sinks for the PPM writers, and a headless Matplotlib backend
so preview tests never open a window.
"""

import io

import matplotlib
import pytest

matplotlib.use("Agg")


class FailingSink:
    """A byte sink that accepts a fixed number of writes, then raises."""

    def __init__(self, allowed_writes: int = 0) -> None:
        self.allowed_writes = allowed_writes
        self.chunks: list[bytes] = []

    def write(self, data: bytes) -> int:
        if len(self.chunks) >= self.allowed_writes:
            raise OSError("No space left on device")
        self.chunks.append(bytes(data))
        return len(data)


@pytest.fixture
def sink():
    """An empty in-memory byte sink."""
    return io.BytesIO()


@pytest.fixture
def failing_sink():
    """Factory for sinks that fail after a given number of writes."""
    return FailingSink
