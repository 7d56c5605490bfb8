"""Test fixtures package."""

from .fake_db import FakeConnection, FakeCursor, column

__all__ = [
    "FakeConnection",
    "FakeCursor",
    "column",
]
