"""Kaboomer -- scaffold Kaboom game projects."""

from kaboomer.config import __version__

__all__ = ["__version__"]
