"""Rotate 24-bit BMP images 90 degrees counterclockwise and compare BMP pixel data."""

__version__ = "0.1.0"