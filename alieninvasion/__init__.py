"""Alien Invasion: an arcade shooter against a descending grid of alien ships, played in a pygame window."""

__version__ = "1.0.0"
__all__ = ["__version__"]