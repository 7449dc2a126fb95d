"""Raycasting maze explorer: .cub scene parsing and validation, a grid raycaster and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]