"""A first-person raycasting engine: .cub scene parsing, validation, rendering and a pygame window."""

__version__ = "0.1.0"