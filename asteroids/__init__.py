"""A vector-graphics Asteroids game on pygame, with vector, matrix, geometry and 2D physics helpers."""

__version__ = "0.1.0"