"""Small 3D geometry toolkit: vectors, lines, orientations and a logger."""

__version__ = "0.1.0"
__all__ = ["vector", "line", "orientation", "logger"]