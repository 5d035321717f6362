"""Line segments given by a base point and an extension."""

from __future__ import annotations

from dataclasses import dataclass

from alpha.vector import Vector


@dataclass(frozen=True)
class Line:
    """A line starting at *base* and running along *extension*."""

    base: Vector
    extension: Vector

    def is_close(self, other: Line) -> bool:
        """Return True if base and extension are both close to *other*'s."""
        return self.base.is_close(other.base) and self.extension.is_close(other.extension)

    def finish(self) -> Vector:
        """Return the point where the line ends."""
        return self.base + self.extension