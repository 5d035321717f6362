"""Yaw and pitch orientation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from alpha.vector import Vector


@dataclass(frozen=True)
class Orientation:
    """A direction given by yaw and pitch in degrees."""

    yaw: float
    pitch: float

    def unit_vector(self) -> Vector:
        """Return the unit vector pointing in this direction."""
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        cos_pitch = math.cos(pitch)
        return Vector(
            cos_pitch * math.cos(yaw),
            math.sin(pitch),
            cos_pitch * math.sin(yaw),
        )