from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True, slots=True)
class Position3D:
    # ecliptic AU before scaling, scene units after scale_for_display
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        return math.sqrt(self.x*self.x + self.y*self.y + self.z*self.z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: "Position3D") -> "Position3D":
        return Position3D(self.x + other.x, self.y + other.y, self.z + other.z)


ORIGIN = Position3D(0.0, 0.0, 0.0)
