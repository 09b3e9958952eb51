"""
Simulation state representation
"""

import math
from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class PlaneGeometry:
    """Incline geometry in drawing-surface pixels"""

    origin_x: float = 0.0  # px
    origin_y: float = 0.0  # px
    length: float = 0.0  # px
    block_size: float = 0.0  # px
    angle_radians: float = 0.0  # rad

    @property
    def end_x(self) -> float:
        return self.origin_x + self.length * math.cos(self.angle_radians)

    @property
    def end_y(self) -> float:
        # Canvas Y grows downward, so climbing the incline decreases Y
        return self.origin_y - self.length * math.sin(self.angle_radians)

    @property
    def end_point(self) -> Tuple[float, float]:
        return (self.end_x, self.end_y)


@dataclass
class SimulationState:
    """Mutable state of one incline run"""

    angle_degrees: float = 0.0
    angle_radians: float = 0.0
    friction_coefficient: float = 0.0
    acceleration: float = 0.0  # m/s²
    x: float = 0.0  # px
    y: float = 0.0  # px
    velocity: float = 0.0  # m/s
    elapsed_time: float = 0.0  # s
    distance: float = 0.0  # px travelled along the incline
    paused: bool = False
    plane: PlaneGeometry = field(default_factory=PlaneGeometry)

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def at_rest(self) -> bool:
        """True once the block has reached the end of the incline"""
        return self.distance >= self.plane.length
