"""
Simulation parameters
"""

from dataclasses import dataclass


@dataclass
class SimulationParams:
    """Physical constants and presentation ratios for the incline simulation"""

    gravity: float = 9.81  # m/s²
    dt: float = 0.02  # s, simulation step
    update_interval_ms: int = 20  # ms, wall-clock tick period (independent of dt)
    # Geometry, relative to the drawing surface
    plane_length_ratio: float = 0.8  # fraction of surface width
    block_size_ratio: float = 0.05  # fraction of surface height
    initial_x_ratio: float = 0.1  # fraction of surface width
    initial_y_ratio: float = 0.9  # fraction of surface height (10% from the bottom)
    # Render scale: pixels per metre = surface_width / reference_width
    # This is a presentation constant, not a physical unit
    reference_width: float = 800.0  # px
    # Chart cadence in hundredths of a second (10 -> every 0.1 s)
    sample_every: int = 10
    # Defaults used before the first resize / form submission
    surface_width: float = 800.0  # px
    surface_height: float = 400.0  # px
    default_angle_degrees: float = 30.0
    default_friction_coefficient: float = 0.2

    def __post_init__(self) -> None:
        """Validate derived parameters"""
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.update_interval_ms <= 0:
            raise ValueError(f"update_interval_ms must be positive, got {self.update_interval_ms}")
        if self.reference_width <= 0:
            raise ValueError(f"reference_width must be positive, got {self.reference_width}")
        if self.sample_every <= 0:
            raise ValueError(f"sample_every must be positive, got {self.sample_every}")
        for name in ("plane_length_ratio", "block_size_ratio", "initial_x_ratio", "initial_y_ratio"):
            value = getattr(self, name)
            if not 0 < value <= 1:
                raise ValueError(f"{name} must be in (0, 1], got {value}")

    def render_scale(self, surface_width: float) -> float:
        """
        Pixels per metre for a given surface width

        Args:
            surface_width: Drawing surface width (px)

        Returns:
            Conversion factor from m/s to px/s
        """
        return surface_width / self.reference_width
