"""
Incline geometry derived from the drawing surface size
"""

from incline.params import SimulationParams
from incline.state import PlaneGeometry


def plane_for_surface(
    params: SimulationParams, surface_width: float, surface_height: float, angle_radians: float
) -> PlaneGeometry:
    """
    Build the incline geometry for a surface of the given size

    Origin, plane length and block size are all relative to the surface, so a
    resized surface yields a proportionally scaled scene.

    Args:
        params: Simulation parameters (size ratios)
        surface_width: Drawing surface width (px)
        surface_height: Drawing surface height (px)
        angle_radians: Incline angle (rad)

    Returns:
        PlaneGeometry with origin at the block start point
    """
    return PlaneGeometry(
        origin_x=surface_width * params.initial_x_ratio,
        origin_y=surface_height * params.initial_y_ratio,
        length=surface_width * params.plane_length_ratio,
        block_size=surface_height * params.block_size_ratio,
        angle_radians=angle_radians,
    )
