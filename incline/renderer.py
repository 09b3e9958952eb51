"""
Scene rendering onto a 2D drawing surface
"""

from typing import Optional, Protocol

from incline.state import SimulationState

PLANE_COLOR = "white"
PLANE_LINE_WIDTH = 5
BLOCK_COLOR = "red"


class DrawSurface(Protocol):
    """Immediate-mode 2D drawing surface (canvas-like)"""

    width: float
    height: float

    def clear(self) -> None: ...

    def line(self, x0: float, y0: float, x1: float, y1: float, color: str, width: float) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def rotate(self, radians: float) -> None: ...


class StatusSink(Protocol):
    """Single-line text display"""

    def show(self, text: str) -> None: ...


def format_status(state: SimulationState) -> str:
    """Human-readable summary of angle, acceleration and velocity"""
    return (
        f"Angle: {state.angle_degrees:g}° | "
        f"Acceleration: {state.acceleration:.2f} m/s² | "
        f"Velocity: {state.velocity:.2f} m/s"
    )


def render(state: SimulationState, surface: DrawSurface, status: Optional[StatusSink] = None) -> None:
    """
    Draw the incline and the block for the current state

    Reads the state only. The block is a square centered on the current
    position and rotated by -angle so its base stays parallel to the incline.

    Args:
        state: Current simulation state
        surface: Drawing surface to paint on
        status: Optional text sink for the status line
    """
    plane = state.plane
    surface.clear()
    surface.line(plane.origin_x, plane.origin_y, plane.end_x, plane.end_y, PLANE_COLOR, PLANE_LINE_WIDTH)

    half = plane.block_size / 2
    surface.save()
    surface.translate(state.x, state.y)
    surface.rotate(-state.angle_radians)
    surface.fill_rect(-half, -half, plane.block_size, plane.block_size, BLOCK_COLOR)
    surface.restore()

    if status is not None:
        status.show(format_status(state))
