"""
Block-on-incline kinematics
"""

import logging
import math
from typing import Optional

from incline.geometry import plane_for_surface
from incline.params import SimulationParams
from incline.state import SimulationState

logger = logging.getLogger(__name__)


def compute_acceleration(
    angle_radians: float, friction_coefficient: float, gravity: float = 9.81
) -> float:
    """
    Acceleration of a block released from rest on a rough incline

    a = g*sin(theta) - mu*g*cos(theta). If the slope component of gravity does
    not exceed the maximum static friction force the block stays put, so the
    result is clamped at zero.

    Args:
        angle_radians: Incline angle (rad)
        friction_coefficient: Friction coefficient (dimensionless)
        gravity: Gravitational acceleration (m/s²)

    Returns:
        Acceleration along the incline (m/s²), never negative
    """
    potential = gravity * math.sin(angle_radians) - friction_coefficient * gravity * math.cos(angle_radians)
    return potential if potential > 0 else 0.0


class KinematicsModel:
    """Fixed-step Euler integrator for a block sliding down an incline"""

    def __init__(self, params: Optional[SimulationParams] = None) -> None:
        """
        Initialize kinematics model

        Args:
            params: Simulation parameters (defaults used when omitted)
        """
        self.params = params if params is not None else SimulationParams()
        self.state = SimulationState()
        self.render_scale = 1.0  # px per metre, set on reset

    def reset(
        self,
        angle_degrees: float,
        friction_coefficient: float,
        surface_width: float,
        surface_height: float,
    ) -> SimulationState:
        """
        Reinitialize the state for a new run

        Leaves the model paused; the caller unpauses once the recorder and
        surface have been refreshed.

        Args:
            angle_degrees: Incline angle (degrees)
            friction_coefficient: Friction coefficient
            surface_width: Drawing surface width (px)
            surface_height: Drawing surface height (px)

        Returns:
            The reinitialized state

        Raises:
            ValueError: If the angle has no finite value in radians; the
                previous state is left untouched
        """
        angle_radians = angle_degrees * math.pi / 180
        if not math.isfinite(angle_radians):
            raise ValueError(f"Angle {angle_degrees!r} has no finite value in radians")
        acceleration = compute_acceleration(angle_radians, friction_coefficient, self.params.gravity)
        plane = plane_for_surface(self.params, surface_width, surface_height, angle_radians)
        render_scale = self.params.render_scale(surface_width)

        state = self.state
        state.paused = True
        state.angle_degrees = angle_degrees
        state.angle_radians = angle_radians
        state.friction_coefficient = friction_coefficient
        state.acceleration = acceleration
        state.plane = plane
        state.x = plane.origin_x
        state.y = plane.origin_y
        state.velocity = 0.0
        state.elapsed_time = 0.0
        state.distance = 0.0
        self.render_scale = render_scale
        return state

    def step(self, dt: float) -> bool:
        """
        Advance the state by one time step

        Args:
            dt: Time step (s)

        Returns:
            True if the state advanced, False if paused or at rest
        """
        state = self.state
        if state.paused or state.at_rest:
            return False

        state.velocity += state.acceleration * dt
        ds = state.velocity * dt * self.render_scale  # px along the incline

        if ds >= state.plane.length - state.distance:
            # Land exactly on the end point, never past it
            state.distance = state.plane.length
            state.x, state.y = state.plane.end_point
        else:
            state.distance += ds
            state.x += ds * math.cos(state.angle_radians)
            state.y -= ds * math.sin(state.angle_radians)
        state.elapsed_time += dt

        if state.at_rest:
            logger.debug(f"Block reached the end of the incline at t={state.elapsed_time:.2f}s")
        return True

    def toggle_pause(self) -> bool:
        """Flip the pause flag and return the new value"""
        self.state.paused = not self.state.paused
        return self.state.paused
