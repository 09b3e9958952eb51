"""
Headless runs and comparison against a reference solution
"""

from typing import Any, Dict, Optional, Tuple

import numpy as np
from scipy.integrate import odeint

from incline.kinematics import KinematicsModel
from incline.params import SimulationParams


def simulate_run(
    angle_degrees: float,
    friction_coefficient: float,
    duration: float = 10.0,
    params: Optional[SimulationParams] = None,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Run the fixed-step integrator without any presentation surface

    Args:
        angle_degrees: Incline angle (degrees)
        friction_coefficient: Friction coefficient
        duration: Maximum simulated time (s)
        params: Simulation parameters

    Returns:
        Tuple of (time_array, velocity_array, distance_array) with distance in
        metres along the incline. Stops early when the block reaches the end.
    """
    params = params if params is not None else SimulationParams()
    model = KinematicsModel(params)
    state = model.reset(angle_degrees, friction_coefficient, params.surface_width, params.surface_height)
    state.paused = False

    times = [0.0]
    velocities = [0.0]
    distances = [0.0]
    n_steps = int(round(duration / params.dt))
    for _ in range(n_steps):
        if not model.step(params.dt):
            break
        times.append(state.elapsed_time)
        velocities.append(state.velocity)
        distances.append(state.distance / model.render_scale)

    return np.array(times), np.array(velocities), np.array(distances)


def reference_solution(acceleration: float, t: np.ndarray) -> np.ndarray:
    """
    Integrate ds/dt = v, dv/dt = a with odeint on the given time grid

    Args:
        acceleration: Constant acceleration along the incline (m/s²)
        t: Time array (s)

    Returns:
        State history [N x 2] with columns (distance, velocity)
    """
    def rhs(y: np.ndarray, _t: float) -> np.ndarray:
        return np.array([y[1], acceleration])

    return odeint(rhs, np.array([0.0, 0.0]), t)


def summarize_run(
    angle_degrees: float,
    friction_coefficient: float,
    duration: float = 10.0,
    params: Optional[SimulationParams] = None,
) -> Dict[str, Any]:
    """
    Simulate one run and summarize it

    Args:
        angle_degrees: Incline angle (degrees)
        friction_coefficient: Friction coefficient
        duration: Maximum simulated time (s)
        params: Simulation parameters

    Returns:
        Dictionary with arrays and summary metrics
    """
    params = params if params is not None else SimulationParams()
    t, v, s = simulate_run(angle_degrees, friction_coefficient, duration, params)
    acceleration = KinematicsModel(params).reset(
        angle_degrees, friction_coefficient, params.surface_width, params.surface_height
    ).acceleration

    reference = reference_solution(acceleration, t)
    plane_length_m = params.surface_width * params.plane_length_ratio / params.render_scale(params.surface_width)
    reached_end = bool(len(s) > 0 and np.isclose(s[-1], plane_length_m))

    return {
        "time": t,
        "velocity": v,
        "distance": s,
        "acceleration": acceleration,
        "final_velocity": float(v[-1]),
        "final_distance": float(s[-1]),
        "time_to_end": float(t[-1]) if reached_end else None,
        "velocity_error": float(np.max(np.abs(v - reference[:, 1]))),
        # Excludes the clipped final step, which lands short of the free-flight point
        "distance_error": float(np.max(np.abs(s[:-1] - reference[:-1, 0]))) if len(s) > 1 else 0.0,
        "is_stationary": bool(np.all(v == 0.0)),
    }


def run_angle_sweep(
    angles_degrees: list[float],
    friction_coefficient: float = 0.0,
    duration: float = 10.0,
) -> Dict[float, Dict[str, Any]]:
    """
    Summarize runs for several incline angles

    Args:
        angles_degrees: List of angles (degrees)
        friction_coefficient: Friction coefficient shared by all runs
        duration: Maximum simulated time per run (s)

    Returns:
        Dictionary with results for each angle
    """
    params = SimulationParams()
    return {
        angle: summarize_run(angle, friction_coefficient, duration, params)
        for angle in angles_degrees
    }
