"""
Inclined Plane Simulator

This package animates a block sliding down an inclined plane under gravity and
friction, and records its velocity and acceleration over time.
"""

from incline.params import SimulationParams
from incline.state import PlaneGeometry, SimulationState
from incline.kinematics import KinematicsModel, compute_acceleration
from incline.renderer import format_status, render
from incline.recorder import SeriesRecorder
from incline.surfaces import ChartSeries, FigureSurface, StatusLine
from incline.controller import FormInputs, InclineController, Phase, SurfaceUnavailableError, parse_number
from incline.analysis import run_angle_sweep, simulate_run, summarize_run

__all__ = [
    "SimulationParams",
    "PlaneGeometry",
    "SimulationState",
    "KinematicsModel",
    "compute_acceleration",
    "format_status",
    "render",
    "SeriesRecorder",
    "ChartSeries",
    "FigureSurface",
    "StatusLine",
    "FormInputs",
    "InclineController",
    "Phase",
    "SurfaceUnavailableError",
    "parse_number",
    "run_angle_sweep",
    "simulate_run",
    "summarize_run",
]
