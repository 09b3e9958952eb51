"""
Control loop driving the incline simulation
"""

import logging
import math
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from incline.kinematics import KinematicsModel
from incline.params import SimulationParams
from incline.recorder import SeriesRecorder, SeriesSink
from incline.renderer import DrawSurface, StatusSink, render
from incline.state import SimulationState

logger = logging.getLogger(__name__)


class SurfaceUnavailableError(RuntimeError):
    """Raised when no drawing surface is available at startup"""


class Phase(Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    PAUSED = "paused"


def parse_number(value: Any, name: str = "value") -> float:
    """
    Parse a numeric form value, falling back to 0 for malformed input

    Non-numeric, NaN and infinite values would otherwise corrupt every
    derived drawing coordinate.

    Args:
        value: Raw value from the input source
        name: Field name for the log message

    Returns:
        The parsed float, or 0.0
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Malformed {name} {value!r}, using 0")
        return 0.0
    if not math.isfinite(number):
        logger.warning(f"Non-finite {name} {value!r}, using 0")
        return 0.0
    return number


@dataclass
class FormInputs:
    """Raw values of the angle and friction fields, read only on reset"""

    angle_degrees: Any = 30.0
    friction_coefficient: Any = 0.2

    def read(self) -> Tuple[float, float]:
        angle_degrees = parse_number(self.angle_degrees, "angle")
        # Huge finite angles overflow once converted to radians
        if not math.isfinite(angle_degrees * math.pi / 180):
            logger.warning(f"Angle {self.angle_degrees!r} overflows in radians, using 0")
            angle_degrees = 0.0
        return (angle_degrees, parse_number(self.friction_coefficient, "friction coefficient"))


class InclineController:
    """Owns the simulation state and funnels every mutation through one lock"""

    def __init__(
        self,
        surface: Optional[DrawSurface],
        chart: SeriesSink,
        status: Optional[StatusSink] = None,
        inputs: Optional[FormInputs] = None,
        params: Optional[SimulationParams] = None,
    ) -> None:
        """
        Initialize controller

        Args:
            surface: Drawing surface for the scene
            chart: Chart data source for velocity/acceleration series
            status: Text sink for the status line
            inputs: Form input source (defaults from params when omitted)
            params: Simulation parameters

        Raises:
            SurfaceUnavailableError: If surface is None
        """
        if surface is None:
            raise SurfaceUnavailableError("No drawing surface available")
        self.params = params if params is not None else SimulationParams()
        self.surface = surface
        self.status = status
        self.inputs = inputs if inputs is not None else FormInputs(
            self.params.default_angle_degrees, self.params.default_friction_coefficient
        )
        self.model = KinematicsModel(self.params)
        self.recorder = SeriesRecorder(chart, self.params.sample_every)
        self._initialized = False
        self._lock = threading.Lock()

    @property
    def state(self) -> SimulationState:
        return self.model.state

    @property
    def phase(self) -> Phase:
        if not self._initialized:
            return Phase.UNINITIALIZED
        return Phase.PAUSED if self.state.paused else Phase.RUNNING

    @property
    def at_rest(self) -> bool:
        """Running but the block has reached the end of the incline"""
        return self._initialized and self.state.at_rest

    @property
    def chart_revision(self) -> int:
        """Revision of the chart sink, or 0 for sinks that do not track one"""
        with self._lock:
            return getattr(self.recorder.sink, "revision", 0)

    def init(self) -> None:
        """Start the first run (equivalent to reset)"""
        self.reset()

    def reset(self) -> None:
        """Reinitialize the run from the current inputs and surface size"""
        with self._lock:
            self._reset()

    def _reset(self) -> None:
        angle_degrees, friction_coefficient = self.inputs.read()
        self.model.reset(angle_degrees, friction_coefficient, self.surface.width, self.surface.height)
        self.recorder.clear()
        self.recorder.sample(self.state)
        render(self.state, self.surface, self.status)
        self.state.paused = False
        self._initialized = True
        logger.info(
            f"Reset: angle={angle_degrees}°, mu={friction_coefficient}, "
            f"a={self.state.acceleration:.3f} m/s², surface={self.surface.width}x{self.surface.height}"
        )

    def toggle_pause(self) -> Phase:
        """Pause or resume; ignored before the first reset"""
        with self._lock:
            if self._initialized:
                paused = self.model.toggle_pause()
                logger.debug(f"Simulation {'paused' if paused else 'resumed'} at t={self.state.elapsed_time:.2f}s")
            return self.phase

    def resize(self, width: float, height: float) -> None:
        """
        Adapt to a new surface size and restart the run

        Args:
            width: New surface width (px)
            height: New surface height (px)

        Raises:
            ValueError: If either dimension is not positive
        """
        if not (width > 0 and height > 0):
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        with self._lock:
            resize = getattr(self.surface, "resize", None)
            if resize is not None:
                resize(width, height)
            else:
                self.surface.width = width
                self.surface.height = height
            logger.info(f"Surface resized to {width}x{height}")
            self._reset()

    def tick(self) -> bool:
        """
        One control-loop cycle: step, sample, render

        Returns:
            True if a chart point was appended during this tick
        """
        with self._lock:
            if not self._initialized:
                return False
            self.model.step(self.params.dt)
            sampled = self.recorder.sample(self.state)
            render(self.state, self.surface, self.status)
            return sampled

    def run(self, ticks: int) -> int:
        """
        Drive the loop headlessly

        Args:
            ticks: Number of ticks to run

        Returns:
            Number of chart points appended
        """
        return sum(1 for _ in range(ticks) if self.tick())
