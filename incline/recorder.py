"""
Chart series recording with sub-sampling
"""

import math
from typing import Optional, Protocol, Sequence

from incline.state import SimulationState


class SeriesSink(Protocol):
    """Append-only multi-series chart data source"""

    def append(self, label: str, values: Sequence[float]) -> None: ...

    def clear(self) -> None: ...


def hundredths(seconds: float) -> int:
    """Elapsed time as integer hundredths of a second, rounding half up"""
    return int(math.floor(seconds * 100 + 0.5))


class SeriesRecorder:
    """Records (time, velocity, acceleration) points at a fixed cadence"""

    def __init__(self, sink: SeriesSink, sample_every: int = 10) -> None:
        """
        Initialize series recorder

        Args:
            sink: Chart data source to append to
            sample_every: Cadence in hundredths of a second (10 -> every 0.1 s)
        """
        self.sink = sink
        self.sample_every = sample_every
        self._last_recorded: Optional[int] = None

    def sample(self, state: SimulationState) -> bool:
        """
        Append a point if the elapsed time falls on the cadence

        A given instant is recorded once, so ticks that do not advance time
        (paused, at rest) leave the series untouched.

        Args:
            state: Current simulation state

        Returns:
            True if a point was appended
        """
        tick = hundredths(state.elapsed_time)
        if tick % self.sample_every != 0 or tick == self._last_recorded:
            return False

        self._last_recorded = tick
        self.sink.append(
            f"{state.elapsed_time:.1f}",
            (round(state.velocity, 2), round(state.acceleration, 2)),
        )
        return True

    def clear(self) -> None:
        """Empty all recorded series"""
        self._last_recorded = None
        self.sink.clear()
