"""
Plotly-backed drawing surface, chart sink and status line
"""

from typing import Any, Dict, List, Sequence

import numpy as np
import plotly.graph_objs as go

BACKGROUND_COLOR = "#222222"


class FigureSurface:
    """Canvas-like drawing surface that records Plotly layout shapes"""

    def __init__(self, width: float, height: float) -> None:
        """
        Initialize surface

        Args:
            width: Surface width (px)
            height: Surface height (px)
        """
        self.width = width
        self.height = height
        self.shapes: List[Dict[str, Any]] = []
        self._transform = np.eye(3)
        self._saved: List[np.ndarray] = []

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.clear()

    def clear(self) -> None:
        self.shapes = []

    def line(self, x0: float, y0: float, x1: float, y1: float, color: str, width: float) -> None:
        (px0, py0), (px1, py1) = self._apply([(x0, y0), (x1, y1)])
        self.shapes.append({
            "type": "line",
            "x0": px0, "y0": py0, "x1": px1, "y1": py1,
            "line": {"color": color, "width": width},
        })

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        # Under a rotation the rectangle becomes a general quadrilateral
        corners = self._apply([(x, y), (x + w, y), (x + w, y + h), (x, y + h)])
        path = "M " + " L ".join(f"{cx:.3f},{cy:.3f}" for cx, cy in corners) + " Z"
        self.shapes.append({
            "type": "path",
            "path": path,
            "fillcolor": color,
            "line": {"color": color, "width": 0},
        })

    def save(self) -> None:
        self._saved.append(self._transform.copy())

    def restore(self) -> None:
        if self._saved:
            self._transform = self._saved.pop()

    def translate(self, dx: float, dy: float) -> None:
        self._transform = self._transform @ np.array([
            [1.0, 0.0, dx],
            [0.0, 1.0, dy],
            [0.0, 0.0, 1.0],
        ])

    def rotate(self, radians: float) -> None:
        c, s = np.cos(radians), np.sin(radians)
        self._transform = self._transform @ np.array([
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ])

    def _apply(self, points: Sequence[tuple]) -> List[tuple]:
        """Map local points through the current transform"""
        homogeneous = np.array([[px, py, 1.0] for px, py in points]).T
        mapped = self._transform @ homogeneous
        return [(float(mapped[0, i]), float(mapped[1, i])) for i in range(mapped.shape[1])]

    def to_figure(self) -> go.Figure:
        """Build a figure whose axes match surface pixels (Y pointing down)"""
        fig = go.Figure()
        fig.update_layout(
            shapes=self.shapes,
            xaxis=dict(range=[0, self.width], visible=False, fixedrange=True),
            yaxis=dict(range=[self.height, 0], visible=False, fixedrange=True, scaleanchor="x"),
            plot_bgcolor=BACKGROUND_COLOR,
            paper_bgcolor=BACKGROUND_COLOR,
            margin=dict(l=0, r=0, t=0, b=0),
            height=self.height,
            showlegend=False,
        )
        return fig


class ChartSeries:
    """Velocity and acceleration series sharing one time axis"""

    SERIES = (
        ("Velocity (m/s)", "lime"),
        ("Acceleration (m/s²)", "orange"),
    )

    def __init__(self) -> None:
        self.labels: List[str] = []
        self.series: List[List[float]] = [[] for _ in self.SERIES]
        self.revision = 0  # bumped on every change so the UI can skip redraws

    def append(self, label: str, values: Sequence[float]) -> None:
        if len(values) != len(self.series):
            raise ValueError(f"Expected {len(self.series)} values, got {len(values)}")
        self.labels.append(label)
        for data, value in zip(self.series, values):
            data.append(value)
        self.revision += 1

    def clear(self) -> None:
        self.labels = []
        self.series = [[] for _ in self.SERIES]
        self.revision += 1

    def to_figure(self) -> go.Figure:
        fig = go.Figure()
        for (name, color), data in zip(self.SERIES, self.series):
            fig.add_trace(
                go.Scatter(
                    x=self.labels,
                    y=data,
                    mode="lines",
                    name=name,
                    line=dict(color=color, width=2),
                    hovertemplate=f"Time: %{{x}}s<br>{name}: %{{y:.2f}}<extra></extra>",
                )
            )
        fig.update_layout(
            xaxis_title="Time (s)",
            yaxis_title="Values",
            hovermode="closest",
            height=350,
            template="plotly_dark",
            uirevision="chart",
        )
        return fig


class StatusLine:
    """Holds the latest status string"""

    def __init__(self) -> None:
        self.text = ""

    def show(self, text: str) -> None:
        self.text = text
