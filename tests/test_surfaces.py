"""
Unit tests for the Plotly-backed surfaces.

Tests transform handling on FigureSurface and the ChartSeries data source.
"""

import math

import pytest

from incline import ChartSeries, FigureSurface, StatusLine


class TestFigureSurface:
    """Test suite for FigureSurface"""

    @pytest.fixture
    def surface(self) -> FigureSurface:
        return FigureSurface(800.0, 400.0)

    def test_line_shape(self, surface: FigureSurface) -> None:
        """Test that a line becomes a Plotly line shape"""
        surface.line(10.0, 20.0, 30.0, 40.0, "white", 5)

        shape = surface.shapes[0]
        assert shape["type"] == "line"
        assert (shape["x0"], shape["y0"], shape["x1"], shape["y1"]) == pytest.approx((10.0, 20.0, 30.0, 40.0))
        assert shape["line"] == {"color": "white", "width": 5}

    def test_clear_removes_shapes(self, surface: FigureSurface) -> None:
        """Test that clear empties the shape list"""
        surface.line(0.0, 0.0, 1.0, 1.0, "white", 1)
        surface.clear()

        assert surface.shapes == []

    def test_translate_and_rotate_rect(self, surface: FigureSurface) -> None:
        """Test that a rect is mapped through translate then rotate"""
        surface.translate(100.0, 50.0)
        surface.rotate(math.pi / 2)
        surface.fill_rect(-1.0, -1.0, 2.0, 2.0, "red")

        path = surface.shapes[0]["path"]
        assert path.startswith("M 101.000,49.000 L 101.000,51.000")
        assert path.endswith(" Z")
        assert surface.shapes[0]["fillcolor"] == "red"

    def test_restore_returns_to_saved_transform(self, surface: FigureSurface) -> None:
        """Test that restore undoes transforms applied after save"""
        surface.save()
        surface.translate(100.0, 100.0)
        surface.rotate(1.0)
        surface.restore()
        surface.line(1.0, 2.0, 3.0, 4.0, "white", 1)

        shape = surface.shapes[0]
        assert (shape["x0"], shape["y0"], shape["x1"], shape["y1"]) == pytest.approx((1.0, 2.0, 3.0, 4.0))

    def test_resize_updates_dimensions(self, surface: FigureSurface) -> None:
        """Test that resize changes width and height and clears shapes"""
        surface.line(0.0, 0.0, 1.0, 1.0, "white", 1)
        surface.resize(1024.0, 512.0)

        assert (surface.width, surface.height) == (1024.0, 512.0)
        assert surface.shapes == []

    def test_figure_axes_match_pixels(self, surface: FigureSurface) -> None:
        """Test that the figure Y axis is reversed like a canvas"""
        surface.line(0.0, 0.0, 1.0, 1.0, "white", 1)
        fig = surface.to_figure()

        assert len(fig.layout.shapes) == 1
        assert list(fig.layout.xaxis.range) == [0, 800.0]
        assert list(fig.layout.yaxis.range) == [400.0, 0]


class TestChartSeries:
    """Test suite for ChartSeries"""

    def test_append_and_clear(self) -> None:
        """Test that points are appended per series and cleared together"""
        chart = ChartSeries()
        chart.append("0.0", (0.0, 4.9))
        chart.append("0.1", (0.49, 4.9))

        assert chart.labels == ["0.0", "0.1"]
        assert chart.series == [[0.0, 0.49], [4.9, 4.9]]

        chart.clear()
        assert chart.labels == []
        assert chart.series == [[], []]

    def test_revision_bumped_on_change(self) -> None:
        """Test that every append and clear bumps the revision"""
        chart = ChartSeries()
        chart.append("0.0", (0.0, 0.0))
        chart.clear()

        assert chart.revision == 2

    def test_wrong_value_count_rejected(self) -> None:
        """Test that a point must carry one value per series"""
        with pytest.raises(ValueError):
            ChartSeries().append("0.0", (1.0,))

    def test_figure_has_two_traces(self) -> None:
        """Test that the figure plots velocity and acceleration"""
        chart = ChartSeries()
        chart.append("0.0", (0.0, 4.9))
        fig = chart.to_figure()

        assert [trace.name for trace in fig.data] == ["Velocity (m/s)", "Acceleration (m/s²)"]
        assert list(fig.data[1].y) == [4.9]


class TestStatusLine:
    """Test suite for StatusLine"""

    def test_show_replaces_text(self) -> None:
        status = StatusLine()
        status.show("first")
        status.show("second")

        assert status.text == "second"
