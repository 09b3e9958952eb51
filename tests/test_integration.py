"""
Integration tests for the dashboard wiring.

Tests that the Dash app builds a running controller, exposes the
components the callbacks rely on, and that the callbacks drive the
controller.
"""

from contextvars import copy_context

import dash
import pytest
from dash._callback_context import context_value
from dash._utils import AttributeDict
from dash.exceptions import PreventUpdate

from incline import Phase, SimulationParams


class TestDashboard:
    """Test suite for app.py"""

    @pytest.fixture
    def app_module(self):
        import app
        return app

    def test_build_controller_starts_running(self, app_module) -> None:
        """Test that the dashboard controller is initialized on build"""
        controller = app_module.build_controller(SimulationParams())

        assert controller.phase is Phase.RUNNING
        assert controller.recorder.sink.labels == ["0.0"]

    def test_interval_matches_tick_period(self, app_module) -> None:
        """Test that the timer fires at the configured tick period"""
        interval = app_module.app.layout["tick-interval"]

        assert interval.interval == SimulationParams().update_interval_ms

    def test_layout_has_controls(self, app_module) -> None:
        """Test that inputs, buttons and graphs are present"""
        layout = app_module.app.layout
        for component_id in ("theta-input", "mu-input", "reset-button", "pause-button",
                             "share-button", "scene-graph", "chart-graph", "info"):
            assert layout[component_id] is not None

    def test_full_run_through_dashboard_controller(self, app_module) -> None:
        """Test a complete run from reset to rest with figures rendered"""
        controller = app_module.build_controller()
        controller.run(2000)

        assert controller.at_rest
        assert len(controller.surface.to_figure().layout.shapes) == 2
        assert len(controller.recorder.sink.to_figure().data) == 2


def call_with_trigger(prop_id: str, func, *args):
    """Call a Dash callback as if the given component property had fired"""
    def run():
        triggered = [{"prop_id": prop_id, "value": None}] if prop_id else []
        context_value.set(AttributeDict(triggered_inputs=triggered))
        return func(*args)

    return copy_context().run(run)


class TestDashboardCallbacks:
    """Test suite for the on_tick and on_control callbacks"""

    @pytest.fixture
    def app_module(self, monkeypatch: pytest.MonkeyPatch):
        """Load app.py with a fresh controller for each test"""
        import app
        monkeypatch.setattr(app, "controller", app.build_controller(SimulationParams()))
        return app

    def test_resize_restarts_with_live_inputs(self, app_module) -> None:
        """Test that a resize reads the current field values, not the last submitted ones"""
        message, label = call_with_trigger(
            "surface-size.data", app_module.on_control,
            None, None, {"width": 1000, "height": 500}, 60.0, 0.1,
        )

        controller = app_module.controller
        assert message == ""
        assert label == "Pause"
        assert controller.state.angle_degrees == 60.0
        assert controller.state.friction_coefficient == 0.1
        assert (controller.surface.width, controller.surface.height) == (1000, 500)

    def test_reset_button_reads_inputs(self, app_module) -> None:
        """Test that Reset restarts the run with the field values"""
        app_module.controller.run(20)
        call_with_trigger("reset-button.n_clicks", app_module.on_control, 1, None, None, 45.0, 0.0)

        assert app_module.controller.state.angle_degrees == 45.0
        assert app_module.controller.state.elapsed_time == 0.0

    def test_pause_button_label(self, app_module) -> None:
        """Test that the pause button toggles between Resume and Pause"""
        _, label = call_with_trigger("pause-button.n_clicks", app_module.on_control, None, 1, None, 30.0, 0.2)
        assert label == "Resume"
        assert app_module.controller.phase is Phase.PAUSED

        _, label = call_with_trigger("pause-button.n_clicks", app_module.on_control, None, 2, None, 30.0, 0.2)
        assert label == "Pause"
        assert app_module.controller.phase is Phase.RUNNING

    def test_error_shown_in_red(self, app_module) -> None:
        """Test that a rejected resize is reported as a red message"""
        message, label = call_with_trigger(
            "surface-size.data", app_module.on_control,
            None, None, {"width": 0, "height": 400}, 30.0, 0.2,
        )

        assert message.style["color"] == "red"
        assert message.children.startswith("Error:")
        assert label is dash.no_update

    def test_no_trigger_prevents_update(self, app_module) -> None:
        """Test that the initial call without a trigger changes nothing"""
        with pytest.raises(PreventUpdate):
            call_with_trigger("", app_module.on_control, None, None, None, 30.0, 0.2)

    def test_chart_redrawn_only_on_new_points(self, app_module) -> None:
        """Test that on_tick sends the chart only when its revision changed"""
        scene, info, chart, revision = app_module.on_tick(1, -1)
        assert len(scene.layout.shapes) == 2
        assert info.startswith("Angle: 30°")
        assert len(chart.data) == 2
        assert revision == app_module.controller.chart_revision

        for n in range(2, 5):
            _, _, chart, new_revision = app_module.on_tick(n, revision)
            assert chart is dash.no_update
            assert new_revision is dash.no_update

        # Fifth tick lands on t = 0.1 s and appends a point
        _, _, chart, new_revision = app_module.on_tick(5, revision)
        assert new_revision == revision + 1
        assert list(chart.data[0].x) == ["0.0", "0.1"]
