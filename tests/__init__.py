"""
Test suite for the Inclined Plane Simulator.

This package contains unit tests organized by component:
- test_simulation_params.py: Tests for SimulationParams
- test_kinematics.py: Tests for acceleration and the Euler integrator
- test_renderer.py: Tests for scene drawing and the status line
- test_recorder.py: Tests for chart sub-sampling
- test_surfaces.py: Tests for the Plotly-backed surfaces
- test_controller.py: Tests for the control loop and its state machine
- test_analysis.py: Tests for headless runs and the reference comparison
- test_integration.py: Integration tests for the dashboard wiring
"""
