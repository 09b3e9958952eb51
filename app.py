"""
Web application for the Inclined Plane Simulator

Interactive dashboard that animates the block and plots its velocity and
acceleration live.
"""

import logging
import os
from typing import Any, Optional

import dash
from dash import dcc, html, Input, Output, State
from dash.exceptions import PreventUpdate

from incline import ChartSeries, FigureSurface, InclineController, Phase, SimulationParams, StatusLine

logger = logging.getLogger(__name__)

SHARE_TITLE = "Inclined Plane Experiment"
SHARE_TEXT = "Try this interactive physics simulator!"


def build_controller(params: Optional[SimulationParams] = None) -> InclineController:
    """Create a controller wired to Plotly surfaces and start the first run"""
    params = params if params is not None else SimulationParams()
    controller = InclineController(
        FigureSurface(params.surface_width, params.surface_height),
        ChartSeries(),
        StatusLine(),
        params=params,
    )
    controller.init()
    return controller


params = SimulationParams()
controller = build_controller(params)

# Initialize Dash app
app = dash.Dash(__name__)
app.title = "Inclined Plane Simulator"

# Define app layout
app.layout = html.Div([
    html.Div([
        html.H1("Inclined Plane Simulator",
                style={'textAlign': 'center', 'marginBottom': '30px'}),

        html.Div([
            html.Div([
                html.Label("Incline Angle (degrees):",
                           style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(
                    id='theta-input',
                    type='number',
                    value=params.default_angle_degrees,
                    min=0.0,
                    max=90.0,
                    step=1.0,
                    style={'width': '100%', 'padding': '8px'}
                ),
            ], style={'width': '20%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Div([
                html.Label("Friction Coefficient:",
                           style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(
                    id='mu-input',
                    type='number',
                    value=params.default_friction_coefficient,
                    min=0.0,
                    step=0.05,
                    style={'width': '100%', 'padding': '8px'}
                ),
            ], style={'width': '20%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Button('Reset', id='reset-button',
                        style={'width': '15%', 'padding': '10px', 'fontSize': '16px', 'marginRight': '10px',
                               'backgroundColor': '#4CAF50', 'color': 'white',
                               'border': 'none', 'borderRadius': '5px', 'cursor': 'pointer'}),
            html.Button('Pause', id='pause-button',
                        style={'width': '15%', 'padding': '10px', 'fontSize': '16px', 'marginRight': '10px',
                               'backgroundColor': '#555555', 'color': 'white',
                               'border': 'none', 'borderRadius': '5px', 'cursor': 'pointer'}),
            html.Button('Share', id='share-button',
                        style={'width': '15%', 'padding': '10px', 'fontSize': '16px',
                               'backgroundColor': '#2196F3', 'color': 'white',
                               'border': 'none', 'borderRadius': '5px', 'cursor': 'pointer'}),
        ], style={'marginBottom': '30px', 'padding': '20px', 'backgroundColor': '#f5f5f5',
                  'borderRadius': '10px'}),

        html.Div(id='status-message', style={'marginBottom': '20px', 'fontSize': '14px'}),
        html.Div(id='share-message', style={'display': 'none'}),

        html.Div(
            [dcc.Graph(id='scene-graph', config={'staticPlot': True})],
            id='scene-container',
            style={'width': '100%', 'height': '400px', 'marginBottom': '10px'},
        ),
        html.Div(id='info', style={'fontFamily': 'monospace', 'fontSize': '16px', 'marginBottom': '20px'}),
        dcc.Graph(id='chart-graph'),

        dcc.Interval(id='tick-interval', interval=params.update_interval_ms, n_intervals=0),
        dcc.Store(id='surface-size'),
        dcc.Store(id='chart-revision', data=-1),
    ], style={'maxWidth': '1400px', 'margin': '0 auto', 'padding': '20px'})
])


# Report the scene container size whenever it changes
app.clientside_callback(
    """
    function(n_intervals, current) {
        const el = document.getElementById('scene-container');
        if (!el || el.clientWidth < 2 || el.clientHeight < 2) {
            return window.dash_clientside.no_update;
        }
        const size = {width: el.clientWidth, height: el.clientHeight};
        if (current && current.width === size.width && current.height === size.height) {
            return window.dash_clientside.no_update;
        }
        return size;
    }
    """,
    Output('surface-size', 'data'),
    Input('tick-interval', 'n_intervals'),
    State('surface-size', 'data'),
)

# Native share dialog, falling back to the clipboard, then to showing the link
app.clientside_callback(
    f"""
    function(n_clicks) {{
        if (!n_clicks) {{
            return window.dash_clientside.no_update;
        }}
        const url = window.location.href;
        if (navigator.share) {{
            navigator.share({{title: {SHARE_TITLE!r}, text: {SHARE_TEXT!r}, url: url}})
                .catch(() => alert("Copy and share this link: " + url));
        }} else if (navigator.clipboard) {{
            navigator.clipboard.writeText(url).then(
                () => alert("Experiment link copied to the clipboard!"),
                () => alert("Copy and share this link: " + url)
            );
        }} else {{
            alert("Copy and share this link: " + url);
        }}
        return url;
    }}
    """,
    Output('share-message', 'children'),
    Input('share-button', 'n_clicks'),
)


@app.callback(
    [Output("scene-graph", "figure"), Output("info", "children"),
     Output("chart-graph", "figure"), Output("chart-revision", "data")],
    [Input("tick-interval", "n_intervals")],
    [State("chart-revision", "data")],
)
def on_tick(n_intervals: int, shown_revision: int | None) -> tuple[Any, Any, Any, Any]:
    """Advance the simulation one tick and redraw; the chart only when it changed"""
    controller.tick()

    revision = controller.chart_revision
    if revision == shown_revision:
        chart_figure, revision = dash.no_update, dash.no_update
    else:
        chart_figure = controller.recorder.sink.to_figure()

    return controller.surface.to_figure(), controller.status.text, chart_figure, revision


@app.callback(
    [Output("status-message", "children"), Output("pause-button", "children")],
    [Input("reset-button", "n_clicks"), Input("pause-button", "n_clicks"), Input("surface-size", "data")],
    [State("theta-input", "value"), State("mu-input", "value")],
)
def on_control(
    reset_clicks: int | None, pause_clicks: int | None, surface_size: dict | None,
    theta: Any, mu: Any
) -> tuple[Any, Any]:
    """Handle reset, pause/resume and surface resize requests"""
    trigger = dash.ctx.triggered_id
    if trigger is None:
        raise PreventUpdate

    # Both reset and resize restart from the live field values
    controller.inputs.angle_degrees = theta
    controller.inputs.friction_coefficient = mu

    try:
        if trigger == "reset-button":
            controller.reset()
        elif trigger == "pause-button":
            controller.toggle_pause()
        elif trigger == "surface-size":
            if not surface_size:
                raise PreventUpdate
            controller.resize(surface_size["width"], surface_size["height"])

        label = "Resume" if controller.phase is Phase.PAUSED else "Pause"
        return "", label

    except PreventUpdate:
        raise
    except Exception as e:
        logger.exception(f"Control request failed: {e}")
        error_msg = f"Error: {str(e)}"
        return html.Div(error_msg, style={"color": "red"}), dash.no_update


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("INCLINE_DEBUG") else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(
        host=os.environ.get("INCLINE_HOST", "127.0.0.1"),
        port=int(os.environ.get("INCLINE_PORT", "8050")),
        debug=bool(os.environ.get("INCLINE_DEBUG")),
    )
