from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from leader_lexis.ui.config import AppConfig
from leader_lexis.ui.ids import IDs
from leader_lexis.ui.layout.build_chart_panel import build_chart_panel
from leader_lexis.ui.layout.build_navbar import build_navbar
from leader_lexis.views import GenderBarView, LexisView, ScatterView


def build_layout(ctx: AppConfig):
    navbar = build_navbar(ctx.global_config)

    lexis_panel = build_chart_panel(
        LexisView.id, LexisView.label, "380px", clear_button_id=IDs.Control.CLEAR_LEXIS_BTN
    )
    bar_panel = build_chart_panel(GenderBarView.id, GenderBarView.label, "260px")
    scatter_panel = build_chart_panel(
        ScatterView.id, ScatterView.label, "260px", clear_button_id=IDs.Control.CLEAR_SCATTER_BTN
    )

    return dbc.Container(
        fluid=True,
        className="ll-root",
        children=[
            navbar,

            # Session-scoped FilterState (FilterState.to_dict())
            dcc.Store(id=IDs.Store.FILTER_STATE, storage_type="session"),

            dbc.Alert(
                id=IDs.Control.ERROR_BANNER,
                color="danger",
                is_open=False,
                dismissable=True,
            ),

            dbc.Row(dbc.Col(lexis_panel, md=12), className="gx-3 mt-2"),
            dbc.Row(
                [
                    dbc.Col(bar_panel, md=3),
                    dbc.Col(scatter_panel, md=9),
                ],
                className="gx-3 mt-3",
            ),
            html.Div(id=IDs.Control.STATUS_BAR, className="ll-status-bar mt-2 text-muted"),
        ],
    )
