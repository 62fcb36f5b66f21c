from __future__ import annotations

from typing import Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from leader_lexis.ui.ids import graph_id


def build_chart_panel(
    view_id: str,
    title: str,
    height: str,
    clear_button_id: Optional[str] = None,
) -> dbc.Card:
    """
    Card hosting one view's dcc.Graph.

    Views with a leader selection get a "Clear selection" button in the
    header, the clear-selection intent for clicks outside any leader.
    """
    header_children = [html.Strong(title)]
    if clear_button_id is not None:
        header_children.append(
            dbc.Button(
                "Clear selection",
                id=clear_button_id,
                color="secondary",
                size="sm",
                outline=True,
                className="ms-auto",
            )
        )

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(header_children, className="d-flex align-items-center"),
                className="p-2",
            ),
            dbc.CardBody(
                dcc.Graph(
                    id=graph_id(view_id),
                    style={"height": height},
                    config={"responsive": True, "displayModeBar": False},
                ),
                className="ll-chart-body p-1",
            ),
        ],
        className="ll-chart-card",
    )
