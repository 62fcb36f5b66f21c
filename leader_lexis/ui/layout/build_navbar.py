from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from leader_lexis.config.model import GlobalConfig
from leader_lexis.ui.ids import IDs


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    options = [{"label": g.label, "value": g.key} for g in global_config.country_groups]

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                # Left: title
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            global_config.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),

                # Right: country-group selector
                html.Div(
                    [
                        html.Div(
                            "Country Group",
                            className="navbar-group-title",
                        ),
                        dcc.Dropdown(
                            id=IDs.Control.COUNTRY_SELECT,
                            options=options,
                            value=global_config.default_country_group,
                            clearable=False,
                            className="ll-group-dropdown mt-1",
                        ),
                    ],
                    className="ms-auto navbar-group-block",
                    style={
                        "minWidth": "240px",
                        "maxWidth": "320px",
                        "marginRight": "24px",
                    },
                ),
            ],
        ),
        color="light",
        className="ll-navbar mb-2",
    )
