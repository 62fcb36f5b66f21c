from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, html

from leader_lexis.ui.callbacks.callbacks_utils import describe_state
from leader_lexis.ui.ids import IDs

if TYPE_CHECKING:
    from leader_lexis.ui.config import AppConfig

logger = logging.getLogger(__name__)


def status_children(ctx: AppConfig, fs_data) -> html.Span:
    info = describe_state(fs_data)
    if info["country_group"] is None:
        return html.Span([html.Strong("Status: "), "Loading"])

    group_label = ctx.global_config.label_for(info["country_group"])
    gender_label = info["gender"] or "All"
    n = info["n_selected"]

    return html.Span(
        [
            html.Strong("Country group: "), group_label, " • ",
            html.Strong("Gender: "), gender_label, " • ",
            html.Strong("Selected leaders: "), str(n),
        ]
    )


def register_status_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Status Bar (Pure UI reflection of State)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_status_bar(fs_data):
        return status_children(ctx, fs_data)
