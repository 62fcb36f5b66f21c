from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output, State

from leader_lexis.core.coordinator import Coordinator
from leader_lexis.core.exceptions import LeaderLexisError
from leader_lexis.core.intents import Intent
from leader_lexis.ui.callbacks.callbacks_utils import sanitised_filter_state
from leader_lexis.ui.ids import IDs, graph_id

if TYPE_CHECKING:
    from leader_lexis.ui.config import AppConfig

logger = logging.getLogger(__name__)


@dataclass
class InteractionOutcome:
    """
    Dash-free result of one interaction callback.

    - store: new FilterState dict, or None to leave the store untouched
    - figures: view id -> figure for the views that rerendered
    - error: message for the error banner, if the interaction failed
    """
    store: Optional[Dict[str, Any]] = None
    figures: Dict[str, go.Figure] = field(default_factory=dict)
    error: Optional[str] = None


def resolve_intent(
    coordinator: Coordinator,
    triggered_id: Optional[str],
    inputs: Dict[str, Any],
) -> Optional[Intent]:
    """
    Map the Dash trigger onto an Intent.

    inputs holds the current value of every callback input keyed by component id.
    """
    if triggered_id == IDs.Control.COUNTRY_SELECT:
        value = inputs.get(IDs.Control.COUNTRY_SELECT)
        return Intent.set_country_group(value) if value else None

    if triggered_id in (IDs.Control.CLEAR_LEXIS_BTN, IDs.Control.CLEAR_SCATTER_BTN):
        return Intent.clear_selection()

    for view in coordinator.views:
        if triggered_id == graph_id(view.id):
            return view.intent_from_click(inputs.get(graph_id(view.id)))

    return None


def handle_interaction(
    ctx: AppConfig,
    fs_data: Optional[Dict[str, Any]],
    triggered_id: Optional[str],
    inputs: Dict[str, Any],
) -> InteractionOutcome:
    """
    Pure helper behind the interaction callback.

    Rebuilds the session's Coordinator from the stored FilterState, applies
    the triggered intent and returns what changed. With no trigger (page load)
    every view is rendered from the stored state.
    """
    dataset = ctx.dataset
    default_group = ctx.global_config.default_country_group
    state = sanitised_filter_state(fs_data, dataset, default_group)

    coordinator = Coordinator(dataset, ctx.registry.create_all(dataset), state=state)

    if triggered_id is None:
        figures = coordinator.render_all()
        return InteractionOutcome(store=coordinator.state.to_dict(), figures=figures)

    intent = resolve_intent(coordinator, triggered_id, inputs)
    if intent is None:
        return InteractionOutcome()

    try:
        result = coordinator.dispatch(intent)
    except LeaderLexisError as e:
        logger.exception(
            "Interaction failed",
            extra={"kind": intent.kind.value, "value": intent.value, "filter_state": fs_data},
        )
        return InteractionOutcome(error=str(e))

    if not result.accepted:
        return InteractionOutcome()

    return InteractionOutcome(store=result.state.to_dict(), figures=result.rendered)


def register_interaction_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    view_ids = [cls.id for cls in ctx.registry.all_classes()]
    graph_inputs = [Input(graph_id(v), "clickData") for v in view_ids]

    # ---------------------------------------------------------
    # Any interaction -> Coordinator -> FilterState + figures
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Output(IDs.Control.COUNTRY_SELECT, "value"),
        Output(IDs.Control.ERROR_BANNER, "children"),
        Output(IDs.Control.ERROR_BANNER, "is_open"),
        *[Output(graph_id(v), "figure") for v in view_ids],
        Input(IDs.Control.COUNTRY_SELECT, "value"),
        Input(IDs.Control.CLEAR_LEXIS_BTN, "n_clicks"),
        Input(IDs.Control.CLEAR_SCATTER_BTN, "n_clicks"),
        *graph_inputs,
        State(IDs.Store.FILTER_STATE, "data"),
    )
    def on_interaction(country_value, _clear_lexis, _clear_scatter, *rest):
        *click_values, fs_data = rest

        # None on page load: full render from the stored state
        triggered_id = dash.ctx.triggered_id

        inputs: Dict[str, Any] = {IDs.Control.COUNTRY_SELECT: country_value}
        inputs.update({graph_id(v): c for v, c in zip(view_ids, click_values)})

        try:
            outcome = handle_interaction(ctx, fs_data, triggered_id, inputs)
        except Exception:
            logger.exception(
                "Error in on_interaction",
                extra={"triggered_id": triggered_id, "filter_state": fs_data},
            )
            outcome = InteractionOutcome(
                error="The app hit an unexpected error. Grab the logs and open an issue."
            )

        if outcome.store is None:
            store_out = dash.no_update
            group_out = dash.no_update
        else:
            store_out = outcome.store
            group_out = outcome.store["country_group"]

        banner_children = outcome.error if outcome.error else dash.no_update
        banner_open = bool(outcome.error)

        figures = [outcome.figures.get(v, dash.no_update) for v in view_ids]
        return (store_out, group_out, banner_children, banner_open, *figures)
