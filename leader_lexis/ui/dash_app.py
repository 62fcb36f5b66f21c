from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from leader_lexis.config.loader import load_global_config
from leader_lexis.core.dataset_loader import from_config
from leader_lexis.core.view_registry import ViewRegistry
from leader_lexis.ui.layout.build_layout import build_layout
from leader_lexis.ui.callbacks.callbacks_interactions import register_interaction_callbacks
from leader_lexis.ui.callbacks.callbacks_status import register_status_callbacks
from leader_lexis.validation.dataset_validation import validate_dataset

logger = logging.getLogger(__name__)


def build_view_registry() -> ViewRegistry:
    from leader_lexis.views import GenderBarView, LexisView, ScatterView

    registry = ViewRegistry()
    registry.register(LexisView)
    registry.register(GenderBarView)
    registry.register(ScatterView)
    return registry


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load + validate the leader data (fails fast on integrity errors)
    dataset = from_config(global_config)
    validate_dataset(dataset, global_config)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset=dataset,
        registry=build_view_registry(),
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_interaction_callbacks(app, ctx)
    register_status_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={
            "config_root": str(config_root),
            "dataset": dataset.name,
            "n_records": len(dataset),
            "views": [cls.id for cls in ctx.registry.all_classes()],
        },
    )
    return app
