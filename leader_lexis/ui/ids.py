from __future__ import annotations

__all__ = ["IDs", "graph_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"

    class Control:
        COUNTRY_SELECT = "country-group-select"

        CLEAR_LEXIS_BTN = "clear-lexis-selection-btn"
        CLEAR_SCATTER_BTN = "clear-scatter-selection-btn"

        STATUS_BAR = "status-bar"
        ERROR_BANNER = "error-banner"


def graph_id(view_id: str) -> str:
    """Dash component id of the dcc.Graph hosting the given view."""
    return f"{view_id}-graph"
