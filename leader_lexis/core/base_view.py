from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, FrozenSet, Optional

import plotly.graph_objs as go

from .dataset import Dataset
from .filter_state import FilterState
from .intents import Intent

logger = logging.getLogger(__name__)

ALL_FIELDS: FrozenSet[str] = frozenset({"country_group", "gender", "selected_leaders"})


class BaseView(ABC):
    """
    Abstract base class for the linked chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally and as the Dash graph key
    - expose a 'label' - used for UI/human-readable applications
    - declare 'depends_on' - the FilterState fields whose change requires a rerender
    - implement 'derive' - compute this view's data from the shared FilterState
    - implement 'render' - build the Plotly figure from derived data
    - implement 'intent_from_click' - translate a click into an Intent

    Views read the Dataset and FilterState but never change them; interactions
    leave a view only as an Intent handed to the Coordinator.
    """

    id: str = None
    label: str = None
    depends_on: FrozenSet[str] = ALL_FIELDS

    def __init__(self, dataset: Dataset):
        self.dataset = dataset
        self.last_figure: Optional[go.Figure] = None

    @abstractmethod
    def derive(self, state: FilterState) -> Any:
        """
        Compute the data given the current FilterState
        :param state: the committed FilterState
        :return: data: the view's derived dataset (see leader_lexis.core.derivation)
        """
        raise NotImplementedError()

    @abstractmethod
    def build_figure(self, data: Any) -> go.Figure:
        """
        Build the figure given the derived data
        :param data: the data provided by derive()
        :return: the Plotly figure for this data
        """
        raise NotImplementedError()

    @abstractmethod
    def intent_from_click(self, click_data: Optional[dict]) -> Optional[Intent]:
        """
        Translate a Plotly clickData payload from this view's graph into an Intent.
        :return: the Intent, or None if the click does not map to an interaction
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def render(self, data: Any) -> go.Figure:
        """
        Replace the view's visual content with a figure built from data.

        Safe to call repeatedly with the same data; the figure is rebuilt.
        """
        fig = self.build_figure(data)
        self.last_figure = fig
        return fig

    def timed_derive(self, state: FilterState) -> Any:
        start = time.perf_counter()
        data = self.derive(state)
        logger.debug(
            "view_derive",
            extra={
                "view_id": self.id,
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return data

    @staticmethod
    def first_point(click_data: Optional[dict]) -> Optional[dict]:
        if not click_data:
            return None
        points = click_data.get("points") or []
        return points[0] if points else None

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
