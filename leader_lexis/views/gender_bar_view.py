from __future__ import annotations

from typing import Optional

import plotly.graph_objects as go

from leader_lexis.core.base_view import BaseView
from leader_lexis.core.derivation import BarData, derive_bar
from leader_lexis.core.filter_state import FilterState
from leader_lexis.core.intents import Intent

BAR_COLOUR = "#90a4ae"
ACTIVE_COLOUR = "#e65100"


class GenderBarView(BaseView):
    """
    Leader count per gender for the active country group.

    Counts ignore the gender filter so every gender stays clickable; the
    active gender is only emphasised. Clicking a bar toggles the filter.
    """

    id = "gender_bar"
    label = "Gender"
    # Selection changes never affect this chart
    depends_on = frozenset({"country_group", "gender"})

    def derive(self, state: FilterState) -> BarData:
        return derive_bar(self.dataset, state)

    def build_figure(self, data: BarData) -> go.Figure:
        if not data.counts:
            return self.empty_figure("No leaders in this country group")

        genders = [g for g, _ in data.counts]
        counts = [c for _, c in data.counts]
        colours = [ACTIVE_COLOUR if g == data.active_gender else BAR_COLOUR for g in genders]

        fig = go.Figure(
            go.Bar(
                x=genders,
                y=counts,
                customdata=genders,
                marker=dict(color=colours),
                hovertemplate="%{x}: %{y}<extra></extra>",
            )
        )
        fig.update_layout(
            title="Gender",
            margin=dict(l=40, r=5, t=40, b=20),
            clickmode="event",
            yaxis=dict(rangemode="tozero"),
        )
        return fig

    def intent_from_click(self, click_data: Optional[dict]) -> Optional[Intent]:
        point = self.first_point(click_data)
        if point is None:
            return None
        gender = point.get("customdata") or point.get("x")
        if not gender:
            return None
        return Intent.toggle_gender(str(gender))
