from __future__ import annotations

from typing import Optional

import plotly.graph_objects as go

from leader_lexis.core.base_view import BaseView
from leader_lexis.core.dataset import records_to_frame
from leader_lexis.core.derivation import ScatterData, derive_scatter
from leader_lexis.core.filter_state import FilterState
from leader_lexis.core.intents import Intent

AGE_RANGE = (25, 95)
POINT_COLOUR = "#5c6bc0"
SELECTED_OUTLINE = "#333333"


class ScatterView(BaseView):
    """
    Age when taking office vs GDP per capita.

    Leaders without GDP data are left out. Under a gender filter the
    non-matching points stay on the chart but are faded and not clickable.
    """

    id = "scatter"
    label = "Age vs. GDP per Capita"

    def derive(self, state: FilterState) -> ScatterData:
        return derive_scatter(self.dataset, state)

    def build_figure(self, data: ScatterData) -> go.Figure:
        if not data.points:
            return self.empty_figure("No leaders with GDP data for the current filters")

        df = records_to_frame(p.record for p in data.points)
        df["active"] = [p.active for p in data.points]
        df["selected"] = df["id"].isin(data.selected)

        fig = go.Figure()

        inactive = df[~df["active"]]
        if not inactive.empty:
            fig.add_trace(
                go.Scatter(
                    x=inactive["pcgdp"],
                    y=inactive["start_age"],
                    mode="markers",
                    name="Inactive",
                    customdata=list(zip(inactive["id"], [0] * len(inactive))),
                    marker=dict(size=10, color=POINT_COLOUR, opacity=0.15),
                    hoverinfo="skip",
                )
            )

        active = df[df["active"]]
        if not active.empty:
            fig.add_trace(
                go.Scatter(
                    x=active["pcgdp"],
                    y=active["start_age"],
                    mode="markers",
                    name="Leaders",
                    customdata=list(zip(active["id"], [1] * len(active))),
                    text=active["leader"] + " (" + active["country"] + ")",
                    hovertemplate=(
                        "<b>%{text}</b><br>"
                        "Age when took office: %{y}<br>"
                        "GDP per capita: $%{x:,.2f}<extra></extra>"
                    ),
                    marker=dict(
                        size=10,
                        color=POINT_COLOUR,
                        opacity=0.7,
                        line=dict(
                            color=SELECTED_OUTLINE,
                            width=[2 if s else 0 for s in active["selected"]],
                        ),
                    ),
                )
            )

        lo, hi = df["pcgdp"].min(), df["pcgdp"].max()
        # A single distinct value would give a zero-width axis
        pad = (hi - lo) * 0.05 or max(abs(hi) * 0.05, 1.0)

        fig.update_layout(
            title="Age vs. GDP per Capita",
            margin=dict(l=40, r=20, t=40, b=30),
            showlegend=False,
            clickmode="event",
            xaxis=dict(range=[lo - pad, hi + pad], title="GDP per Capita (US$)", tickprefix="$"),
            yaxis=dict(range=list(AGE_RANGE), title="Age"),
        )
        return fig

    def intent_from_click(self, click_data: Optional[dict]) -> Optional[Intent]:
        point = self.first_point(click_data)
        if point is None:
            return None
        custom = point.get("customdata")
        if not isinstance(custom, (list, tuple)) or len(custom) < 2:
            return None
        leader_id, active = custom[0], custom[1]
        # Faded points are not interactive
        if not active:
            return None
        return Intent.toggle_leader(str(leader_id))
