from __future__ import annotations

from typing import List, Optional

import plotly.graph_objects as go

from leader_lexis.core.base_view import BaseView
from leader_lexis.core.dataset import LeaderRecord
from leader_lexis.core.derivation import LexisData, derive_lexis
from leader_lexis.core.filter_state import FilterState
from leader_lexis.core.intents import Intent

YEAR_RANGE = (1950, 2021)
AGE_RANGE = (25, 95)

# style key -> (trace name, line colour, width)
ARROW_STYLES = {
    "default": ("Leaders", "#c7c7c7", 1.2),
    "highlighted": ("Highlighted", "#7e57c2", 2.0),
    "selected": ("Selected", "#e65100", 2.5),
}


def _hover(r: LeaderRecord) -> str:
    gdp = f"${r.pcgdp:,.2f}" if r.pcgdp is not None else "Not available"
    return (
        f"<b>{r.leader}</b> ({r.country})<br>"
        f"In office: {r.start_year} - {r.end_year}<br>"
        f"Age when took office: {r.start_age:g}<br>"
        f"Duration: {r.duration} years<br>"
        f"GDP per capita: {gdp}"
    )


class LexisView(BaseView):
    """
    Lexis chart: each tenure is an arrow from (start_year, start_age) to
    (end_year, end_age).

    - selected leaders take precedence over the highlighted style
    - highlighted and selected leaders get a name annotation
    - clicking an arrow toggles that leader
    """

    id = "lexis"
    label = "Age and Time in Office"

    def derive(self, state: FilterState) -> LexisData:
        return derive_lexis(self.dataset, state)

    @staticmethod
    def _style(r: LeaderRecord, data: LexisData) -> str:
        if r.id in data.selected:
            return "selected"
        if r.highlighted:
            return "highlighted"
        return "default"

    def build_figure(self, data: LexisData) -> go.Figure:
        if not data.records:
            return self.empty_figure("No leaders match the current filters")

        fig = go.Figure()

        for style, (name, colour, width) in ARROW_STYLES.items():
            members = [r for r in data.records if self._style(r, data) == style]
            if not members:
                continue

            xs: List[Optional[float]] = []
            ys: List[Optional[float]] = []
            ids: List[Optional[str]] = []
            texts: List[Optional[str]] = []
            sizes: List[float] = []
            for r in members:
                # None breaks the line between consecutive tenures
                xs += [r.start_year, r.end_year, None]
                ys += [r.start_age, r.end_age, None]
                ids += [r.id, r.id, None]
                texts += [_hover(r), _hover(r), None]
                sizes += [0, 9, 0]

            fig.add_trace(
                go.Scatter(
                    x=xs,
                    y=ys,
                    mode="lines+markers",
                    name=name,
                    customdata=ids,
                    text=texts,
                    hovertemplate="%{text}<extra></extra>",
                    line=dict(color=colour, width=width),
                    marker=dict(symbol="arrow", angleref="previous", size=sizes, color=colour),
                    connectgaps=False,
                )
            )

        for r in data.records:
            if r.id not in data.labelled:
                continue
            fig.add_annotation(
                x=(r.start_year + r.end_year) / 2,
                y=(r.start_age + r.end_age) / 2,
                text=r.leader,
                showarrow=False,
                textangle=-20,
                yshift=8,
                font=dict(size=10),
            )

        fig.update_layout(
            title="Political Leaders: Age and Time in Office",
            margin=dict(l=40, r=15, t=40, b=20),
            showlegend=False,
            clickmode="event",
            xaxis=dict(range=list(YEAR_RANGE), tickformat="d"),
            yaxis=dict(range=list(AGE_RANGE), title="Age"),
        )
        return fig

    def intent_from_click(self, click_data: Optional[dict]) -> Optional[Intent]:
        point = self.first_point(click_data)
        if point is None:
            return None
        leader_id = point.get("customdata")
        if isinstance(leader_id, (list, tuple)):
            leader_id = leader_id[0] if leader_id else None
        if leader_id is None or leader_id == "":
            return None
        return Intent.toggle_leader(str(leader_id))
