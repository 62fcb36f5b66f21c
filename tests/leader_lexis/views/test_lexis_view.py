import plotly.graph_objs as go

from leader_lexis.core.dataset import Dataset, LeaderRecord
from leader_lexis.core.filter_state import FilterState
from leader_lexis.core.intents import Intent
from leader_lexis.views.lexis_view import LexisView


def _make_dataset():
    """
    Tiny dataset with:
    - 3 oecd leaders, one highlighted (K)
    - 1 leader outside oecd
    """
    def rec(leader_id, name, gender, groups, highlighted=False):
        return LeaderRecord(
            id=leader_id,
            country="X",
            leader=name,
            gender=gender,
            start_year=1980,
            end_year=1990,
            start_age=40,
            end_age=50,
            duration=10,
            pcgdp=None,
            highlighted=highlighted,
            groups=frozenset(groups),
        )

    return Dataset(
        name="TestLeaders",
        records=[
            rec("a", "Alice", "Female", {"oecd"}),
            rec("b", "Bob", "Male", {"oecd"}),
            rec("k", "Kohl", "Male", {"oecd"}, highlighted=True),
            rec("z", "Zed", "Male", {"sa"}),
        ],
        country_groups=["oecd", "sa"],
    )


def test_lexis_view_derive_respects_filters():
    view = LexisView(_make_dataset())

    data = view.derive(FilterState("oecd", gender="Male", selected_leaders=frozenset({"b"})))

    assert [r.id for r in data.records] == ["b", "k"]
    assert data.selected == {"b"}
    assert data.labelled == {"b", "k"}


def test_lexis_view_render_styles_and_labels():
    view = LexisView(_make_dataset())
    data = view.derive(FilterState("oecd", selected_leaders=frozenset({"a"})))

    fig = view.render(data)

    assert isinstance(fig, go.Figure)
    assert view.last_figure is fig
    assert [t.name for t in fig.data] == ["Leaders", "Highlighted", "Selected"]

    # one segment (start, end, gap) per leader
    default_trace = fig.data[0]
    assert list(default_trace.customdata) == ["b", "b", None]
    assert list(default_trace.x) == [1980, 1990, None]

    labels = sorted(a.text for a in fig.layout.annotations)
    assert labels == ["Alice", "Kohl"]


def test_lexis_view_render_is_idempotent():
    view = LexisView(_make_dataset())
    data = view.derive(FilterState("oecd"))

    assert view.render(data) == view.render(data)


def test_lexis_view_render_empty():
    view = LexisView(_make_dataset())
    data = view.derive(FilterState("sa", gender="Female"))

    fig = view.render(data)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 0


def test_lexis_view_click_to_intent():
    view = LexisView(_make_dataset())

    assert view.intent_from_click({"points": [{"customdata": "b"}]}) == Intent.toggle_leader("b")
    assert view.intent_from_click({"points": [{"customdata": None}]}) is None
    assert view.intent_from_click({"points": []}) is None
    assert view.intent_from_click(None) is None
