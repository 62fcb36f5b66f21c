from __future__ import annotations

from pathlib import Path

from leader_lexis.config.model import CountryGroup, DataConfig, GlobalConfig
from leader_lexis.core.dataset import Dataset, LeaderRecord
from leader_lexis.ui.callbacks.callbacks_interactions import handle_interaction
from leader_lexis.ui.callbacks.callbacks_status import status_children
from leader_lexis.ui.config import AppConfig
from leader_lexis.ui.dash_app import build_view_registry
from leader_lexis.ui.ids import IDs, graph_id


def _make_ctx() -> AppConfig:
    def rec(leader_id, gender, groups, pcgdp):
        return LeaderRecord(
            id=leader_id,
            country="X",
            leader=f"Leader {leader_id}",
            gender=gender,
            start_year=2000,
            end_year=2006,
            start_age=45,
            end_age=51,
            duration=6,
            pcgdp=pcgdp,
            groups=frozenset(groups),
        )

    dataset = Dataset(
        name="TestLeaders",
        records=[
            rec("A", "F", {"oecd"}, 5000.0),
            rec("B", "M", {"oecd"}, None),
            rec("C", "F", {"sa"}, 8000.0),
        ],
        country_groups=["oecd", "sa"],
    )
    global_config = GlobalConfig(
        ui_title="Test",
        data=DataConfig(raw={"path": "x.csv"}, source_path=Path("global.json")),
        default_country_group="oecd",
        country_groups=[CountryGroup("oecd", "OECD"), CountryGroup("sa", "South America")],
    )
    return AppConfig(
        config_root=Path("config"),
        global_config=global_config,
        dataset=dataset,
        registry=build_view_registry(),
    )


def test_page_load_renders_every_view_from_defaults():
    ctx = _make_ctx()

    outcome = handle_interaction(ctx, None, None, {})

    assert outcome.store == {"country_group": "oecd", "gender": None, "selected_leaders": []}
    assert set(outcome.figures) == {"lexis", "gender_bar", "scatter"}
    assert outcome.error is None


def test_page_load_sanitises_stale_store():
    ctx = _make_ctx()
    stored = {"country_group": "oecd", "gender": "F", "selected_leaders": ["A", "B", "ghost"]}

    outcome = handle_interaction(ctx, stored, None, {})

    assert outcome.store["selected_leaders"] == ["A"]


def test_lexis_click_toggles_leader():
    ctx = _make_ctx()
    store = handle_interaction(ctx, None, None, {}).store

    outcome = handle_interaction(
        ctx,
        store,
        graph_id("lexis"),
        {graph_id("lexis"): {"points": [{"customdata": "B"}]}},
    )

    assert outcome.store["selected_leaders"] == ["B"]
    assert set(outcome.figures) == {"lexis", "scatter"}


def test_bar_click_then_rejected_leader_toggle():
    ctx = _make_ctx()
    store = {"country_group": "oecd", "gender": None, "selected_leaders": ["B"]}

    outcome = handle_interaction(
        ctx,
        store,
        graph_id("gender_bar"),
        {graph_id("gender_bar"): {"points": [{"x": "F", "customdata": "F"}]}},
    )
    assert outcome.store == {"country_group": "oecd", "gender": "F", "selected_leaders": []}

    # B is male: toggle rejected, nothing to update
    rejected = handle_interaction(
        ctx,
        outcome.store,
        graph_id("lexis"),
        {graph_id("lexis"): {"points": [{"customdata": "B"}]}},
    )
    assert rejected.store is None
    assert rejected.figures == {}
    assert rejected.error is None


def test_country_select_and_clear_button():
    ctx = _make_ctx()
    store = {"country_group": "oecd", "gender": None, "selected_leaders": ["A"]}

    cleared = handle_interaction(ctx, store, IDs.Control.CLEAR_SCATTER_BTN, {})
    assert cleared.store["selected_leaders"] == []

    switched = handle_interaction(
        ctx, store, IDs.Control.COUNTRY_SELECT, {IDs.Control.COUNTRY_SELECT: "sa"}
    )
    assert switched.store == {"country_group": "sa", "gender": None, "selected_leaders": []}
    assert set(switched.figures) == {"lexis", "gender_bar", "scatter"}


def test_integrity_errors_surface_as_banner_without_state_change():
    ctx = _make_ctx()

    outcome = handle_interaction(
        ctx,
        None,
        graph_id("scatter"),
        {graph_id("scatter"): {"points": [{"customdata": ["ghost", 1]}]}},
    )

    assert outcome.store is None
    assert outcome.figures == {}
    assert "ghost" in outcome.error


def test_inactive_scatter_click_is_ignored():
    ctx = _make_ctx()

    outcome = handle_interaction(
        ctx,
        {"country_group": "oecd", "gender": "M", "selected_leaders": []},
        graph_id("scatter"),
        {graph_id("scatter"): {"points": [{"customdata": ["A", 0]}]}},
    )

    assert outcome.store is None


def test_status_bar_text():
    ctx = _make_ctx()

    span = status_children(ctx, {"country_group": "sa", "gender": "F", "selected_leaders": ["C"]})

    text = "".join(c if isinstance(c, str) else c.children for c in span.children)
    assert "South America" in text
    assert "Gender: F" in text
    assert "Selected leaders: 1" in text
