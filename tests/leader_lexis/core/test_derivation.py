from __future__ import annotations

from leader_lexis.core.dataset import Dataset, LeaderRecord
from leader_lexis.core.derivation import (
    base_subset,
    derive_bar,
    derive_lexis,
    derive_scatter,
    gender_aggregate,
    group_subset,
    label_set,
    scatter_subset,
)
from leader_lexis.core.filter_state import FilterState


def _rec(leader_id, groups, gender, pcgdp, highlighted=False, duration=5):
    return LeaderRecord(
        id=leader_id,
        country="X",
        leader=f"Leader {leader_id}",
        gender=gender,
        start_year=1990,
        end_year=1990 + duration,
        start_age=50,
        end_age=50 + duration,
        duration=duration,
        pcgdp=pcgdp,
        highlighted=highlighted,
        groups=frozenset(groups),
    )


def _make_dataset():
    """
    A: oecd, F, pcgdp 5000
    B: oecd, M, no pcgdp
    C: other, F, pcgdp 8000
    D: oecd, F, pcgdp 0.0 (zero is a value, not "missing"), highlighted
    """
    return Dataset(
        name="TestLeaders",
        records=[
            _rec("A", {"oecd"}, "F", 5000.0),
            _rec("B", {"oecd"}, "M", None),
            _rec("C", {"other"}, "F", 8000.0),
            _rec("D", {"oecd"}, "F", 0.0, highlighted=True),
        ],
        country_groups=["oecd", "other"],
    )


def _ids(records):
    return [r.id for r in records]


def test_base_subset_filters_group_then_gender():
    ds = _make_dataset()

    assert _ids(base_subset(ds, FilterState("oecd"))) == ["A", "B", "D"]
    assert _ids(base_subset(ds, FilterState("oecd", gender="F"))) == ["A", "D"]
    assert _ids(base_subset(ds, FilterState("other", gender="M"))) == []


def test_base_subset_excludes_non_positive_duration():
    ds = Dataset(
        name="T",
        records=[_rec("A", {"oecd"}, "F", 1.0), _rec("Z", {"oecd"}, "F", 1.0, duration=0)],
        country_groups=["oecd"],
    )

    assert _ids(base_subset(ds, FilterState("oecd"))) == ["A"]


def test_gender_aggregate_ignores_gender_filter_and_is_sorted():
    ds = _make_dataset()

    unfiltered = gender_aggregate(ds, FilterState("oecd"))
    filtered = gender_aggregate(ds, FilterState("oecd", gender="F"))

    assert unfiltered == (("F", 2), ("M", 1))
    assert filtered == unfiltered
    assert sum(c for _, c in filtered) == len(group_subset(ds, FilterState("oecd", gender="F")))


def test_scatter_subset_excludes_missing_pcgdp_and_marks_inactive():
    ds = _make_dataset()

    points = scatter_subset(ds, FilterState("oecd"))
    assert [(p.record.id, p.active) for p in points] == [("A", True), ("D", True)]

    points = scatter_subset(ds, FilterState("oecd", gender="M"))
    # gender filter never hides a point
    assert [(p.record.id, p.active) for p in points] == [("A", False), ("D", False)]


def test_label_set_is_highlighted_or_selected_within_subset():
    ds = _make_dataset()
    state = FilterState("oecd", selected_leaders=frozenset({"A"}))

    assert label_set(base_subset(ds, state), state) == {"A", "D"}
    assert label_set([], state) == frozenset()


def test_per_view_bundles():
    ds = _make_dataset()
    state = FilterState("oecd", gender="F", selected_leaders=frozenset({"A"}))

    lexis = derive_lexis(ds, state)
    assert _ids(lexis.records) == ["A", "D"]
    assert lexis.selected == {"A"}
    assert lexis.labelled == {"A", "D"}

    bar = derive_bar(ds, state)
    assert bar.counts == (("F", 2), ("M", 1))
    assert bar.active_gender == "F"
    assert bar.total == 3

    scatter = derive_scatter(ds, state)
    assert [p.record.id for p in scatter.points] == ["A", "D"]
    assert scatter.selected == {"A"}
    assert scatter.active_gender == "F"


def test_empty_group_gives_empty_results():
    ds = _make_dataset()
    state = FilterState("other", gender="M")

    assert derive_lexis(ds, state).records == ()
    assert derive_bar(ds, FilterState("nothing")).counts == ()
    assert derive_scatter(ds, state).points[0].active is False
