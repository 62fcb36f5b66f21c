from __future__ import annotations

import pytest

from leader_lexis.core.dataset import Dataset, LeaderRecord
from leader_lexis.core.exceptions import InvariantViolation, UnknownLeaderError
from leader_lexis.core.filter_state import FilterState


def _rec(leader_id, groups, gender):
    return LeaderRecord(
        id=leader_id,
        country="X",
        leader=f"Leader {leader_id}",
        gender=gender,
        start_year=1990,
        end_year=1995,
        start_age=50,
        end_age=55,
        duration=5,
        groups=frozenset(groups),
    )


def _make_dataset():
    return Dataset(
        name="TestLeaders",
        records=[
            _rec("A", {"oecd"}, "Female"),
            _rec("B", {"oecd"}, "Male"),
            _rec("C", {"sa"}, "Female"),
        ],
        country_groups=["oecd", "sa"],
    )


def test_filter_state_to_from_dict_roundtrip():
    st = FilterState(country_group="sa", gender="Female", selected_leaders=frozenset({"C"}))

    raw = st.to_dict()
    rebuilt = FilterState.from_dict(raw)

    assert rebuilt == st
    assert raw["selected_leaders"] == ["C"]


def test_defaults():
    st = FilterState()
    assert st.country_group == "oecd"
    assert st.gender is None
    assert st.selected_leaders == frozenset()


def test_matches_uses_group_and_gender():
    ds = _make_dataset()
    st = FilterState(country_group="oecd", gender="Female")

    assert st.matches(ds.get("A"))
    assert not st.matches(ds.get("B"))
    assert not st.matches(ds.get("C"))


def test_changed_fields():
    before = FilterState(country_group="oecd")
    after = FilterState(country_group="oecd", gender="Male", selected_leaders=frozenset({"B"}))

    assert before.changed_fields(after) == {"gender", "selected_leaders"}
    assert before.changed_fields(before) == frozenset()


def test_check_invariant_rejects_out_of_scope_selection():
    ds = _make_dataset()

    FilterState(country_group="oecd", selected_leaders=frozenset({"A", "B"})).check_invariant(ds)

    with pytest.raises(InvariantViolation):
        FilterState(country_group="oecd", selected_leaders=frozenset({"C"})).check_invariant(ds)

    with pytest.raises(InvariantViolation):
        FilterState(
            country_group="oecd", gender="Female", selected_leaders=frozenset({"B"})
        ).check_invariant(ds)

    with pytest.raises(UnknownLeaderError):
        FilterState(country_group="oecd", selected_leaders=frozenset({"Z"})).check_invariant(ds)


def test_sanitised_drops_stale_and_unknown_selections():
    ds = _make_dataset()
    raw = {"country_group": "oecd", "gender": "Female", "selected_leaders": ["A", "B", "Z"]}

    st = FilterState.sanitised(raw, ds)

    assert st.selected_leaders == frozenset({"A"})
    st.check_invariant(ds)


def test_sanitised_unknown_group_falls_back_to_default():
    ds = _make_dataset()

    st = FilterState.sanitised({"country_group": "gulf", "selected_leaders": ["A"]}, ds, "sa")

    assert st == FilterState(country_group="sa")
