"""
Pure derivations from (Dataset, FilterState) to each view's visible data.

Nothing here mutates its inputs; every function returns tuples/frozensets so
the results can be shared between views.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Tuple

from leader_lexis.core.dataset import Dataset, LeaderRecord
from leader_lexis.core.filter_state import FilterState


@dataclass(frozen=True)
class ScatterPoint:
    record: LeaderRecord
    # False when a gender filter is active and the record fails it
    active: bool


@dataclass(frozen=True)
class LexisData:
    records: Tuple[LeaderRecord, ...]
    labelled: FrozenSet[str]
    selected: FrozenSet[str]


@dataclass(frozen=True)
class BarData:
    counts: Tuple[Tuple[str, int], ...]
    active_gender: Optional[str]

    @property
    def total(self) -> int:
        return sum(count for _, count in self.counts)


@dataclass(frozen=True)
class ScatterData:
    points: Tuple[ScatterPoint, ...]
    active_gender: Optional[str]
    selected: FrozenSet[str]


def group_subset(dataset: Dataset, state: FilterState) -> Tuple[LeaderRecord, ...]:
    """Records with duration > 0 in the active country group, any gender."""
    return tuple(
        r for r in dataset
        if r.duration > 0 and r.in_group(state.country_group)
    )


def base_subset(dataset: Dataset, state: FilterState) -> Tuple[LeaderRecord, ...]:
    """The default visible set: group_subset further narrowed by the gender filter."""
    return tuple(
        r for r in group_subset(dataset, state)
        if state.gender is None or r.gender == state.gender
    )


def gender_aggregate(dataset: Dataset, state: FilterState) -> Tuple[Tuple[str, int], ...]:
    """
    (gender, count) pairs sorted by gender.

    Counted over group_subset so every gender in the country group stays
    visible (and clickable) while a gender filter is active.
    """
    counts = Counter(r.gender for r in group_subset(dataset, state))
    return tuple(sorted(counts.items()))


def scatter_subset(dataset: Dataset, state: FilterState) -> Tuple[ScatterPoint, ...]:
    """
    Records of the country group with a known pcgdp.

    The gender filter never hides a point; failing points come back with
    active=False instead.
    """
    return tuple(
        ScatterPoint(record=r, active=state.gender is None or r.gender == state.gender)
        for r in group_subset(dataset, state)
        if r.pcgdp is not None
    )


def label_set(subset: Iterable[LeaderRecord], state: FilterState) -> FrozenSet[str]:
    """Ids to annotate: highlighted or selected leaders present in subset."""
    return frozenset(
        r.id for r in subset
        if r.highlighted or r.id in state.selected_leaders
    )


# ---------------------------------------------------------------------------
# Per-view bundles
# ---------------------------------------------------------------------------
def derive_lexis(dataset: Dataset, state: FilterState) -> LexisData:
    records = base_subset(dataset, state)
    ids = {r.id for r in records}
    return LexisData(
        records=records,
        labelled=label_set(records, state),
        selected=frozenset(i for i in state.selected_leaders if i in ids),
    )


def derive_bar(dataset: Dataset, state: FilterState) -> BarData:
    return BarData(counts=gender_aggregate(dataset, state), active_gender=state.gender)


def derive_scatter(dataset: Dataset, state: FilterState) -> ScatterData:
    points = scatter_subset(dataset, state)
    ids = {p.record.id for p in points}
    return ScatterData(
        points=points,
        active_gender=state.gender,
        selected=frozenset(i for i in state.selected_leaders if i in ids),
    )
