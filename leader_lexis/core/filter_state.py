from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Iterable, Optional

from leader_lexis.config.model import DEFAULT_COUNTRY_GROUP
from leader_lexis.core.dataset import Dataset, LeaderRecord
from leader_lexis.core.exceptions import InvariantViolation, UnknownLeaderError


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current user selection/filters shared by all views.

    Fields:

    - country_group: the active country-group key (exactly one).
    - gender: the active gender filter, or None for all genders.
    - selected_leaders: ids of leaders the user toggled on in any view.

    The value is immutable: the Coordinator commits a new FilterState for
    every interaction and views only ever read it.
    """

    country_group: str = DEFAULT_COUNTRY_GROUP
    gender: Optional[str] = None
    selected_leaders: FrozenSet[str] = field(default_factory=frozenset)

    def matches(self, record: LeaderRecord) -> bool:
        """True if the record passes the country-group and gender filters."""
        if not record.in_group(self.country_group):
            return False
        return self.gender is None or record.gender == self.gender

    def is_selected(self, leader_id: str) -> bool:
        return leader_id in self.selected_leaders

    def with_selection(self, leader_ids: Iterable[str]) -> FilterState:
        return replace(self, selected_leaders=frozenset(leader_ids))

    def changed_fields(self, other: FilterState) -> FrozenSet[str]:
        """Names of the fields whose values differ between self and other."""
        changed = set()
        if self.country_group != other.country_group:
            changed.add("country_group")
        if self.gender != other.gender:
            changed.add("gender")
        if self.selected_leaders != other.selected_leaders:
            changed.add("selected_leaders")
        return frozenset(changed)

    def check_invariant(self, dataset: Dataset) -> None:
        """
        Every selected id must be a known record inside the active filters.

        Raises:
            UnknownLeaderError: if a selected id has no record
            InvariantViolation: if a selected record fails the filters
        """
        for leader_id in self.selected_leaders:
            record = dataset.get(leader_id)
            if not self.matches(record):
                raise InvariantViolation(
                    f"Selected leader '{leader_id}' is outside "
                    f"country_group={self.country_group!r}, gender={self.gender!r}"
                )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "country_group": self.country_group,
            "gender": self.gender,
            # sorted for a stable JSON payload in the Dash store
            "selected_leaders": sorted(self.selected_leaders),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        return cls(
            country_group=data.get("country_group") or DEFAULT_COUNTRY_GROUP,
            gender=data.get("gender") or None,
            selected_leaders=frozenset(str(i) for i in data.get("selected_leaders", [])),
        )

    @classmethod
    def sanitised(
        cls,
        data: Dict[str, Any],
        dataset: Dataset,
        default_group: str = DEFAULT_COUNTRY_GROUP,
    ) -> FilterState:
        """
        Rebuild a FilterState from untrusted stored data, dropping selections
        that no longer satisfy the invariant (unknown ids, stale filters).
        """
        state = cls.from_dict(data)
        if state.country_group not in dataset.country_groups:
            return cls(country_group=default_group)

        kept = set()
        for leader_id in state.selected_leaders:
            try:
                record = dataset.get(leader_id)
            except UnknownLeaderError:
                continue
            if state.matches(record):
                kept.add(leader_id)
        return state.with_selection(kept)
