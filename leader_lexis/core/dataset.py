from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple

import pandas as pd

from leader_lexis.core.exceptions import DuplicateLeaderError, UnknownLeaderError
from leader_lexis.validation.errors import ValidationIssue


@dataclass(frozen=True)
class LeaderRecord:
    """
    One leader tenure, validated once at load time.

    pcgdp is None when GDP per capita is not available; this is distinct from
    any numeric value (including 0.0).
    """

    id: str
    country: str
    leader: str
    gender: str
    start_year: int
    end_year: int
    start_age: float
    end_age: float
    duration: int
    pcgdp: Optional[float] = None
    highlighted: bool = False
    groups: FrozenSet[str] = field(default_factory=frozenset)

    def in_group(self, key: str) -> bool:
        return key in self.groups


FRAME_COLUMNS = [
    "id",
    "country",
    "leader",
    "gender",
    "start_year",
    "end_year",
    "start_age",
    "end_age",
    "duration",
    "pcgdp",
    "highlighted",
]


class Dataset:
    """
    Immutable, ordered collection of LeaderRecords shared by every view.

    Includes:
    - id lookup (ids are unique, enforced here)
    - the recognised country-group keys
    - a cached pandas frame for renderers
    - the issues raised for rows rejected at load
    """

    def __init__(
        self,
        name: str,
        records: Iterable[LeaderRecord],
        country_groups: Sequence[str],
        issues: Optional[Sequence[ValidationIssue]] = None,
        file_path: Optional[Path] = None,
    ) -> None:
        self.name = name
        self.file_path = file_path
        self._records: Tuple[LeaderRecord, ...] = tuple(records)
        self._country_groups: Tuple[str, ...] = tuple(country_groups)
        self._issues: Tuple[ValidationIssue, ...] = tuple(issues or ())

        by_id: Dict[str, LeaderRecord] = {}
        for rec in self._records:
            if rec.id in by_id:
                raise DuplicateLeaderError(
                    f"Duplicate leader id '{rec.id}' in dataset '{name}'"
                )
            by_id[rec.id] = rec
        self._by_id = by_id

        self._frame: Optional[pd.DataFrame] = None

    # -------------------------------------------------------------------------
    # Sequence-like access
    # -------------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[LeaderRecord]:
        return iter(self._records)

    def __contains__(self, leader_id: object) -> bool:
        return leader_id in self._by_id

    @property
    def records(self) -> Tuple[LeaderRecord, ...]:
        return self._records

    def get(self, leader_id: str) -> LeaderRecord:
        """
        Return the record for leader_id.

        Raises:
            UnknownLeaderError: if no record has this id
        """
        try:
            return self._by_id[leader_id]
        except KeyError:
            raise UnknownLeaderError(f"Leader '{leader_id}' not found in dataset '{self.name}'")

    # -------------------------------------------------------------------------
    # Properties & getters
    # -------------------------------------------------------------------------
    @property
    def country_groups(self) -> Tuple[str, ...]:
        """Country-group keys recognised at load (one boolean column each)."""
        return self._country_groups

    @property
    def genders(self) -> List[str]:
        """Sorted distinct genders observed in the data (an open set)."""
        return sorted({rec.gender for rec in self._records})

    @property
    def issues(self) -> Tuple[ValidationIssue, ...]:
        """Issues for rows that were rejected while loading."""
        return self._issues

    def to_frame(self) -> pd.DataFrame:
        """
        Tabular copy of the records, one row per leader, indexed by id.

        Built once and cached; callers must treat it as read-only.
        """
        if self._frame is None:
            self._frame = records_to_frame(self._records)
        return self._frame


def records_to_frame(records: Iterable[LeaderRecord]) -> pd.DataFrame:
    """Build a DataFrame (indexed by id) from any iterable of records."""
    rows = [
        {
            "id": r.id,
            "country": r.country,
            "leader": r.leader,
            "gender": r.gender,
            "start_year": r.start_year,
            "end_year": r.end_year,
            "start_age": r.start_age,
            "end_age": r.end_age,
            "duration": r.duration,
            "pcgdp": r.pcgdp,
            "highlighted": r.highlighted,
        }
        for r in records
    ]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df.index = pd.Index(df["id"], name="leader_id")
    return df
