from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

DEFAULT_COUNTRY_GROUP = "oecd"

# Keys double as the boolean column names in the leader CSV
DEFAULT_COUNTRY_GROUPS: Dict[str, str] = {
    "oecd": "OECD",
    "eu27": "EU27",
    "brics": "BRICS",
    "gulf": "Gulf Cooperation Council",
    "sa": "South America",
}


@dataclass(frozen=True)
class CountryGroup:
    """
    One entry of the country-group selector.

    key: boolean column name in the data file
    label: human-readable name shown in the dropdown
    """

    key: str
    label: str

    @classmethod
    def from_raw(cls, raw: Any) -> CountryGroup:
        # Accept either "oecd" or {"key": "oecd", "label": "OECD"}
        if isinstance(raw, str):
            return cls(key=raw, label=DEFAULT_COUNTRY_GROUPS.get(raw, raw.upper()))
        key = raw["key"]
        return cls(key=key, label=raw.get("label") or DEFAULT_COUNTRY_GROUPS.get(key, key.upper()))


@dataclass
class DataConfig:
    """
    Parsed "data" entry of global.json.
    """

    raw: Dict[str, Any]
    source_path: Path

    @property
    def name(self) -> str:
        return self.raw.get("name", "Political Leaders")

    @property
    def path(self) -> Path:
        """
        Return the CSV path for the leader data.

        Supports both:
        - "path": "data/leaderlist.csv"
        - legacy "file": "data/leaderlist.csv"
        """
        raw_path = self.raw.get("path") or self.raw.get("file")
        if raw_path is None:
            raise KeyError(f"No 'path' or 'file' in data config: {self.raw}")
        return Path(raw_path)


@dataclass
class GlobalConfig:
    ui_title: str
    data: DataConfig
    subtitle: str = "Age and time in office"
    default_country_group: str = DEFAULT_COUNTRY_GROUP
    country_groups: List[CountryGroup] = field(default_factory=list)
    data_root: Optional[Path] = None

    @property
    def country_group_keys(self) -> List[str]:
        return [g.key for g in self.country_groups]

    def label_for(self, key: str) -> str:
        for group in self.country_groups:
            if group.key == key:
                return group.label
        return key
