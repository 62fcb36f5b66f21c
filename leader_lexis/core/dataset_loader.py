from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from leader_lexis.config.loader import resolve_data_path
from leader_lexis.config.model import GlobalConfig
from leader_lexis.core.dataset import Dataset, LeaderRecord
from leader_lexis.core.exceptions import ConfigError, DatasetSchemaError
from leader_lexis.validation.errors import ValidationIssue

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = (
    "country",
    "leader",
    "gender",
    "start_year",
    "end_year",
    "start_age",
    "duration",
    "pcgdp",
    "label",
)

# Cells in the pcgdp column that mean "not available"
PCGDP_MISSING = frozenset({"", "NA", "N/A", "NaN", "nan"})


class RowError(ValueError):
    """A single malformed row; turned into a ValidationIssue by the loader."""

    def __init__(self, code: str, message: str):
        self.code = code
        super().__init__(message)


def _validate_columns(df: pd.DataFrame, country_groups: Sequence[str], path: Path) -> None:
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    missing += [g for g in country_groups if g not in df.columns]
    if missing:
        msg = f"Leader data at {path} is missing columns: {missing}"
        logger.error(msg, extra={"path": str(path), "missing": missing})
        raise DatasetSchemaError(msg)


def _number(row: Dict[str, Any], col: str) -> float:
    raw = str(row[col]).strip()
    try:
        value = float(raw)
    except ValueError:
        raise RowError(f"ROW_{col.upper()}", f"{col}={raw!r} is not numeric")
    if not np.isfinite(value):
        raise RowError(f"ROW_{col.upper()}", f"{col}={raw!r} is not finite")
    return value


def _integer(row: Dict[str, Any], col: str) -> int:
    value = _number(row, col)
    if not value.is_integer():
        raise RowError(f"ROW_{col.upper()}", f"{col}={value} is not a whole number")
    return int(value)


def _flag(row: Dict[str, Any], col: str) -> bool:
    raw = str(row[col]).strip()
    # Blank flag cells count as "not a member"
    if raw in ("", "0", "0.0"):
        return False
    if raw in ("1", "1.0"):
        return True
    raise RowError(f"ROW_{col.upper()}", f"{col}={raw!r} is not a 0/1 flag")


def _pcgdp(row: Dict[str, Any]) -> Optional[float]:
    raw = str(row["pcgdp"]).strip()
    if raw in PCGDP_MISSING:
        return None
    return _number(row, "pcgdp")


def _text(row: Dict[str, Any], col: str) -> str:
    value = str(row[col]).strip()
    if not value:
        raise RowError(f"ROW_{col.upper()}", f"{col} is empty")
    return value


def parse_row(
    row: Dict[str, Any],
    position: int,
    country_groups: Sequence[str],
) -> Tuple[LeaderRecord, List[ValidationIssue]]:
    """
    Build a LeaderRecord from one raw CSV row (all cells as strings).

    Returns the record plus any non-fatal issues (e.g. a duration column that
    disagrees with end_year - start_year, which is then recomputed).

    Raises:
        RowError: if the row is malformed and must be rejected
    """
    issues: List[ValidationIssue] = []

    start_year = _integer(row, "start_year")
    end_year = _integer(row, "end_year")
    start_age = _number(row, "start_age")
    duration = end_year - start_year

    declared = _integer(row, "duration")
    if declared != duration:
        issues.append(
            ValidationIssue(
                "ROW_DURATION_MISMATCH",
                f"duration={declared} but end_year - start_year = {duration}; using {duration}",
                row=position,
            )
        )

    if "end_age" in row and str(row["end_age"]).strip():
        end_age = _number(row, "end_age")
    else:
        end_age = start_age + duration

    if "id" in row and str(row["id"]).strip():
        leader_id = str(row["id"]).strip()
    else:
        leader_id = str(position)

    record = LeaderRecord(
        id=leader_id,
        country=_text(row, "country"),
        leader=_text(row, "leader"),
        gender=_text(row, "gender"),
        start_year=start_year,
        end_year=end_year,
        start_age=start_age,
        end_age=end_age,
        duration=duration,
        pcgdp=_pcgdp(row),
        highlighted=_flag(row, "label"),
        groups=frozenset(g for g in country_groups if _flag(row, g)),
    )
    return record, issues


def load_leader_csv(
    path: Path,
    country_groups: Sequence[str],
    name: Optional[str] = None,
) -> Dataset:
    """
    Read the leader CSV into a validated Dataset.

    - Every cell is read as a string and parsed explicitly, so no NaN
      reaches a LeaderRecord.
    - Malformed rows are rejected and recorded in Dataset.issues.
    - Rows with duration <= 0 are excluded.
    - Records are ordered by the label flag (highlighted last), stable
      otherwise, so highlighted leaders draw on top.

    Raises:
        ConfigError: if the file does not exist
        DatasetSchemaError: if required or country-group columns are missing
        DuplicateLeaderError: if two kept rows share an id
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Leader data file not found at {path}.")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [str(c).strip() for c in df.columns]
    _validate_columns(df, country_groups, path)

    records: List[LeaderRecord] = []
    issues: List[ValidationIssue] = []
    n_non_positive = 0

    for position, row in enumerate(df.to_dict(orient="records")):
        try:
            record, row_issues = parse_row(row, position, country_groups)
        except RowError as e:
            issues.append(ValidationIssue(e.code, str(e), row=position))
            continue

        issues.extend(row_issues)
        if record.duration <= 0:
            n_non_positive += 1
            continue
        records.append(record)

    for issue in issues:
        logger.warning(
            "Leader row issue",
            extra={"path": str(path), "row": issue.row, "code": issue.code, "detail": issue.message},
        )

    # sorted() is stable: file order is kept within each label value
    records.sort(key=lambda r: r.highlighted)

    dataset = Dataset(
        name=name or path.stem,
        records=records,
        country_groups=country_groups,
        issues=issues,
        file_path=path,
    )

    logger.info(
        "Leader data loaded",
        extra={
            "path": str(path),
            "n_rows": len(df),
            "n_records": len(dataset),
            "n_issues": len(issues),
            "n_non_positive_duration": n_non_positive,
        },
    )
    return dataset


def from_config(cfg: GlobalConfig) -> Dataset:
    """
    Materialise the leader Dataset described by a GlobalConfig.
    """
    path = resolve_data_path(cfg)
    return load_leader_csv(path, cfg.country_group_keys, name=cfg.data.name)
