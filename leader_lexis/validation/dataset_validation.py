from __future__ import annotations

import logging

from leader_lexis.config.model import GlobalConfig
from leader_lexis.core.dataset import Dataset
from leader_lexis.validation.errors import ValidationIssue, ValidationError

logger = logging.getLogger(__name__)


def validate_dataset(ds: Dataset, cfg: GlobalConfig) -> None:
    """
    Check a loaded Dataset against the app config before serving it.

    Rejected rows are not fatal here (they are logged at load); an empty
    dataset or a selector offering groups the data does not have is.
    """
    issues: list[ValidationIssue] = []

    if len(ds) == 0:
        issues.append(ValidationIssue("DATASET_EMPTY", f"No usable leader records in '{ds.name}'."))

    for key in cfg.country_group_keys:
        if key not in ds.country_groups:
            issues.append(
                ValidationIssue("DATASET_GROUP_COLUMN", f"Country group '{key}' has no column in the data.")
            )

    if cfg.default_country_group not in ds.country_groups:
        issues.append(
            ValidationIssue(
                "DATASET_DEFAULT_GROUP",
                f"default_country_group '{cfg.default_country_group}' is not a loaded group.",
            )
        )

    if issues:
        raise ValidationError(issues)

    # Empty groups are allowed (views render a zero state); worth a note though
    for key in ds.country_groups:
        if not any(r.in_group(key) for r in ds):
            logger.warning("Country group has no leaders", extra={"country_group": key})
