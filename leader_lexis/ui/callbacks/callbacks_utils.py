from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from leader_lexis.core.dataset import Dataset
from leader_lexis.core.filter_state import FilterState

logger = logging.getLogger(__name__)


def sanitised_filter_state(
    data: object,
    dataset: Dataset,
    default_group: str,
) -> FilterState:
    """
    FilterState from the Dash store, falling back to defaults when the stored
    value is missing or unreadable. Stale selections are dropped.
    """
    if not isinstance(data, dict) or not data:
        return FilterState(country_group=default_group)
    try:
        return FilterState.sanitised(data, dataset, default_group)
    except (TypeError, ValueError):
        logger.exception("Invalid filter-state: %r", data)
        return FilterState(country_group=default_group)


def describe_state(fs_data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Tolerant parse of the stored state for display-only callbacks."""
    if not isinstance(fs_data, dict):
        return {"country_group": None, "gender": None, "n_selected": 0}
    return {
        "country_group": fs_data.get("country_group"),
        "gender": fs_data.get("gender"),
        "n_selected": len(fs_data.get("selected_leaders") or []),
    }
