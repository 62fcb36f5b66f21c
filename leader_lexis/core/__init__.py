"""
Core domain layer: leader dataset, filter state, derivations, view base
class, the view registry and the coordinator that links the views
"""

from .dataset import Dataset, LeaderRecord
from .filter_state import FilterState
from .intents import Intent, IntentKind
from .base_view import BaseView
from .view_registry import ViewRegistry
from .coordinator import Coordinator, UpdateResult

__all__ = [
    "Dataset",
    "LeaderRecord",
    "FilterState",
    "Intent",
    "IntentKind",
    "BaseView",
    "ViewRegistry",
    "Coordinator",
    "UpdateResult",
]
