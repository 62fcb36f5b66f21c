from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass, field, replace
from typing import Any, Deque, Dict, FrozenSet, List, Optional, Sequence

import plotly.graph_objs as go

from leader_lexis.config.model import DEFAULT_COUNTRY_GROUP
from leader_lexis.core.base_view import ALL_FIELDS, BaseView
from leader_lexis.core.dataset import Dataset
from leader_lexis.core.exceptions import InvalidIntentError
from leader_lexis.core.filter_state import FilterState
from leader_lexis.core.intents import Intent, IntentKind

logger = logging.getLogger(__name__)

# FilterState fields each operation touches; a view rerenders when its
# depends_on intersects this set
TOUCHED_FIELDS: Dict[IntentKind, FrozenSet[str]] = {
    IntentKind.SET_COUNTRY_GROUP: ALL_FIELDS,
    IntentKind.TOGGLE_GENDER: frozenset({"gender", "selected_leaders"}),
    IntentKind.TOGGLE_LEADER: frozenset({"selected_leaders"}),
    IntentKind.CLEAR_SELECTION: frozenset({"selected_leaders"}),
}


@dataclass(frozen=True)
class UpdateResult:
    """
    Outcome of one dispatched interaction.

    - state: the committed FilterState after the interaction
    - rendered: view id -> figure for every view that rerendered
    - changed: FilterState fields whose value changed
    - accepted: False when the intent was rejected as a no-op
    """

    state: FilterState
    rendered: Dict[str, go.Figure] = field(default_factory=dict)
    changed: FrozenSet[str] = frozenset()
    accepted: bool = True

    def merged(self, later: UpdateResult) -> UpdateResult:
        rendered = dict(self.rendered)
        rendered.update(later.rendered)
        return UpdateResult(
            state=later.state,
            rendered=rendered,
            changed=self.changed | later.changed,
            accepted=self.accepted,
        )


class Coordinator:
    """
    Owns the session's FilterState and keeps the registered views in lockstep.

    Every interaction runs the full sequence

        candidate state -> invariant check -> derive -> commit -> render views

    before the next one starts. Dispatch is serialised with a lock, and
    intents raised while views are rendering (re-entrant dispatch) are queued
    and processed in order once the current interaction completes.

    Errors detected before commit (unknown ids, unknown groups, invariant
    violations) propagate to the caller with the previous state untouched.
    """

    def __init__(
        self,
        dataset: Dataset,
        views: Sequence[BaseView],
        state: Optional[FilterState] = None,
        default_group: str = DEFAULT_COUNTRY_GROUP,
    ) -> None:
        ids = [v.id for v in views]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate view ids: {ids}")

        if state is None:
            state = FilterState(country_group=default_group)
        self._validate_group(dataset, state.country_group)
        state.check_invariant(dataset)

        self._dataset = dataset
        self._views: List[BaseView] = list(views)
        self._state = state

        self._lock = threading.RLock()
        self._dispatching = False
        self._pending: Deque[Intent] = deque()

    # ------------------------------------------------------------------
    # Read-only access
    # ------------------------------------------------------------------
    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def views(self) -> List[BaseView]:
        return list(self._views)

    def view(self, view_id: str) -> BaseView:
        for v in self._views:
            if v.id == view_id:
                return v
        raise KeyError(f"View '{view_id}' not registered with coordinator")

    # ------------------------------------------------------------------
    # The four operations
    # ------------------------------------------------------------------
    def set_country_group(self, key: str) -> UpdateResult:
        return self.dispatch(Intent.set_country_group(key))

    def toggle_gender(self, gender: str) -> UpdateResult:
        return self.dispatch(Intent.toggle_gender(gender))

    def toggle_leader(self, leader_id: str) -> UpdateResult:
        return self.dispatch(Intent.toggle_leader(leader_id))

    def clear_selection(self) -> UpdateResult:
        return self.dispatch(Intent.clear_selection())

    def render_all(self) -> Dict[str, go.Figure]:
        """Derive and render every view from the current state (initial paint)."""
        with self._lock:
            data = {v.id: v.timed_derive(self._state) for v in self._views}
            return {v.id: v.render(data[v.id]) for v in self._views}

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def dispatch(self, intent: Intent) -> UpdateResult:
        """
        Apply one intent and rerender the views that depend on it.

        If further intents were queued by views while rendering, they are
        applied afterwards and the returned result covers all of them.
        """
        with self._lock:
            if self._dispatching:
                logger.debug(
                    "intent_queued",
                    extra={"kind": intent.kind.value, "value": intent.value},
                )
                self._pending.append(intent)
                return UpdateResult(state=self._state, accepted=True)

            self._dispatching = True
            try:
                result = self._apply(intent)
                while self._pending:
                    result = result.merged(self._apply(self._pending.popleft()))
                return result
            finally:
                self._pending.clear()
                self._dispatching = False

    def _apply(self, intent: Intent) -> UpdateResult:
        current = self._state
        candidate = self._next_state(current, intent)

        if candidate is None:
            return UpdateResult(state=current, accepted=False)

        candidate.check_invariant(self._dataset)

        touched = TOUCHED_FIELDS[intent.kind]
        targets = [v for v in self._views if v.depends_on & touched]

        # Derivation is pure: run it before commit so a failure leaves no trace
        derived: Dict[str, Any] = {v.id: v.timed_derive(candidate) for v in targets}

        self._state = candidate
        changed = current.changed_fields(candidate)

        rendered = {v.id: v.render(derived[v.id]) for v in targets}

        logger.info(
            "intent_applied",
            extra={
                "kind": intent.kind.value,
                "value": intent.value,
                "changed": sorted(changed),
                "rendered": sorted(rendered),
                "n_selected": len(candidate.selected_leaders),
            },
        )
        return UpdateResult(state=candidate, rendered=rendered, changed=changed)

    def _next_state(self, state: FilterState, intent: Intent) -> Optional[FilterState]:
        """Candidate state for intent, or None if the intent is a rejected no-op."""
        kind = intent.kind

        if kind is IntentKind.SET_COUNTRY_GROUP:
            self._validate_group(self._dataset, intent.value)
            return FilterState(country_group=intent.value)

        if kind is IntentKind.TOGGLE_GENDER:
            gender = None if state.gender == intent.value else intent.value
            narrowed = replace(state, gender=gender)
            kept = [
                i for i in state.selected_leaders
                if narrowed.matches(self._dataset.get(i))
            ]
            return narrowed.with_selection(kept)

        if kind is IntentKind.TOGGLE_LEADER:
            leader_id = intent.value
            record = self._dataset.get(leader_id)
            if not state.matches(record):
                logger.info(
                    "leader_toggle_rejected",
                    extra={
                        "leader_id": leader_id,
                        "country_group": state.country_group,
                        "gender": state.gender,
                    },
                )
                return None
            return state.with_selection(state.selected_leaders ^ {leader_id})

        if kind is IntentKind.CLEAR_SELECTION:
            return state.with_selection(())

        raise InvalidIntentError(f"Unsupported intent kind: {kind!r}")

    @staticmethod
    def _validate_group(dataset: Dataset, key: Optional[str]) -> None:
        if key not in dataset.country_groups:
            raise InvalidIntentError(
                f"Unknown country group '{key}'; expected one of {list(dataset.country_groups)}"
            )
