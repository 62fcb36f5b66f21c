from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from leader_lexis.core.exceptions import InvalidIntentError


class IntentKind(str, Enum):
    TOGGLE_GENDER = "toggle_gender"
    TOGGLE_LEADER = "toggle_leader"
    SET_COUNTRY_GROUP = "set_country_group"
    CLEAR_SELECTION = "clear_selection"


@dataclass(frozen=True)
class Intent:
    """
    A user interaction raised by a view (or the country selector).

    value carries the gender, leader id or country-group key; it is None
    only for CLEAR_SELECTION.
    """

    kind: IntentKind
    value: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is IntentKind.CLEAR_SELECTION:
            if self.value is not None:
                raise InvalidIntentError("clear_selection takes no value")
        elif not isinstance(self.value, str) or not self.value:
            raise InvalidIntentError(f"{self.kind.value} requires a non-empty string value")

    @classmethod
    def toggle_gender(cls, gender: str) -> Intent:
        return cls(IntentKind.TOGGLE_GENDER, gender)

    @classmethod
    def toggle_leader(cls, leader_id: str) -> Intent:
        return cls(IntentKind.TOGGLE_LEADER, leader_id)

    @classmethod
    def set_country_group(cls, key: str) -> Intent:
        return cls(IntentKind.SET_COUNTRY_GROUP, key)

    @classmethod
    def clear_selection(cls) -> Intent:
        return cls(IntentKind.CLEAR_SELECTION)
