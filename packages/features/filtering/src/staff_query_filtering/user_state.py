"""Employment-state codes -> date conditions on entry and confirmation."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from staff_query_conditions import (
    AllOf,
    AnyOf,
    Compare,
    ConditionOperator,
    Field,
    IsNull,
)

if TYPE_CHECKING:
    import datetime

    from staff_query_conditions import Condition

USER_STATE = "userState"
ENTRY_DATE = "entryDate"
POSITIVE_DATE = "positiveDate"


class UserState(IntEnum):
    PENDING = 1  # hired, not started yet
    PROBATION = 2  # started, not yet confirmed
    REGULAR = 3  # confirmed


def parse_state_code(item: Any) -> UserState | None:
    """Read a state code the way a query string carries it (``"2"``, ``2.0``)."""
    if isinstance(item, bool):
        return None
    try:
        number = float(str(item).strip())
    except ValueError:
        return None
    if math.isnan(number) or not number.is_integer():
        return None
    try:
        return UserState(int(number))
    except ValueError:
        return None


def state_condition(state: UserState, now: datetime.datetime) -> Condition:
    if state is UserState.PENDING:
        return Field(ENTRY_DATE, Compare(ConditionOperator.GT, now))
    if state is UserState.PROBATION:
        return AllOf(
            Field(ENTRY_DATE, Compare(ConditionOperator.LE, now)),
            AnyOf(
                Field(POSITIVE_DATE, Compare(ConditionOperator.GT, now)),
                Field(POSITIVE_DATE, IsNull()),
            ),
        )
    return Field(POSITIVE_DATE, Compare(ConditionOperator.LE, now))


def user_state_group(value: Any, now: datetime.datetime) -> AnyOf:
    """
    OR-group for one or more state codes.

    Unrecognised codes contribute nothing, so a value made only of unknown
    codes yields an empty group.
    """
    items = value if isinstance(value, list | tuple) else [value]
    conditions = []
    for item in items:
        state = parse_state_code(item)
        if state is not None:
            conditions.append(state_condition(state, now))
    return AnyOf(*conditions)
