"""Staff list query parsing — request parameters to where-conditions."""

from __future__ import annotations

from .adapter import (
    NATIVE_LIST_FIELDS,
    NATIVE_LIST_PREFIX,
    SEARCH_KEY,
    STATE_KEY,
    QueryFilterAdapter,
    array_query,
)
from .dates import (
    DB_DATETIME_FORMAT,
    FAR_PAST,
    DateRange,
    decode_date_range,
    normalize_date,
)
from .dept_scope import force_recursive, intersect_dept_ids, union_dept_ids
from .filters import Direct, FilterSpec, Renamed, coerce_filters
from .options import ScopeOptions
from .search import DEFAULT_SEARCH_FIELDS, SearchField, search_group
from .user_state import UserState, user_state_group

__all__ = [
    "DB_DATETIME_FORMAT",
    "DEFAULT_SEARCH_FIELDS",
    "DateRange",
    "Direct",
    "FAR_PAST",
    "FilterSpec",
    "NATIVE_LIST_FIELDS",
    "NATIVE_LIST_PREFIX",
    "QueryFilterAdapter",
    "Renamed",
    "SEARCH_KEY",
    "STATE_KEY",
    "ScopeOptions",
    "SearchField",
    "UserState",
    "array_query",
    "coerce_filters",
    "decode_date_range",
    "force_recursive",
    "intersect_dept_ids",
    "normalize_date",
    "search_group",
    "union_dept_ids",
    "user_state_group",
]
