"""QueryFilterAdapter — raw query params -> result mapping of conditions."""

from __future__ import annotations

import datetime
import logging
from typing import TYPE_CHECKING, Any

from staff_query_conditions import Between, OneOf

from .dates import decode_date_range
from .dept_scope import force_recursive, intersect_dept_ids
from .filters import Renamed, coerce_filters
from .options import ScopeOptions
from .search import DEFAULT_SEARCH_FIELDS, SEARCH_VALUE, search_group
from .user_state import USER_STATE, user_state_group
from .values import is_absent, split_csv

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from staff_query_conditions import ResultQuery

    from .search import SearchField

logger = logging.getLogger(__name__)

STATE_KEY = "$or"
SEARCH_KEY = "$search"

# Fields whose comma lists stay plain lists for later business steps.
NATIVE_LIST_FIELDS: frozenset[str] = frozenset({USER_STATE})
NATIVE_LIST_PREFIX = "userResume"


class QueryFilterAdapter:
    """
    Translate HTTP query parameters into a where-mapping.

    Each requested parameter becomes a scalar (equality), a list or
    :class:`~staff_query_conditions.OneOf` (comma lists), or a
    :class:`~staff_query_conditions.Between` (JSON date ranges).
    ``userState`` and ``value`` are replaced by OR-groups stored under
    :data:`STATE_KEY` and :data:`SEARCH_KEY`.

    Malformed request data never raises; it simply produces no condition.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime.datetime] | None = None,
        search_fields: tuple[SearchField, ...] = DEFAULT_SEARCH_FIELDS,
    ) -> None:
        """
        Args:
            clock: Returns "now" for state and date-range conditions.
                Defaults to local naive :func:`datetime.datetime.now`.
            search_fields: Columns matched by the ``value`` parameter.
        """
        self._clock = clock or datetime.datetime.now
        self._search_fields = search_fields

    def transform(
        self,
        raw_query: Mapping[str, Any],
        filters: Any = None,
        options: ScopeOptions | Mapping[str, Any] | None = None,
    ) -> ResultQuery:
        """Return the where-mapping for *filters*, or a copy of *raw_query*."""
        query = dict(raw_query)
        specs = coerce_filters(filters)
        if not specs:
            return query

        scope = ScopeOptions.coerce(options)
        now = self._clock()
        result: ResultQuery = {}

        for spec in specs:
            if isinstance(spec, Renamed):
                query[spec.as_] = query.pop(spec.source, None)
            name = spec.target
            if is_absent(query.get(name)):
                logger.debug("Skipping absent filter %r", name)
                continue

            if scope.merge_dept_ids is not None:
                intersect_dept_ids(query, scope.merge_dept_ids)
            if scope.recursive_dept_ids is not None:
                force_recursive(query, scope.recursive_dept_ids)

            self._unwrap(result, query, name)
            if name == USER_STATE:
                result[STATE_KEY] = user_state_group(result.pop(USER_STATE), now)
            if name == SEARCH_VALUE:
                result[SEARCH_KEY] = search_group(query[name], self._search_fields)
                result.pop(SEARCH_VALUE, None)
            date_range = decode_date_range(query[name], now)
            if date_range is not None:
                result[name] = Between(date_range.begin, date_range.end)

        return result

    @staticmethod
    def _unwrap(result: ResultQuery, query: dict[str, Any], name: str) -> None:
        value = query[name]
        parts = split_csv(value)
        if parts is None or len(parts) < 2:
            result[name] = value
        elif name in NATIVE_LIST_FIELDS or name.startswith(NATIVE_LIST_PREFIX):
            result[name] = parts
        else:
            result[name] = OneOf(parts)


_default_adapter = QueryFilterAdapter()


def array_query(
    raw_query: Mapping[str, Any],
    filters: Any = None,
    options: ScopeOptions | Mapping[str, Any] | None = None,
) -> ResultQuery:
    """Module-level shortcut for :meth:`QueryFilterAdapter.transform`."""
    return _default_adapter.transform(raw_query, filters, options)
