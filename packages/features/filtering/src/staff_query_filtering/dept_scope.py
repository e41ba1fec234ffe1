"""Department-id narrowing and widening on the working query copy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .values import is_blank, split_csv

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

DEPT_ID = "deptId"
DEPT_ID_RECURSIVE = "deptIdRecursive"


def intersect_dept_ids(query: dict[str, Any], dept_ids: Sequence[str]) -> None:
    """
    Narrow ``deptId`` to *dept_ids*.

    A blank ``deptId`` is replaced by the whole *dept_ids* list. Parts keep
    the order they had in the query.
    """
    if not dept_ids:
        return
    allowed = set(dept_ids)
    if is_blank(query.get(DEPT_ID)):
        query[DEPT_ID] = ",".join(dept_ids)
    else:
        requested = split_csv(query[DEPT_ID]) or []
        query[DEPT_ID] = ",".join(
            part for part in dict.fromkeys(requested) if part in allowed
        )
    logger.debug("deptId narrowed to %r", query[DEPT_ID])


def union_dept_ids(query: dict[str, Any], dept_ids: Sequence[str]) -> None:
    """Widen a non-blank ``deptId`` with *dept_ids*, dropping duplicates."""
    if not dept_ids or is_blank(query.get(DEPT_ID)):
        return
    requested = split_csv(query[DEPT_ID]) or []
    query[DEPT_ID] = ",".join(dict.fromkeys([*requested, *dept_ids]))
    logger.debug("deptId widened to %r", query[DEPT_ID])


def force_recursive(query: dict[str, Any], dept_ids: Sequence[str]) -> None:
    """Switch recursive department lookup on and widen ``deptId``."""
    query[DEPT_ID_RECURSIVE] = "1"
    union_dept_ids(query, dept_ids)
