"""
Compile a condition AST (or a whole filter result) into a SQLAlchemy
filter expression.

Each leaf operator is an isolated strategy registered in a
``SQLAlchemyOperatorRegistry``; ``build_sqla_filter`` walks the AST tree and
delegates leaf compilation to the registry.

Usage::

    result = QueryFilterAdapter().transform(request.query_params, FILTERS)
    stmt = select(StaffRecord).where(build_where(StaffRecord, result))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, false, inspect, or_, true

from staff_query_conditions import (
    ConditionError,
    ConditionOperator,
    FieldNotFoundError,
    where_to_dict,
)

from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import ColumnElement

    from .operators import SQLAlchemyOperatorRegistry

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_sqla_filter(
    model: type[Any],
    data: dict[str, Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> ColumnElement[bool]:
    """
    Build a SQLAlchemy filter expression from a condition dictionary.

    Args:
        model: The SQLAlchemy model class.
        data: Condition AST (as produced by ``Condition.to_dict()``).
            An empty dict matches everything.
        registry: Optional custom operator registry. Falls back to
            ``DEFAULT_SQLA_REGISTRY``.

    Raises:
        FieldNotFoundError: A leaf names an attribute the model lacks.
        UnsupportedOperatorError: A leaf uses an unknown or unregistered
            operator.
        ConditionError: A leaf has no ``attr``.
    """
    if not data:
        return true()
    return _compile_node(model, data, registry or DEFAULT_SQLA_REGISTRY)


def build_where(
    model: type[Any],
    result: Mapping[str, Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> ColumnElement[bool]:
    """Compile a filter result mapping; every entry is AND-ed."""
    return build_sqla_filter(model, where_to_dict(result), registry=registry)


# ---------------------------------------------------------------------------
# Internal compilation
# ---------------------------------------------------------------------------


def _compile_node(
    model: type[Any],
    data: dict[str, Any],
    registry: SQLAlchemyOperatorRegistry,
) -> ColumnElement[bool]:
    op = str(data.get("op", "")).lower()

    if op == ConditionOperator.AND:
        conditions = [
            _compile_node(model, c, registry) for c in data.get("conditions", [])
        ]
        return and_(*conditions) if conditions else true()

    if op == ConditionOperator.OR:
        conditions = [
            _compile_node(model, c, registry) for c in data.get("conditions", [])
        ]
        # An empty OR-group matches nothing.
        return or_(*conditions) if conditions else false()

    operator = registry.resolve(op)
    attr: str | None = data.get("attr")
    if not attr:
        raise ConditionError(f"Condition missing 'attr': {data}")
    return operator.apply(_resolve_column(model, attr), data.get("val"))


def _resolve_column(model: type[Any], attr: str) -> Any:
    column = getattr(model, attr, None)
    if column is None:
        raise FieldNotFoundError(attr, model.__name__, _available_fields(model))
    return column


def _available_fields(model: type[Any]) -> list[str]:
    mapper = inspect(model, raiseerr=False)
    if mapper is None:
        return []
    return [prop.key for prop in mapper.column_attrs]
