"""
Leaf operators for the SQLAlchemy backend.

Every leaf ``op`` in a condition AST is looked up in an
``SQLAlchemyOperatorRegistry`` and applied to the mapped column it names.
Operator strings the registry cannot resolve raise
:class:`UnsupportedOperatorError`.
"""

from __future__ import annotations

import operator as op_module
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

from staff_query_conditions import ConditionOperator, UnsupportedOperatorError

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement

BACKEND = "SQLAlchemy"


class SQLAlchemyOperator(ABC):
    """Compiles one leaf operator against a column."""

    operator: ConditionOperator

    @abstractmethod
    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        """Build the clause for ``column <op> value``."""


class EqualOperator(SQLAlchemyOperator):
    """``None`` compares with ``IS NULL``."""

    operator = ConditionOperator.EQ

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        if value is None:
            return cast("ColumnElement[bool]", column.is_(None))
        return cast("ColumnElement[bool]", column == value)


class CompareOperator(SQLAlchemyOperator):
    _FUNCS: dict[ConditionOperator, Callable[[Any, Any], Any]] = {
        ConditionOperator.GT: op_module.gt,
        ConditionOperator.LT: op_module.lt,
        ConditionOperator.GE: op_module.ge,
        ConditionOperator.LE: op_module.le,
    }

    def __init__(self, operator: ConditionOperator) -> None:
        self.operator = operator
        self._func = self._FUNCS[operator]

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", self._func(column, value))


class InOperator(SQLAlchemyOperator):
    operator = ConditionOperator.IN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.in_(list(value)))


class BetweenOperator(SQLAlchemyOperator):
    """Inclusive on both ends."""

    operator = ConditionOperator.BETWEEN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        begin, end = value
        return cast("ColumnElement[bool]", column.between(begin, end))


class LikeOperator(SQLAlchemyOperator):
    operator = ConditionOperator.LIKE

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.like(value))


class IsNullOperator(SQLAlchemyOperator):
    operator = ConditionOperator.IS_NULL

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        if value:
            return cast("ColumnElement[bool]", column.is_(None))
        return cast("ColumnElement[bool]", column.is_not(None))


class SQLAlchemyOperatorRegistry:
    """Leaf operators keyed by :class:`ConditionOperator`."""

    def __init__(self, *operators: SQLAlchemyOperator) -> None:
        self._operators: dict[ConditionOperator, SQLAlchemyOperator] = {}
        for operator in operators:
            self.register(operator)

    def register(self, operator: SQLAlchemyOperator) -> None:
        self._operators[operator.operator] = operator

    def __contains__(self, op: object) -> bool:
        try:
            return ConditionOperator(op) in self._operators
        except ValueError:
            return False

    def resolve(self, op: str | ConditionOperator) -> SQLAlchemyOperator:
        """
        Find the operator for a leaf ``op`` string.

        Raises:
            UnsupportedOperatorError: *op* is not a leaf operator, or it is
                not registered here.
        """
        try:
            key = ConditionOperator(op)
        except ValueError:
            raise UnsupportedOperatorError(str(op), BACKEND) from None
        operator = self._operators.get(key)
        if operator is None:
            raise UnsupportedOperatorError(key.value, BACKEND)
        return operator


def build_default_sqla_registry() -> SQLAlchemyOperatorRegistry:
    """Create a registry with every leaf operator."""
    return SQLAlchemyOperatorRegistry(
        EqualOperator(),
        CompareOperator(ConditionOperator.GT),
        CompareOperator(ConditionOperator.LT),
        CompareOperator(ConditionOperator.GE),
        CompareOperator(ConditionOperator.LE),
        InOperator(),
        BetweenOperator(),
        LikeOperator(),
        IsNullOperator(),
    )


DEFAULT_SQLA_REGISTRY: SQLAlchemyOperatorRegistry = build_default_sqla_registry()
