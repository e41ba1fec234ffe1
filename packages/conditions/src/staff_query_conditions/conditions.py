"""
Condition algebra for filter results.

A result mapping (``ResultQuery``) maps field names to condition values.
A condition value is a raw scalar (equality), a list (set membership) or a
:class:`Condition`. Keys starting with ``$`` hold free-standing conditions
that carry their own field bindings (``AnyOf`` / ``AllOf`` / ``Field``).

Every condition serialises to the dictionary AST consumed by the
persistence compilers::

    {"op": "in", "attr": "status", "val": ["1", "2"]}
    {"op": "or", "conditions": [...]}
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .exceptions import ConditionError
from .operators import COMPARISON_OPERATORS, ConditionOperator

if TYPE_CHECKING:
    from collections.abc import Mapping

ResultQuery = dict[str, Any]

FREE_KEY_PREFIX = "$"


class Condition(ABC):
    """Base class for all conditions."""

    @abstractmethod
    def to_dict(self, attr: str | None = None) -> dict[str, Any]:
        """Serialise to the AST, binding field-level conditions to *attr*."""
        ...

    def __and__(self, other: Condition) -> AllOf:
        return AllOf(self, other)

    def __or__(self, other: Condition) -> AnyOf:
        return AnyOf(self, other)


class FieldLevelCondition(Condition):
    """A condition that needs a field name before it can be serialised."""

    op: ConditionOperator

    def to_dict(self, attr: str | None = None) -> dict[str, Any]:
        if not attr:
            raise ConditionError(
                f"{type(self).__name__} must be bound to a field before serialising"
            )
        return {"op": self.op.value, "attr": attr, "val": self._value()}

    @abstractmethod
    def _value(self) -> Any: ...


@dataclass(frozen=True)
class Equals(FieldLevelCondition):
    value: Any
    op = ConditionOperator.EQ

    def _value(self) -> Any:
        return self.value


@dataclass(frozen=True)
class OneOf(FieldLevelCondition):
    """Set membership."""

    values: tuple[Any, ...]
    op = ConditionOperator.IN

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def _value(self) -> Any:
        return list(self.values)


@dataclass(frozen=True)
class Compare(FieldLevelCondition):
    """Ordered comparison: ``>``, ``<``, ``>=`` or ``<=``."""

    comparison: ConditionOperator
    value: Any

    def __post_init__(self) -> None:
        comparison = ConditionOperator(self.comparison)
        if comparison not in COMPARISON_OPERATORS:
            raise ConditionError(f"Not a comparison operator: {comparison.value!r}")
        object.__setattr__(self, "comparison", comparison)

    @property
    def op(self) -> ConditionOperator:  # type: ignore[override]
        return self.comparison

    def _value(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Like(FieldLevelCondition):
    """SQL ``LIKE`` pattern (``%`` and ``_`` wildcards)."""

    pattern: str
    op = ConditionOperator.LIKE

    def _value(self) -> Any:
        return self.pattern


@dataclass(frozen=True)
class IsNull(FieldLevelCondition):
    op = ConditionOperator.IS_NULL

    def _value(self) -> Any:
        return True


@dataclass(frozen=True)
class Between(FieldLevelCondition):
    """Inclusive range: ``begin <= value <= end``."""

    begin: Any
    end: Any
    op = ConditionOperator.BETWEEN

    def _value(self) -> Any:
        return [self.begin, self.end]


@dataclass(frozen=True)
class Field(Condition):
    """Bind a field-level condition to a field name."""

    attr: str
    condition: Condition

    def to_dict(self, attr: str | None = None) -> dict[str, Any]:
        return self.condition.to_dict(self.attr)


@dataclass(frozen=True, init=False)
class _Composite(Condition):
    conditions: tuple[Condition, ...]
    op = ConditionOperator.AND

    def __init__(self, *conditions: Condition) -> None:
        object.__setattr__(self, "conditions", tuple(conditions))

    def __iter__(self):
        return iter(self.conditions)

    def __len__(self) -> int:
        return len(self.conditions)

    def to_dict(self, attr: str | None = None) -> dict[str, Any]:
        return {
            "op": self.op.value,
            "conditions": [c.to_dict(attr) for c in self.conditions],
        }


@dataclass(frozen=True, init=False)
class AnyOf(_Composite):
    """Disjunction: satisfied when any sub-condition is."""

    op = ConditionOperator.OR


@dataclass(frozen=True, init=False)
class AllOf(_Composite):
    """Conjunction: satisfied when every sub-condition is."""

    op = ConditionOperator.AND


# ---------------------------------------------------------------------------
# Result mapping helpers
# ---------------------------------------------------------------------------


def is_free_key(key: str) -> bool:
    """True for result keys holding a free-standing condition."""
    return key.startswith(FREE_KEY_PREFIX)


def as_condition(value: Any) -> Condition:
    """Lift a raw result value into a :class:`Condition`."""
    if isinstance(value, Condition):
        return value
    if isinstance(value, list | tuple):
        return OneOf(value)
    return Equals(value)


def where_to_dict(result: Mapping[str, Any]) -> dict[str, Any]:
    """
    Serialise a whole result mapping into one AST node.

    Entries are AND-ed together. A single entry is returned unwrapped and an
    empty mapping yields ``{}``.
    """
    nodes = [
        as_condition(value).to_dict(None if is_free_key(key) else key)
        for key, value in result.items()
    ]
    if not nodes:
        return {}
    if len(nodes) == 1:
        return nodes[0]
    return {"op": ConditionOperator.AND.value, "conditions": nodes}
