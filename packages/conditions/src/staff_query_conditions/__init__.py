"""Condition algebra shared by the filter adapter and the query compilers."""

from .conditions import (
    FREE_KEY_PREFIX,
    AllOf,
    AnyOf,
    Between,
    Compare,
    Condition,
    Equals,
    Field,
    FieldLevelCondition,
    IsNull,
    Like,
    OneOf,
    ResultQuery,
    as_condition,
    is_free_key,
    where_to_dict,
)
from .exceptions import ConditionError, FieldNotFoundError, UnsupportedOperatorError
from .operators import COMPARISON_OPERATORS, ConditionOperator

__all__ = [
    # Operators
    "ConditionOperator",
    "COMPARISON_OPERATORS",
    # Conditions
    "Condition",
    "FieldLevelCondition",
    "Equals",
    "OneOf",
    "Compare",
    "Like",
    "IsNull",
    "Between",
    "Field",
    "AnyOf",
    "AllOf",
    # Result mapping
    "ResultQuery",
    "FREE_KEY_PREFIX",
    "as_condition",
    "is_free_key",
    "where_to_dict",
    # Exceptions
    "ConditionError",
    "FieldNotFoundError",
    "UnsupportedOperatorError",
]
