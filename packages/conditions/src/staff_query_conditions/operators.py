from enum import Enum


class ConditionOperator(str, Enum):
    """Operators a filter condition can carry."""

    # Comparison
    EQ = "="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Set / range
    IN = "in"
    BETWEEN = "between"

    # String
    LIKE = "like"

    # Null
    IS_NULL = "is_null"

    # Logical
    AND = "and"
    OR = "or"


COMPARISON_OPERATORS: frozenset[ConditionOperator] = frozenset(
    {
        ConditionOperator.GT,
        ConditionOperator.LT,
        ConditionOperator.GE,
        ConditionOperator.LE,
    }
)
