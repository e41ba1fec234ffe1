"""Tests for the condition algebra and its AST serialisation."""

from __future__ import annotations

import pytest

from staff_query_conditions import (
    AllOf,
    AnyOf,
    Between,
    Compare,
    ConditionError,
    ConditionOperator,
    Equals,
    Field,
    IsNull,
    Like,
    OneOf,
    as_condition,
    where_to_dict,
)


class TestFieldLevelConditions:
    def test_equals(self) -> None:
        assert Equals("x").to_dict("name") == {"op": "=", "attr": "name", "val": "x"}

    def test_one_of_normalises_to_tuple(self) -> None:
        cond = OneOf(["1", "2", "3"])
        assert cond.values == ("1", "2", "3")
        assert cond == OneOf(("1", "2", "3"))
        assert cond.to_dict("status") == {
            "op": "in",
            "attr": "status",
            "val": ["1", "2", "3"],
        }

    def test_compare(self) -> None:
        cond = Compare(ConditionOperator.GT, 5)
        assert cond.to_dict("age") == {"op": ">", "attr": "age", "val": 5}

    def test_compare_accepts_operator_value(self) -> None:
        assert Compare("<=", 1).op is ConditionOperator.LE

    def test_compare_rejects_non_comparison(self) -> None:
        with pytest.raises(ConditionError, match="Not a comparison operator"):
            Compare(ConditionOperator.LIKE, "x")

    def test_like(self) -> None:
        assert Like("jo%").to_dict("name")["op"] == "like"

    def test_is_null(self) -> None:
        assert IsNull().to_dict("positiveDate") == {
            "op": "is_null",
            "attr": "positiveDate",
            "val": True,
        }

    def test_between(self) -> None:
        cond = Between("2024-01-01 00:00:00", "2024-02-01 00:00:00")
        assert cond.to_dict("entryDate") == {
            "op": "between",
            "attr": "entryDate",
            "val": ["2024-01-01 00:00:00", "2024-02-01 00:00:00"],
        }

    def test_unbound_field_condition_raises(self) -> None:
        with pytest.raises(ConditionError, match="must be bound"):
            Equals(1).to_dict()


class TestComposites:
    def test_field_binds_attr(self) -> None:
        assert Field("name", Like("a%")).to_dict("ignored")["attr"] == "name"

    def test_any_of(self) -> None:
        group = AnyOf(Field("a", Equals(1)), Field("b", IsNull()))
        assert len(group) == 2
        assert group.to_dict() == {
            "op": "or",
            "conditions": [
                {"op": "=", "attr": "a", "val": 1},
                {"op": "is_null", "attr": "b", "val": True},
            ],
        }

    def test_composite_passes_attr_to_children(self) -> None:
        group = AnyOf(Compare(">", 3), IsNull())
        data = group.to_dict("positiveDate")
        assert [c["attr"] for c in data["conditions"]] == ["positiveDate"] * 2

    def test_operators_build_composites(self) -> None:
        a = Field("a", Equals(1))
        b = Field("b", Equals(2))
        assert (a | b) == AnyOf(a, b)
        assert (a & b) == AllOf(a, b)

    def test_empty_any_of(self) -> None:
        assert AnyOf().to_dict() == {"op": "or", "conditions": []}


class TestResultMapping:
    def test_as_condition_lifts_raw_values(self) -> None:
        assert as_condition("1") == Equals("1")
        assert as_condition(["1", "2"]) == OneOf(["1", "2"])
        cond = Like("x%")
        assert as_condition(cond) is cond

    def test_where_to_dict_empty(self) -> None:
        assert where_to_dict({}) == {}

    def test_where_to_dict_single_entry_unwrapped(self) -> None:
        assert where_to_dict({"status": "1"}) == {
            "op": "=",
            "attr": "status",
            "val": "1",
        }

    def test_where_to_dict_free_keys(self) -> None:
        result = {
            "deptId": OneOf(["1", "2"]),
            "$or": AnyOf(Field("entryDate", Compare(">", "now"))),
        }
        data = where_to_dict(result)
        assert data["op"] == "and"
        assert data["conditions"][0]["attr"] == "deptId"
        assert data["conditions"][1] == {
            "op": "or",
            "conditions": [{"op": ">", "attr": "entryDate", "val": "now"}],
        }
