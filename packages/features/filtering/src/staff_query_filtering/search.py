"""Free-text staff search: one input matched against several columns."""

from __future__ import annotations

from typing import Any, NamedTuple

from staff_query_conditions import AnyOf, Field, Like

SEARCH_VALUE = "value"


class SearchField(NamedTuple):
    attr: str
    prefix: bool  # match ``value%`` instead of ``value``


DEFAULT_SEARCH_FIELDS: tuple[SearchField, ...] = (
    SearchField("name", prefix=True),
    SearchField("namePinyin", prefix=True),
    SearchField("namePinyinShort", prefix=True),
    SearchField("jobNumber", prefix=False),
    SearchField("phone", prefix=False),
)


def search_group(
    value: Any,
    fields: tuple[SearchField, ...] = DEFAULT_SEARCH_FIELDS,
) -> AnyOf:
    if isinstance(value, list | tuple):
        text = ",".join(map(str, value))
    else:
        text = str(value)
    return AnyOf(
        *(Field(f.attr, Like(f"{text}%" if f.prefix else text)) for f in fields)
    )
