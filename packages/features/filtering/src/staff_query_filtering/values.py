"""Presence checks and comma-list helpers for raw query values."""

from __future__ import annotations

import math
from typing import Any


def is_absent(value: Any) -> bool:
    """True for ``None`` and NaN. Empty strings are present."""
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def is_blank(value: Any) -> bool:
    """Absent, or a string that is empty after stripping."""
    if is_absent(value):
        return True
    return isinstance(value, str) and value.strip() == ""


def split_csv(value: Any) -> list[str] | None:
    """
    Split a raw query value on commas.

    Lists and tuples are joined with commas first, so ``["1", "2,3"]``
    splits into three parts. Mappings are never split and return ``None``.
    """
    if isinstance(value, dict):
        return None
    if isinstance(value, list | tuple):
        value = ",".join(str(v) for v in value)
    return str(value).split(",")
