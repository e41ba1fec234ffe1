"""Shared fixtures for filtering tests."""

from __future__ import annotations

import datetime

import pytest

from staff_query_filtering import QueryFilterAdapter

NOW = datetime.datetime(2024, 6, 15, 12, 30, 0)


@pytest.fixture
def now() -> datetime.datetime:
    return NOW


@pytest.fixture
def adapter() -> QueryFilterAdapter:
    """Adapter with a frozen clock."""
    return QueryFilterAdapter(clock=lambda: NOW)
