"""SQLAlchemy backend for filter results and condition ASTs."""

from __future__ import annotations

from .compiler import build_sqla_filter, build_where
from .operators import (
    DEFAULT_SQLA_REGISTRY,
    SQLAlchemyOperator,
    SQLAlchemyOperatorRegistry,
    build_default_sqla_registry,
)

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    "build_default_sqla_registry",
    "build_sqla_filter",
    "build_where",
]
