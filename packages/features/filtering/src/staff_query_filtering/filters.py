"""FilterSpec — which query parameters to process, optionally renamed."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class Direct(BaseModel):
    """Process the parameter under its own name."""

    model_config = ConfigDict(frozen=True)

    name: str

    @property
    def target(self) -> str:
        return self.name


class Renamed(BaseModel):
    """Move the value at ``source`` to ``as`` and process it there."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str
    as_: str = Field(alias="as")

    @property
    def target(self) -> str:
        return self.as_


FilterSpec = Direct | Renamed


def coerce_filter(item: Any) -> FilterSpec | None:
    """Normalise one filter item; ``None`` if it cannot be used."""
    if isinstance(item, Direct | Renamed):
        return item
    if isinstance(item, str):
        return Direct(name=item)
    if isinstance(item, Mapping):
        try:
            return Renamed.model_validate(item)
        except ValidationError as exc:
            logger.debug("Skipping malformed rename filter %r: %s", item, exc)
            return None
    logger.debug("Skipping unsupported filter spec %r", item)
    return None


def coerce_filters(filters: Any) -> list[FilterSpec]:
    """
    Normalise the ``filters`` argument to an ordered list of specs.

    Accepts ``None``, a single spec (name, mapping or model) or an iterable
    of them. Unusable items are dropped.
    """
    if not filters:
        return []
    if isinstance(filters, str | Mapping | Direct | Renamed):
        filters = [filters]
    elif not isinstance(filters, Iterable):
        filters = [filters]
    return [spec for spec in map(coerce_filter, filters) if spec is not None]
