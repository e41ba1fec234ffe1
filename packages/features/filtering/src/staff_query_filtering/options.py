"""ScopeOptions — caller-supplied department visibility directives."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ScopeOptions(BaseModel):
    """
    Department-id directives applied to the ``deptId`` parameter.

    Attributes:
        merge_dept_ids: Departments the caller may see; the requested
            ``deptId`` list is narrowed to these (wire name ``mergeDeptIds``).
        recursive_dept_ids: Departments always added to the requested list,
            with ``deptIdRecursive`` forced on (wire name ``recursiveDeptIds``).
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, coerce_numbers_to_str=True
    )

    merge_dept_ids: list[str] | None = Field(default=None, alias="mergeDeptIds")
    recursive_dept_ids: list[str] | None = Field(
        default=None, alias="recursiveDeptIds"
    )

    @classmethod
    def coerce(cls, options: Any) -> ScopeOptions:
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(options)
