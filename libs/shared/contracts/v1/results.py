from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class QueryRef(BaseModel):
    """Identity of the query that produced a result."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    obj: str
    alias: str | None = Field(default=None, alias="resultAlias")


class QueryResult(BaseModel):
    """One polled result: an attribute of an MBean and its value(s).

    `values` keeps insertion order; composite attributes carry one entry per
    sub-key, simple attributes a single entry keyed by the attribute name.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query: QueryRef
    class_name: str = Field(default="", alias="className")
    class_name_alias: str | None = Field(default=None, alias="classNameAlias")
    type_name: str = Field(default="", alias="typeName")
    attribute_name: str = Field(alias="attributeName")
    epoch: int | None = None
    values: dict[str, Any] = Field(default_factory=dict)
