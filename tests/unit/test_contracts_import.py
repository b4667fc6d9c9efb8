from __future__ import annotations

import pytest
from pydantic import ValidationError
from shared.contracts.v1.results import QueryResult


def test_result_parses_wire_names():
    r = QueryResult.model_validate(
        {
            "query": {"obj": "java.lang:type=Memory", "resultAlias": "mem"},
            "className": "sun.management.MemoryImpl",
            "typeName": "type=Memory",
            "attributeName": "HeapMemoryUsage",
            "values": {"used": 10, "max": 20, "committed": None},
        }
    )
    assert r.query.alias == "mem"
    assert r.class_name_alias is None
    assert list(r.values) == ["used", "max", "committed"]


def test_attribute_name_is_required():
    with pytest.raises(ValidationError):
        QueryResult.model_validate({"query": {"obj": "x"}, "values": {}})
