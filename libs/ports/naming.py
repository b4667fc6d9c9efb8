from __future__ import annotations

from typing import Protocol

from shared.contracts.v1.results import QueryResult


class KeyNamer(Protocol):
    """Derives the flat submission key for one value of a result."""

    def __call__(self, result: QueryResult, value_key: str) -> str: ...
