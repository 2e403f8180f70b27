# -*- coding: utf-8 -*-
"""
constraints

Limits, offsets and where clauses narrowing related records.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .backend import NullRelationshipBackend, RelationshipBackend, call_backend
from .base import RelationshipDescriptor


class RelationshipConstraints:
    """
    Relationship Constraints

    Keeps a window (``limit``/``offset``, both clamped at zero) and a table of
    where clauses. A limit of ``0`` means no limit. Every change re-queries
    the backend with the whole state.
    """

    def __init__(
        self, field: RelationshipDescriptor, backend: RelationshipBackend | None = None
    ) -> None:
        self.field = field
        self.backend = backend or NullRelationshipBackend()
        self.limit = 0
        self.offset = 0
        self._constraints: dict[str, dict[str, Any]] = {}

    @property
    def constraints(self) -> dict[str, dict[str, Any]]:
        return {column: dict(clause) for column, clause in self._constraints.items()}

    async def apply_limit(self, limit: int) -> list[Any]:
        self.limit = max(int(limit), 0)
        return await self._query()

    async def apply_offset(self, offset: int) -> list[Any]:
        self.offset = max(int(offset), 0)
        return await self._query()

    async def apply_where(self, column: str, operator: str, value: Any) -> list[Any]:
        if not column:
            return []
        self._constraints[column] = {"operator": operator, "value": value}
        return await self._query()

    async def apply_where_in(self, column: str, values: Sequence[Any]) -> list[Any]:
        if not column or not values:
            return []
        self._constraints[column] = {"in": list(values)}
        return await self._query()

    async def _query(self) -> list[Any]:
        rows = await call_backend(
            self.backend.query,
            self.field,
            filters=self.constraints,
            offset=self.offset,
            limit=self.limit or None,
        )
        return list(rows or [])


# The End
