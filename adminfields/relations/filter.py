# -*- coding: utf-8 -*-
"""
filter

Column filters applied to related records.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .backend import NullRelationshipBackend, RelationshipBackend, call_backend
from .base import RelationshipDescriptor


class RelationshipFilter:
    """Accumulates ``column -> {operator, value}`` filters and queries with them."""

    def __init__(
        self, field: RelationshipDescriptor, backend: RelationshipBackend | None = None
    ) -> None:
        self.field = field
        self.backend = backend or NullRelationshipBackend()
        self._filters: dict[str, dict[str, Any]] = {}

    @property
    def filters(self) -> dict[str, dict[str, Any]]:
        return {column: dict(rule) for column, rule in self._filters.items()}

    async def apply_filter(self, column: str, operator: str, value: Any) -> list[Any]:
        if not column:
            return []
        self._filters[column] = {"operator": operator, "value": value}
        return await self._query()

    async def apply_multiple_filters(
        self, filters: Mapping[str, Mapping[str, Any]]
    ) -> list[Any]:
        """Merge ready-made ``{operator, value}`` rules keyed by column."""
        if not filters:
            return []
        for column, rule in filters.items():
            if column:
                self._filters[column] = dict(rule)
        return await self._query()

    async def remove_filter(self) -> list[Any]:
        self._filters.clear()
        return await self._query()

    async def _query(self) -> list[Any]:
        return list(
            await call_backend(self.backend.query, self.field, filters=self.filters) or []
        )


# The End
