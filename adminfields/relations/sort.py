# -*- coding: utf-8 -*-
"""
sort

Ordering of related records.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .backend import NullRelationshipBackend, RelationshipBackend, call_backend
from .base import RelationshipDescriptor

ASC = "ASC"
DESC = "DESC"


def normalize_direction(direction: str | None) -> str:
    """``"desc"`` / ``"DESC"`` -> ``DESC``; anything else -> ``ASC``."""
    if isinstance(direction, str) and direction.strip().upper() == DESC:
        return DESC
    return ASC


class RelationshipSort:
    """Accumulates column orderings and queries the backend with them."""

    def __init__(
        self, field: RelationshipDescriptor, backend: RelationshipBackend | None = None
    ) -> None:
        self.field = field
        self.backend = backend or NullRelationshipBackend()
        self._sorts: dict[str, str] = {}

    @property
    def sorts(self) -> dict[str, str]:
        return dict(self._sorts)

    async def apply_sort(self, column: str, direction: str = ASC) -> list[Any]:
        if not column:
            return []
        self._sorts[column] = normalize_direction(direction)
        return await self._query()

    async def apply_multiple_sorts(self, sorts: Mapping[str, str]) -> list[Any]:
        if not sorts:
            return []
        for column, direction in sorts.items():
            if column:
                self._sorts[column] = normalize_direction(direction)
        return await self._query()

    async def remove_sort(self) -> list[Any]:
        self._sorts.clear()
        return await self._query()

    async def _query(self) -> list[Any]:
        return list(await call_backend(self.backend.query, self.field, sorts=self.sorts) or [])


# The End
