# -*- coding: utf-8 -*-
"""
counting

Count records related to an item.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from ..core.types import RelationshipKind
from .backend import NullRelationshipBackend, RelationshipBackend, call_backend
from .base import RelationshipDescriptor, dispatch


class RelationshipCounting:
    """Singular relations count 0 or 1; plural relations ask the backend."""

    def __init__(
        self, field: RelationshipDescriptor, backend: RelationshipBackend | None = None
    ) -> None:
        self.field = field
        self.backend = backend or NullRelationshipBackend()
        self._handlers = {
            RelationshipKind.BELONGS_TO: self._count_one,
            RelationshipKind.HAS_MANY: self._count_many,
            RelationshipKind.HAS_ONE: self._count_one,
            RelationshipKind.BELONGS_TO_MANY: self._count_many,
            RelationshipKind.MORPH_TO: self._count_one,
            RelationshipKind.MORPH_TO_MANY: self._count_many,
        }

    async def count(self, item: Any = None) -> int:
        handler = dispatch(self._handlers, self.field)
        return await handler(item)

    async def _count_one(self, item: Any) -> int:
        if item is None:
            return 0
        related = await call_backend(self.backend.load, self.field, item, None)
        return 0 if related is None else 1

    async def _count_many(self, item: Any) -> int:
        total = await call_backend(self.backend.count, self.field, item)
        return max(int(total or 0), 0)


# The End
