# -*- coding: utf-8 -*-
"""
existence

Check whether an item has related records.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from ..core.types import RelationshipKind
from .backend import NullRelationshipBackend, RelationshipBackend, call_backend
from .base import RelationshipDescriptor, dispatch


class RelationshipExistence:
    """Singular relations load the related record; plural ones count them."""

    def __init__(
        self, field: RelationshipDescriptor, backend: RelationshipBackend | None = None
    ) -> None:
        self.field = field
        self.backend = backend or NullRelationshipBackend()
        self._handlers = {
            RelationshipKind.BELONGS_TO: self._exists_one,
            RelationshipKind.HAS_MANY: self._exists_many,
            RelationshipKind.HAS_ONE: self._exists_one,
            RelationshipKind.BELONGS_TO_MANY: self._exists_many,
            RelationshipKind.MORPH_TO: self._exists_morph,
            RelationshipKind.MORPH_TO_MANY: self._exists_many,
        }

    async def exists(self, item: Any = None) -> bool:
        handler = dispatch(self._handlers, self.field)
        return await handler(item)

    async def doesnt_exist(self, item: Any = None) -> bool:
        return not await self.exists(item)

    async def _exists_one(self, item: Any) -> bool:
        if item is None:
            return False
        related = await call_backend(self.backend.load, self.field, item, None)
        return related is not None

    async def _exists_morph(self, item: Any) -> bool:
        self.field.validate_types()
        return await self._exists_one(item)

    async def _exists_many(self, item: Any) -> bool:
        total = await call_backend(self.backend.count, self.field, item)
        return int(total or 0) > 0


# The End
