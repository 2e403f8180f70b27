# -*- coding: utf-8 -*-
"""
loader

Eager and lazy loading of related records.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ..core.types import RelationshipKind
from .backend import NullRelationshipBackend, RelationshipBackend, call_backend
from .base import RelationshipDescriptor, dispatch

logger = logging.getLogger(__name__)


class RelationshipLoader:
    """
    Relationship Loader

    Singular relations (belongs-to, has-one, morph-to) load to a record or
    ``None``; plural relations always load to a list.
    """

    def __init__(self, backend: RelationshipBackend | None = None) -> None:
        self.backend = backend or NullRelationshipBackend()
        self._handlers = {
            RelationshipKind.BELONGS_TO: self._load_one,
            RelationshipKind.HAS_MANY: self._load_many,
            RelationshipKind.HAS_ONE: self._load_one,
            RelationshipKind.BELONGS_TO_MANY: self._load_many,
            RelationshipKind.MORPH_TO: self._load_morph,
            RelationshipKind.MORPH_TO_MANY: self._load_many,
        }

    async def eager_load(self, items: Sequence[Any], field: RelationshipDescriptor) -> None:
        if not items:
            return
        dispatch(self._handlers, field)
        logger.debug("Eager loading %s for %d items", field.key, len(items))
        await call_backend(self.backend.load_many, field, list(items))

    async def lazy_load(self, item: Any, field: RelationshipDescriptor) -> Any:
        if item is None:
            return None
        handler = dispatch(self._handlers, field)
        return await handler(item, field, None)

    async def load_with_constraints(
        self,
        item: Any,
        field: RelationshipDescriptor,
        constraints: Mapping[str, Any] | None = None,
    ) -> Any:
        """Lazy load after passing ``constraints`` through the field's query callback."""
        if item is None:
            return None
        handler = dispatch(self._handlers, field)
        shaped = field.get_query_callback()(dict(constraints or {}))
        return await handler(item, field, shaped)

    async def _load_one(self, item: Any, field: RelationshipDescriptor, constraints: Any) -> Any:
        return await call_backend(self.backend.load, field, item, constraints)

    async def _load_many(self, item: Any, field: RelationshipDescriptor, constraints: Any) -> list[Any]:
        loaded = await call_backend(self.backend.load, field, item, constraints)
        return list(loaded or [])

    async def _load_morph(self, item: Any, field: RelationshipDescriptor, constraints: Any) -> Any:
        field.validate_types()
        return await self._load_one(item, field, constraints)


# The End
