# -*- coding: utf-8 -*-
"""
search

Type-ahead search over related records.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .backend import NullRelationshipBackend, RelationshipBackend, call_backend
from .base import RelationshipDescriptor

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_COLUMNS = ("name", "title", "email")


class RelationshipSearch:

    def __init__(
        self, field: RelationshipDescriptor, backend: RelationshipBackend | None = None
    ) -> None:
        self.field = field
        self.backend = backend or NullRelationshipBackend()

    def get_searchable_columns(self) -> list[str]:
        return self.field.get_searchable_columns() or list(DEFAULT_SEARCH_COLUMNS)

    async def search(self, term: str) -> list[Any]:
        if not term or not term.strip():
            return []
        return await self.search_in_columns(term, self.get_searchable_columns())

    async def search_in_columns(self, term: str, columns: Sequence[str]) -> list[Any]:
        term = (term or "").strip()
        if not term or not columns:
            return []
        if not self.field.get_related_resource():
            return []
        logger.debug("Searching %s in %s", self.field.get_related_resource(), list(columns))
        results = await call_backend(self.backend.search, self.field, term, list(columns))
        return list(results or [])


# The End
