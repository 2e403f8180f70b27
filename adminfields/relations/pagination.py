# -*- coding: utf-8 -*-
"""
pagination

Page through related records.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from .backend import NullRelationshipBackend, RelationshipBackend, call_backend
from .base import RelationshipDescriptor

DEFAULT_PER_PAGE = 15
MAX_PER_PAGE = 100


class RelationshipPagination:
    """Keeps the current page window and the total reported by the backend."""

    def __init__(
        self, field: RelationshipDescriptor, backend: RelationshipBackend | None = None
    ) -> None:
        self.field = field
        self.backend = backend or NullRelationshipBackend()
        self.page = 1
        self.per_page = DEFAULT_PER_PAGE
        self.total = 0

    async def apply_pagination(self, page: int, per_page: int, item: Any = None) -> list[Any]:
        self.page = max(page, 1)
        if per_page < 1:
            per_page = DEFAULT_PER_PAGE
        self.per_page = min(per_page, MAX_PER_PAGE)
        self.total = max(int(await call_backend(self.backend.count, self.field, item) or 0), 0)
        results = await call_backend(
            self.backend.query,
            self.field,
            offset=(self.page - 1) * self.per_page,
            limit=self.per_page,
        )
        return list(results or [])

    def set_total(self, total: int) -> None:
        self.total = max(total, 0)

    def page_info(self) -> dict[str, int]:
        total_pages = (self.total + self.per_page - 1) // self.per_page if self.per_page else 0
        return {
            "current_page": self.page,
            "per_page": self.per_page,
            "total": self.total,
            "total_pages": total_pages,
            "from": (self.page - 1) * self.per_page,
            "to": self.page * self.per_page,
        }


# The End
