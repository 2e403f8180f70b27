# -*- coding: utf-8 -*-
"""
display

Human readable text for related records.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from ..core.types import RelationshipKind
from ..utils.attributes import resolver
from .base import RelationshipDescriptor, dispatch
from .title import extract_fallback_title


class RelationshipDisplay:
    """Render related records through the field's display key."""

    separator = ", "

    def __init__(self, field: RelationshipDescriptor) -> None:
        self.field = field
        self._handlers = {
            RelationshipKind.BELONGS_TO: self._display_one,
            RelationshipKind.HAS_MANY: self._display_many,
            RelationshipKind.HAS_ONE: self._display_one,
            RelationshipKind.BELONGS_TO_MANY: self._display_many,
            RelationshipKind.MORPH_TO: self._display_morph,
            RelationshipKind.MORPH_TO_MANY: self._display_many,
        }

    def get_display_value(self, item: Any) -> str:
        if item is None:
            return ""
        handler = dispatch(self._handlers, self.field)
        return handler(item)

    def get_display_values(self, items: Iterable[Any] | None) -> list[str]:
        if not items:
            return []
        return [self.get_display_value(item) for item in items]

    def format_display_value(self, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    def _display_one(self, item: Any) -> str:
        # already extracted {"id", "title"} payloads
        if isinstance(item, Mapping) and "title" in item and "id" in item:
            return self.format_display_value(item["title"] or item["id"])
        value, found = resolver.resolve(item, self.field.get_display_key())
        if found and value not in (None, ""):
            return self.format_display_value(value)
        return extract_fallback_title(item)

    def _display_many(self, item: Any) -> str:
        if isinstance(item, (list, tuple)):
            return self.separator.join(self._display_one(entry) for entry in item if entry is not None)
        return self._display_one(item)

    def _display_morph(self, item: Any) -> str:
        if isinstance(item, Mapping) and "type" in item and "id" in item:
            morph_type = str(item["type"] or "")
            slug = self.field.get_types().get(morph_type, morph_type)
            label = slug[:1].upper() + slug[1:]
            return f"{label} #{self.format_display_value(item['id'])}".strip()
        return self._display_one(item)


# The End
