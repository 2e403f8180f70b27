# -*- coding: utf-8 -*-
"""
repeater

Field holding a list of rows, each described by the same nested fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from ..core.types import ElementType
from ..schema.descriptors import RepeaterOptions
from .base import FieldDescriptor
from .registry import registry


@registry.register("repeater-field", ElementType.REPEATER)
class RepeaterField(FieldDescriptor):
    """Rows are read from a list attribute of the record.

    Each row is reduced to a mapping of nested field keys to their values so
    the client receives plain JSON regardless of how rows are stored.
    """

    row_fields: tuple[FieldDescriptor, ...] = ()

    def fields(self, *fields: FieldDescriptor) -> "RepeaterField":
        return self._with(row_fields=tuple(fields))

    def _bounds(self) -> RepeaterOptions:
        return self.repeater or RepeaterOptions()

    def min_items(self, count: int) -> "RepeaterField":
        return self._with(repeater=self._bounds().model_copy(update={"min_items": max(0, count)}))

    def max_items(self, count: int) -> "RepeaterField":
        return self._with(repeater=self._bounds().model_copy(update={"max_items": count}))

    def resolve_value(self, record: Any) -> Any:
        rows = super().resolve_value(record)
        if rows is None or not self.row_fields:
            return rows
        return [
            {field.key: field.resolve_value(row) for field in self.row_fields}
            for row in rows
        ]

    def validate_value(self, value: Any) -> list[str]:
        errors = super().validate_value(value)
        count = len(value) if isinstance(value, (list, tuple)) else 0
        bounds = self._bounds()
        if count < bounds.min_items:
            errors.append(f"At least {bounds.min_items} items are required")
        if bounds.max_items is not None and count > bounds.max_items:
            errors.append(f"At most {bounds.max_items} items are allowed")
        return errors

    def json_serialize(self) -> dict[str, Any]:
        payload = super().json_serialize()
        payload["fields"] = [field.json_serialize() for field in self.row_fields]
        bounds = self._bounds()
        payload["repeater"] = {"min_items": bounds.min_items, "max_items": bounds.max_items}
        return payload


# The End
