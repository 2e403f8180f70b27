# -*- coding: utf-8 -*-
"""
choices

Boolean and option-based fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Mapping

from ..core.types import ElementType
from .base import FieldDescriptor
from .registry import registry


@registry.register("switch-field", ElementType.BOOLEAN)
class SwitchField(FieldDescriptor):
    pass


@registry.register("select-field", ElementType.SELECT)
class SelectField(FieldDescriptor):
    """Drop-down list; options are a ``value -> label`` mapping or a list."""

    def multiple(self) -> "SelectField":
        return self.with_props("multiple", True)


@registry.register("combobox-field", ElementType.SELECT)
class ComboboxField(SelectField):
    pass


@registry.register("badge-field", ElementType.BADGE)
class BadgeField(FieldDescriptor):
    """Read-only value rendered as a coloured badge."""

    def colors(self, mapping: Mapping[str, str]) -> "BadgeField":
        return self._with(badge_colors=dict(mapping))

    def json_serialize(self) -> dict[str, Any]:
        payload = super().json_serialize()
        if self.badge_colors:
            payload["badge"] = {"colors": dict(self.badge_colors)}
        return payload


@registry.register("boolean-group-field", ElementType.BOOLEAN_GROUP)
class BooleanGroupField(FieldDescriptor):
    pass


@registry.register("key-value-field", ElementType.KEY_VALUE)
class KeyValueField(FieldDescriptor):

    def key_label(self, text: str) -> "KeyValueField":
        return self.with_props("keyLabel", text)

    def value_label(self, text: str) -> "KeyValueField":
        return self.with_props("valueLabel", text)


# The End
