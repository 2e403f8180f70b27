# -*- coding: utf-8 -*-
"""
text

Text-like input fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from ..core.types import ElementContext, ElementType
from .base import FieldDescriptor
from .registry import registry


@registry.register("id-field")
class IDField(FieldDescriptor):
    """Primary key column, shown on the list view only."""

    def __init__(self, name: str = "ID", key: str | None = None, /, **data: Any) -> None:
        data.setdefault("context", ElementContext.ONLY_ON_LIST)
        super().__init__(name, key or "id", **data)


@registry.register("text-field", ElementType.TEXT)
class TextField(FieldDescriptor):
    pass


@registry.register("textarea-field", ElementType.TEXTAREA)
class TextareaField(FieldDescriptor):

    def rows(self, count: int) -> "TextareaField":
        return self.with_props("rows", max(1, int(count)))


@registry.register("password-field", ElementType.PASSWORD)
class PasswordField(FieldDescriptor):
    pass


@registry.register("number-field", ElementType.NUMBER)
class NumberField(FieldDescriptor):

    def step(self, value: int | float) -> "NumberField":
        return self.with_props("step", value)


@registry.register("email-field", ElementType.EMAIL)
class EmailField(FieldDescriptor):
    pass


@registry.register("tel-field", ElementType.TEL)
class TelField(FieldDescriptor):
    pass


@registry.register("code-field", ElementType.CODE)
class CodeField(FieldDescriptor):

    def language(self, name: str) -> "CodeField":
        return self.with_props("language", name)


@registry.register("color-field", ElementType.COLOR)
class ColorField(FieldDescriptor):
    pass


# The End
