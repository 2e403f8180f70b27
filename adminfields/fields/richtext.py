# -*- coding: utf-8 -*-
"""
richtext

WYSIWYG editor field.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from ..core.types import ElementType
from ..schema.descriptors import RichTextOptions
from .base import FieldDescriptor
from .registry import registry


@registry.register("richtext-field", ElementType.RICHTEXT)
class RichTextField(FieldDescriptor):
    """Rich text editor with an optional toolbar and height."""

    def _editor(self) -> RichTextOptions:
        return self.rich_text or RichTextOptions()

    def toolbar(self, *items: str) -> "RichTextField":
        return self._with(rich_text=self._editor().model_copy(update={"toolbar": tuple(items)}))

    def editor_height(self, pixels: int) -> "RichTextField":
        return self._with(rich_text=self._editor().model_copy(update={"height": pixels}))

    def allow_images(self, allowed: bool = True) -> "RichTextField":
        return self._with(rich_text=self._editor().model_copy(update={"allow_images": allowed}))

    def json_serialize(self) -> dict[str, Any]:
        payload = super().json_serialize()
        if self.rich_text is not None:
            payload["editor"] = {
                "toolbar": list(self.rich_text.toolbar),
                "height": self.rich_text.height,
                "allowImages": self.rich_text.allow_images,
            }
        return payload


# The End
