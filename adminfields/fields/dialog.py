# -*- coding: utf-8 -*-
"""
dialog

Modal dialog field holding either a plain form or a multi-step wizard.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable

from pydantic import field_validator

from ..conf import DIALOG_SIZES, current_settings
from ..schema.descriptors import DialogStep
from .base import FieldDescriptor
from .registry import registry


class DialogContentType(str, Enum):
    FORM = "form"
    WIZARD = "wizard"


@registry.register("dialog")
class DialogField(FieldDescriptor):
    """
    Dialog Field

    ``content`` switches the dialog to a simple form, ``wizard`` to a sequence
    of steps. Only the active content is serialized.
    """

    default_open: bool = False
    trigger_button: str = ""
    trigger_icon: str = ""
    content_type: DialogContentType = DialogContentType.FORM
    content_fields: tuple[FieldDescriptor, ...] = ()
    steps: tuple[DialogStep, ...] = ()
    dialog_title: str = ""
    dialog_desc: str = ""
    dialog_size: str = "md"
    complete_callback: Callable[..., Any] | None = None
    skip_callback: Callable[..., Any] | None = None

    def __init__(self, name: str, key: str | None = None, /, **data: Any) -> None:
        data.setdefault("dialog_size", current_settings().default_dialog_size)
        super().__init__(name, key, **data)

    @field_validator("dialog_size")
    @classmethod
    def _known_size(cls, value: str) -> str:
        if value not in DIALOG_SIZES:
            raise ValueError(f"dialog size must be one of {', '.join(DIALOG_SIZES)}")
        return value

    def open_by_default(self, is_open: bool = True) -> "DialogField":
        return self._with(default_open=is_open)

    def with_trigger_button(self, text: str) -> "DialogField":
        return self._with(trigger_button=text)

    def with_trigger_icon(self, icon: str) -> "DialogField":
        return self._with(trigger_icon=icon)

    def content(self, fields: Iterable[FieldDescriptor]) -> "DialogField":
        return self._with(content_type=DialogContentType.FORM, content_fields=tuple(fields))

    def wizard(self, steps: Iterable[DialogStep]) -> "DialogField":
        return self._with(content_type=DialogContentType.WIZARD, steps=tuple(steps))

    def with_title(self, title: str) -> "DialogField":
        return self._with(dialog_title=title)

    def with_description(self, description: str) -> "DialogField":
        return self._with(dialog_desc=description)

    def with_size(self, size: str) -> "DialogField":
        """
        Return a copy with ``size`` as the dialog size.

        Raises ``ValueError`` for sizes outside ``DIALOG_SIZES``. Copies skip
        pydantic validation, so the check is repeated here.
        """
        if size not in DIALOG_SIZES:
            raise ValueError(f"dialog size must be one of {', '.join(DIALOG_SIZES)}")
        return self._with(dialog_size=size)

    def on_complete(self, fn: Callable[..., Any]) -> "DialogField":
        return self._with(complete_callback=fn)

    def on_skip(self, fn: Callable[..., Any]) -> "DialogField":
        return self._with(skip_callback=fn)

    def json_serialize(self) -> dict[str, Any]:
        payload = super().json_serialize()
        payload.update(
            {
                "defaultOpen": self.default_open,
                "triggerButton": self.trigger_button,
                "triggerIcon": self.trigger_icon,
                "contentType": self.content_type.value,
                "dialogTitle": self.dialog_title,
                "dialogDesc": self.dialog_desc,
                "dialogSize": self.dialog_size,
            }
        )
        if self.content_type is DialogContentType.FORM and self.content_fields:
            payload["fields"] = [field.json_serialize() for field in self.content_fields]
        if self.content_type is DialogContentType.WIZARD and self.steps:
            payload["steps"] = [
                {
                    "index": step.index,
                    "title": step.title,
                    "description": step.description,
                    "fields": [field.json_serialize() for field in step.fields],
                    "can_skip": step.can_skip,
                }
                for step in self.steps
            ]
        return payload


# The End
