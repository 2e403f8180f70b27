# -*- coding: utf-8 -*-
"""
descriptors

Value objects attached to field descriptors.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field as PField


class ValidationRule(BaseModel):
    """A named rule with its parameters and the message shown on failure."""

    model_config = ConfigDict(frozen=True)

    name: str
    parameters: tuple[Any, ...] = ()
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "parameters": list(self.parameters),
            "message": self.message,
        }


class FieldUpdate(BaseModel):
    """Changes a dependency callback wants applied to a dependent field.

    Only attributes that were explicitly set are transmitted, so the frontend
    can merge the update over the field's current state.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    visible: bool | None = None
    read_only: bool | None = PField(default=None, alias="readonly")
    required: bool | None = None
    disabled: bool | None = None
    help_text: str | None = PField(default=None, alias="helpText")
    placeholder: str | None = None
    options: dict[str, Any] | None = None
    value: Any = None
    rules: tuple[ValidationRule, ...] | None = None

    def show(self) -> "FieldUpdate":
        return self.model_copy(update={"visible": True})

    def hide(self) -> "FieldUpdate":
        return self.model_copy(update={"visible": False})

    def make_read_only(self) -> "FieldUpdate":
        return self.model_copy(update={"read_only": True})

    def make_editable(self) -> "FieldUpdate":
        return self.model_copy(update={"read_only": False})

    def make_required(self) -> "FieldUpdate":
        return self.model_copy(update={"required": True})

    def make_optional(self) -> "FieldUpdate":
        return self.model_copy(update={"required": False})

    def enable(self) -> "FieldUpdate":
        return self.model_copy(update={"disabled": False})

    def disable(self) -> "FieldUpdate":
        return self.model_copy(update={"disabled": True})

    def set_help_text(self, text: str) -> "FieldUpdate":
        return self.model_copy(update={"help_text": text})

    def set_placeholder(self, text: str) -> "FieldUpdate":
        return self.model_copy(update={"placeholder": text})

    def set_options(self, options: dict[str, Any]) -> "FieldUpdate":
        return self.model_copy(update={"options": dict(options)})

    def set_value(self, value: Any) -> "FieldUpdate":
        return self.model_copy(update={"value": value})

    def set_rules(self, rules: list[ValidationRule]) -> "FieldUpdate":
        return self.model_copy(update={"rules": tuple(rules)})

    def add_rule(self, rule: ValidationRule) -> "FieldUpdate":
        return self.model_copy(update={"rules": (*(self.rules or ()), rule)})

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON payload with unset attributes omitted."""
        payload = self.model_dump(by_alias=True, exclude_none=True, exclude={"rules"})
        if self.rules:
            payload["rules"] = [rule.to_dict() for rule in self.rules]
        return payload


class AttachmentOptions(BaseModel):
    """Upload constraints for file-like fields."""

    model_config = ConfigDict(frozen=True)

    accepted_types: tuple[str, ...] = ()
    max_size: int | None = None
    disk: str | None = None
    path: str | None = None


class RepeaterOptions(BaseModel):
    """Bounds on the number of nested rows a repeater accepts."""

    model_config = ConfigDict(frozen=True)

    min_items: int = 0
    max_items: int | None = None


class RichTextOptions(BaseModel):
    """Editor settings of rich-text fields."""

    model_config = ConfigDict(frozen=True)

    toolbar: tuple[str, ...] = ()
    height: int | None = None
    allow_images: bool = False


class DialogStep(BaseModel):
    """Single wizard step rendered inside a dialog field."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    index: int
    title: str
    description: str = ""
    fields: tuple[Any, ...] = ()
    can_skip: bool = False


class HoverCardOptions(BaseModel):
    """Preview card shown when hovering a related record."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    enabled: bool = True
    width: str = "md"
    open_delay: int = 200
    close_delay: int = 300
    resolver: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "width": self.width,
            "open_delay": self.open_delay,
            "close_delay": self.close_delay,
        }


class Tab(BaseModel):
    """Tab of a tabs layout field."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: str
    label: str
    fields: tuple[Any, ...] = ()


# The End
