# -*- coding: utf-8 -*-
"""
base

Base field descriptor.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field as PField, field_validator

from ..conf import current_settings
from ..core.types import ElementContext, ElementType, VisibilityContext, is_visible_in_context
from ..schema.descriptors import (
    AttachmentOptions,
    FieldUpdate,
    RepeaterOptions,
    RichTextOptions,
    ValidationRule,
)
from ..utils.attributes import resolver
from ..validation import rules as rule_factory

_F = TypeVar("_F", bound="FieldDescriptor")

VisibilityFunc = Callable[[Any], bool]
ValueCallback = Callable[[Any], Any]
# (field, form_data, request) -> FieldUpdate | None
DependencyCallback = Callable[..., Optional[FieldUpdate]]

ALL_CONTEXTS = "*"


def default_key(name: str) -> str:
    """Derive the data key from a display name (``"Full Name"`` -> ``"full_name"``)."""
    return name.replace(" ", "_").lower()


class FieldDescriptor(BaseModel):
    """
    Base Field Descriptor

    Describes how one record attribute is displayed, edited, validated and
    serialized. Descriptors are immutable: every fluent setter returns a new
    descriptor, so a definition shared between requests can't be altered by
    one of them.

    ``view`` and ``data_type`` are class-level and assigned when the class is
    registered in :data:`adminfields.fields.registry.registry`.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    view: ClassVar[str] = "field"
    data_type: ClassVar[ElementType | None] = None

    name: str
    key: str
    data: Any = None
    context: ElementContext | None = None
    props: dict[str, Any] = PField(default_factory=dict)

    is_read_only: bool = False
    is_disabled: bool = False
    is_immutable: bool = False
    is_required: bool = False
    is_nullable: bool = False
    is_filterable: bool = False
    is_sortable: bool = False
    is_searchable: bool = False
    is_stacked: bool = False
    text_align: str = "left"

    placeholder_text: str = ""
    label_text: str = ""
    help_text_content: str = ""

    visibility_callback: VisibilityFunc | None = None
    storage_callback: Callable[..., Any] | None = None
    resolve_callback: ValueCallback | None = None
    modify_callback: ValueCallback | None = None
    display_callback: ValueCallback | None = None

    validation_rules: tuple[ValidationRule, ...] = ()
    suggestion_items: tuple[Any, ...] = ()
    depends_on_fields: tuple[str, ...] = ()
    dependency_callbacks: dict[str, DependencyCallback] = PField(default_factory=dict)
    attachment: AttachmentOptions | None = None
    repeater: RepeaterOptions | None = None
    rich_text: RichTextOptions | None = None
    badge_colors: dict[str, str] | None = None
    is_pivot: bool = False

    def __init__(self, name: str, key: str | None = None, /, **data: Any) -> None:
        data.setdefault("label_text", name)
        data.setdefault("text_align", current_settings().default_text_align)
        super().__init__(name=name, key=key or default_key(name), **data)

    @field_validator("key")
    @classmethod
    def _key_not_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("field key must not be empty")
        return value

    def _with(self: _F, **changes: Any) -> _F:
        return self.model_copy(update=changes)

    # === Context ===
    def set_context(self: _F, context: ElementContext | str) -> _F:
        return self._with(context=ElementContext(context))

    def on_list(self: _F) -> _F:
        return self.set_context(ElementContext.SHOW_ON_LIST)

    def on_detail(self: _F) -> _F:
        return self.set_context(ElementContext.SHOW_ON_DETAIL)

    def on_form(self: _F) -> _F:
        return self.set_context(ElementContext.SHOW_ON_FORM)

    def hide_on_list(self: _F) -> _F:
        return self.set_context(ElementContext.HIDE_ON_LIST)

    def hide_on_detail(self: _F) -> _F:
        return self.set_context(ElementContext.HIDE_ON_DETAIL)

    def hide_on_create(self: _F) -> _F:
        return self.set_context(ElementContext.HIDE_ON_CREATE)

    def hide_on_update(self: _F) -> _F:
        return self.set_context(ElementContext.HIDE_ON_UPDATE)

    def only_on_list(self: _F) -> _F:
        return self.set_context(ElementContext.ONLY_ON_LIST)

    def only_on_detail(self: _F) -> _F:
        return self.set_context(ElementContext.ONLY_ON_DETAIL)

    def only_on_create(self: _F) -> _F:
        return self.set_context(ElementContext.ONLY_ON_CREATE)

    def only_on_update(self: _F) -> _F:
        return self.set_context(ElementContext.ONLY_ON_UPDATE)

    def only_on_form(self: _F) -> _F:
        return self.set_context(ElementContext.ONLY_ON_FORM)

    # === Flags ===
    def read_only(self: _F) -> _F:
        return self._with(is_read_only=True)

    def disabled(self: _F) -> _F:
        return self._with(is_disabled=True)

    def immutable(self: _F) -> _F:
        return self._with(is_immutable=True)

    def required(self: _F) -> _F:
        return self._with(is_required=True)

    def nullable(self: _F) -> _F:
        return self._with(is_nullable=True)

    def filterable(self: _F) -> _F:
        return self._with(is_filterable=True)

    def sortable(self: _F) -> _F:
        return self._with(is_sortable=True)

    def searchable(self: _F) -> _F:
        return self._with(is_searchable=True)

    def stacked(self: _F) -> _F:
        return self._with(is_stacked=True)

    def set_text_align(self: _F, align: str) -> _F:
        return self._with(text_align=align)

    def placeholder(self: _F, text: str) -> _F:
        return self._with(placeholder_text=text)

    def label(self: _F, text: str) -> _F:
        return self._with(label_text=text)

    def help_text(self: _F, text: str) -> _F:
        return self._with(help_text_content=text)

    def with_props(self: _F, key: str, value: Any) -> _F:
        return self._with(props={**self.props, key: value})

    def options(self: _F, options: Any) -> _F:
        return self.with_props("options", options)

    def default(self: _F, value: Any) -> _F:
        return self._with(data=value)

    # === Callbacks ===
    def can_see(self: _F, fn: VisibilityFunc) -> _F:
        return self._with(visibility_callback=fn)

    def store_as(self: _F, fn: Callable[..., Any]) -> _F:
        return self._with(storage_callback=fn)

    def resolve(self: _F, fn: ValueCallback) -> _F:
        return self._with(resolve_callback=fn)

    def modify(self: _F, fn: ValueCallback) -> _F:
        return self._with(modify_callback=fn)

    def display_using(self: _F, fn: ValueCallback) -> _F:
        return self._with(display_callback=fn)

    # === Extension blocks ===
    def rules(self: _F, *rules: ValidationRule) -> _F:
        return self._with(validation_rules=tuple(rules))

    def add_rule(self: _F, rule: ValidationRule) -> _F:
        return self._with(validation_rules=(*self.validation_rules, rule))

    def min_value(self: _F, bound: int | float) -> _F:
        return self.add_rule(rule_factory.min_value(bound))

    def max_value(self: _F, bound: int | float) -> _F:
        return self.add_rule(rule_factory.max_value(bound))

    def min_length(self: _F, length: int) -> _F:
        return self.add_rule(rule_factory.min_length(length))

    def max_length(self: _F, length: int) -> _F:
        return self.add_rule(rule_factory.max_length(length))

    def pattern(self: _F, regex: str) -> _F:
        return self.add_rule(rule_factory.pattern(regex))

    def suggestions(self: _F, items: list[Any]) -> _F:
        return self._with(suggestion_items=tuple(items))

    def depends_on(self: _F, *keys: str) -> _F:
        return self._with(depends_on_fields=tuple(keys))

    def on_dependency_change(
        self: _F, callback: DependencyCallback, context: str | None = None
    ) -> _F:
        """Register ``callback`` for ``context`` (``None`` means every context)."""
        slot = context or ALL_CONTEXTS
        return self._with(dependency_callbacks={**self.dependency_callbacks, slot: callback})

    def as_pivot(self: _F) -> _F:
        return self._with(is_pivot=True)

    # === Readers ===
    def get_dependency_callback(self, context: str) -> DependencyCallback | None:
        return self.dependency_callbacks.get(context) or self.dependency_callbacks.get(ALL_CONTEXTS)

    def is_visible(self, request: Any = None) -> bool:
        if self.visibility_callback is not None:
            return bool(self.visibility_callback(request))
        return True

    def is_visible_in_context(self, context: VisibilityContext | str) -> bool:
        return is_visible_in_context(self.context, context)

    def validate_value(self, value: Any) -> list[str]:
        """Run the field's rules against ``value`` and return every failure message."""
        rules = list(self.validation_rules)
        if self.is_required and not any(rule.name == "required" for rule in rules):
            rules.insert(0, rule_factory.required())
        return rule_factory.collect_validation_errors(rules, value)

    # === Data ===
    def resolve_value(self, record: Any) -> Any:
        value, _found = resolver.resolve(record, self.key)
        return value

    def extract(self: _F, record: Any) -> _F:
        """Return a copy holding the value of ``key`` read from ``record``."""
        return self._with(data=self.resolve_value(record))

    def json_serialize(self) -> dict[str, Any]:
        return {
            "view": self.view,
            "type": self.data_type.value if self.data_type is not None else "",
            "key": self.key,
            "name": self.name,
            "data": self.data,
            "props": dict(self.props),
            "context": self.context.value if self.context is not None else "",
            "placeholder": self.placeholder_text,
            "label": self.label_text,
            "help_text": self.help_text_content,
            "read_only": self.is_read_only,
            "disabled": self.is_disabled,
            "required": self.is_required,
            "nullable": self.is_nullable,
            "sortable": self.is_sortable,
            "filterable": self.is_filterable,
            "stacked": self.is_stacked,
            "text_align": self.text_align,
        }


# The End
