# -*- coding: utf-8 -*-
"""
layout

Grouping fields: panels and tabs.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from ..conf import current_settings
from ..core.types import ElementType
from ..schema.descriptors import Tab
from .base import FieldDescriptor
from .registry import registry


@registry.register("panel-field", ElementType.PANEL)
class PanelField(FieldDescriptor):
    """Titled group of fields laid out in up to ``max_panel_columns`` columns."""

    children: tuple[FieldDescriptor, ...] = ()

    def __init__(self, title: str, *fields: FieldDescriptor, **data: Any) -> None:
        data.setdefault("children", tuple(fields))
        super().__init__(title, **data)

    def with_description(self, description: str) -> "PanelField":
        return self.with_props("description", description)

    def with_columns(self, columns: int) -> "PanelField":
        upper = current_settings().max_panel_columns
        return self.with_props("columns", min(max(columns, 1), upper))

    def collapsible(self) -> "PanelField":
        return self.with_props("collapsible", True)

    def default_collapsed(self) -> "PanelField":
        return self.with_props("collapsible", True).with_props("defaultCollapsed", True)

    def get_fields(self) -> list[FieldDescriptor]:
        return list(self.children)

    def json_serialize(self) -> dict[str, Any]:
        payload = super().json_serialize()
        payload["fields"] = [field.json_serialize() for field in self.children]
        return payload


@registry.register("tabs-field", ElementType.TABS)
class TabsField(FieldDescriptor):
    """Fields split across tabs; only one tab is shown at a time."""

    tabs: tuple[Tab, ...] = ()

    def add_tab(self, value: str, label: str, *fields: FieldDescriptor) -> "TabsField":
        tab = Tab(value=value, label=label, fields=tuple(fields))
        return self._with(tabs=(*self.tabs, tab))

    def with_side(self, side: str) -> "TabsField":
        return self.with_props("side", side)

    def with_variant(self, variant: str) -> "TabsField":
        return self.with_props("variant", variant)

    def with_default_tab(self, value: str) -> "TabsField":
        return self.with_props("defaultTab", value)

    def get_fields(self) -> list[FieldDescriptor]:
        return [field for tab in self.tabs for field in tab.fields]

    def json_serialize(self) -> dict[str, Any]:
        payload = super().json_serialize()
        payload["tabs"] = [
            {
                "value": tab.value,
                "label": tab.label,
                "fields": [field.json_serialize() for field in tab.fields],
            }
            for tab in self.tabs
        ]
        return payload


# The End
