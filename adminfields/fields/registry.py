# -*- coding: utf-8 -*-
"""
registry

Field registry.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Type

from ..core.types import ElementType
from .base import FieldDescriptor


class FieldRegistry:
    """Map frontend view components to the descriptor classes that emit them."""

    def __init__(self) -> None:
        self._by_view: Dict[str, Type[FieldDescriptor]] = {}

    def register(self, view: str, data_type: ElementType | None = None):
        """Decorator to register a field class under its view component."""
        def _decorator(cls: Type[FieldDescriptor]) -> Type[FieldDescriptor]:
            if view in self._by_view and self._by_view[view] is not cls:
                raise ValueError(f"view '{view}' is already registered")
            cls.view = view
            if data_type is not None:
                cls.data_type = data_type
            self._by_view[view] = cls
            return cls
        return _decorator

    def get(self, view: str) -> Type[FieldDescriptor] | None:
        return self._by_view.get(view)

    def create(self, view: str, name: str, *args: Any, **config: Any) -> FieldDescriptor:
        """Instantiate the field registered for ``view``.

        Positional ``args`` follow ``name`` in the class constructor, e.g. the
        key and the related resource of relationship fields.
        """
        cls = self.get(view)
        if cls is None:
            raise KeyError(f"no field registered for view '{view}'")
        return cls(name, *args, **config)

    def __contains__(self, view: object) -> bool:
        return view in self._by_view

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_view)

    def views(self) -> list[str]:
        return sorted(self._by_view)


registry = FieldRegistry()

# The End
