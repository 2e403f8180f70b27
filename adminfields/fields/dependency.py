# -*- coding: utf-8 -*-
"""
dependency

Resolve field updates triggered by changes to other fields of a form.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Iterable, Mapping

from ..core.exceptions import CircularDependencyError
from ..schema.descriptors import FieldUpdate
from .base import FieldDescriptor

logger = logging.getLogger(__name__)


class DependencyResolver:
    """
    Dependency Resolver

    Fields declare the keys they depend on with ``depends_on``. When some keys
    change, every field reachable from them in the dependency graph is
    considered affected and its callback for the current context is invoked.
    """

    def __init__(self, fields: Iterable[FieldDescriptor], context: str) -> None:
        self.fields = list(fields)
        self.context = context
        self.logger = logger

    def build_dependency_graph(self) -> dict[str, list[str]]:
        """Map each key to the keys of the fields that depend on it."""
        graph: dict[str, list[str]] = {}
        for field in self.fields:
            for source in field.depends_on_fields:
                graph.setdefault(source, []).append(field.key)
        self.logger.debug("dependency graph for %s: %s", self.context, graph)
        return graph

    def find_affected_fields(
        self, graph: Mapping[str, list[str]], changed_fields: Iterable[str]
    ) -> list[str]:
        affected: list[str] = []
        visited: set[str] = set()
        queue = deque(changed_fields)
        while queue:
            current = queue.popleft()
            if current in visited:
                continue
            visited.add(current)
            for dependent in graph.get(current, ()):
                if dependent not in affected:
                    affected.append(dependent)
                if dependent not in visited:
                    queue.append(dependent)
        return affected

    def find_field(self, key: str) -> FieldDescriptor | None:
        for field in self.fields:
            if field.key == key:
                return field
        return None

    def resolve_dependencies(
        self,
        form_data: Mapping[str, Any],
        changed_fields: Iterable[str],
        request: Any = None,
    ) -> dict[str, FieldUpdate]:
        changed = list(changed_fields)
        self.logger.debug(
            "resolving dependencies context=%s changed=%s fields=%d",
            self.context,
            changed,
            len(self.fields),
        )
        graph = self.build_dependency_graph()
        updates: dict[str, FieldUpdate] = {}
        for key in self.find_affected_fields(graph, changed):
            field = self.find_field(key)
            if field is None:
                self.logger.debug("skipping unknown dependent field %s", key)
                continue
            callback = field.get_dependency_callback(self.context)
            if callback is None:
                self.logger.debug("field %s has no callback for %s", key, self.context)
                continue
            update = callback(field, form_data, request)
            if update is not None:
                updates[key] = update
        self.logger.debug("resolved %d update(s) for %s", len(updates), self.context)
        return updates

    def detect_circular_dependencies(self) -> None:
        """Raise :class:`CircularDependencyError` if the graph has a cycle."""
        graph = self.build_dependency_graph()
        visited: set[str] = set()
        on_stack: set[str] = set()

        def has_cycle(key: str) -> bool:
            visited.add(key)
            on_stack.add(key)
            for dependent in graph.get(key, ()):
                if dependent not in visited:
                    if has_cycle(dependent):
                        return True
                elif dependent in on_stack:
                    return True
            on_stack.discard(key)
            return False

        for field in self.fields:
            if field.key not in visited and has_cycle(field.key):
                self.logger.warning("circular dependency involving field %s", field.key)
                raise CircularDependencyError(field.key)


# The End
