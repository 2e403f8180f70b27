# -*- coding: utf-8 -*-
"""
dependencies

HTTP endpoint re-evaluating dependent fields while a form is edited.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

from ..conf import current_settings
from ..core.exceptions import CircularDependencyError
from ..fields.base import FieldDescriptor
from ..fields.dependency import DependencyResolver

FORM_CONTEXTS = ("create", "update")


class ResolveDependenciesRequest(BaseModel):
    """Current form state sent by the client after a field changed."""

    model_config = ConfigDict(populate_by_name=True)

    form_data: dict[str, Any] = Field(default_factory=dict, alias="formData")
    context: str
    changed_fields: list[str] = Field(default_factory=list, alias="changedFields")
    resource_id: Any = Field(default=None, alias="resourceId")


def iter_form_fields(fields: Iterable[FieldDescriptor]) -> Iterator[FieldDescriptor]:
    """Yield ``fields`` with the children of panels and tabs inlined."""

    for field in fields:
        get_fields = getattr(field, "get_fields", None)
        if callable(get_fields):
            yield from iter_form_fields(get_fields())
        else:
            yield field


class DependencyAPI:
    """API endpoint resolving field dependencies for one set of fields."""

    def __init__(self, fields: Iterable[FieldDescriptor], prefix: str | None = None) -> None:
        """Build the router serving ``POST <prefix>/fields/dependencies``."""

        self.logger = logging.getLogger(__name__)
        self.fields = list(iter_form_fields(fields))
        self.API_PREFIX = prefix if prefix is not None else current_settings().api_prefix
        self.DEPENDENCIES_PATH = f"{self.API_PREFIX}/fields/dependencies"

        self.router = APIRouter()
        self.router.post(
            self.DEPENDENCIES_PATH, name="adminfields.api.resolve_dependencies"
        )(self.resolve_dependencies)

    async def resolve_dependencies(
        self, payload: ResolveDependenciesRequest, request: Request
    ) -> dict[str, Any]:
        """Return the updates of every field affected by ``changedFields``."""

        if payload.context not in FORM_CONTEXTS:
            raise HTTPException(
                status_code=400, detail="Invalid context. Must be 'create' or 'update'"
            )
        resolver = DependencyResolver(self.fields, payload.context)
        try:
            resolver.detect_circular_dependencies()
        except CircularDependencyError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        updates = resolver.resolve_dependencies(
            payload.form_data, payload.changed_fields, request
        )
        self.logger.debug(
            "Resolved %d dependent field(s) for %s", len(updates), payload.changed_fields
        )
        return {"fields": {key: update.to_dict() for key, update in updates.items()}}


# The End
