# -*- coding: utf-8 -*-
"""
validator

Validate submitted relationship values.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..core.exceptions import RelationshipError
from ..core.types import RelationshipKind
from .backend import NullRelationshipBackend, RelationshipBackend, call_backend
from .base import RelationshipDescriptor, dispatch

logger = logging.getLogger(__name__)


def _identifier(value: Any) -> Any:
    # the client may send the extracted {"id", "title"} payload back
    if isinstance(value, Mapping) and "id" in value:
        return value["id"]
    return value


class RelationshipValidator:
    """Check relationship values against the field definition and the backend."""

    def __init__(self, backend: RelationshipBackend | None = None) -> None:
        self.backend = backend or NullRelationshipBackend()
        self._handlers = {
            RelationshipKind.BELONGS_TO: self.validate_foreign_key,
            RelationshipKind.HAS_MANY: self._validate_owned,
            RelationshipKind.HAS_ONE: self._validate_owned,
            RelationshipKind.BELONGS_TO_MANY: self.validate_pivot,
            RelationshipKind.MORPH_TO: self.validate_morph_type,
            RelationshipKind.MORPH_TO_MANY: self.validate_morph_type,
        }

    async def validate(self, field: RelationshipDescriptor, value: Any) -> None:
        """Run the check matching the kind of ``field``."""
        handler = dispatch(self._handlers, field)
        logger.debug("Validating %s relationship %s", field.get_relationship_type(), field.key)
        await handler(field, value)

    async def validate_exists(self, field: RelationshipDescriptor, value: Any) -> None:
        if value is None:
            field.validate_relationship(None)
            return
        found = await call_backend(self.backend.exists, field, _identifier(value))
        if not found:
            raise RelationshipError(
                field.get_relationship_name(),
                field.relationship_kind,
                "Related resource does not exist",
                {"related_resource": field.get_related_resource(), "value": _identifier(value)},
            )

    async def validate_foreign_key(self, field: RelationshipDescriptor, value: Any) -> None:
        if isinstance(value, (list, tuple, set)):
            raise RelationshipError(
                field.get_relationship_name(),
                field.relationship_kind,
                "Foreign key must be a single value",
                {"foreign_key": field.get_foreign_key()},
            )
        await self.validate_exists(field, value)

    async def validate_pivot(self, field: RelationshipDescriptor, value: Any) -> None:
        if value is None:
            field.validate_relationship(None)
            return
        if not isinstance(value, (list, tuple, set)):
            raise RelationshipError(
                field.get_relationship_name(),
                field.relationship_kind,
                "Pivot value must be a list of identifiers",
                {"pivot_table": field.get_pivot_table()},
            )
        for entry in value:
            await self.validate_exists(field, entry)

    async def validate_morph_type(self, field: RelationshipDescriptor, value: Any) -> None:
        field.validate_types()
        if value is None:
            field.validate_relationship(None)
            return
        entries = value if isinstance(value, (list, tuple)) else [value]
        for entry in entries:
            if isinstance(entry, Mapping) and entry.get("type"):
                field.resource_for_type(str(entry["type"]))

    async def _validate_owned(self, field: RelationshipDescriptor, value: Any) -> None:
        # related rows point at the record, nothing is stored on it
        field.validate_relationship(value)


# The End
