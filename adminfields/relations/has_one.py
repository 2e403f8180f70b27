# -*- coding: utf-8 -*-
"""
has_one

One-to-one association owned by the related table.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from ..core.types import ElementType, RelationshipKind
from ..fields.registry import registry
from .has_many import _HasRelation


@registry.register("has-one-field", ElementType.RELATIONSHIP)
class HasOneField(_HasRelation):

    relationship_kind = RelationshipKind.HAS_ONE

    def resolve_relationship(self, item: Any) -> Any:
        return None


# The End
