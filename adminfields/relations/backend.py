# -*- coding: utf-8 -*-
"""
backend

Persistence collaborator used by the relationship facades.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

from ..core.exceptions import AdminFieldsError, BackendUnavailableError

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


@runtime_checkable
class RelationshipBackend(Protocol):
    """Protocol describing the storage operations relationship facades need."""

    async def exists(self, field: Any, value: Any) -> bool:  # pragma: no cover - structural
        """Return whether a related record identified by ``value`` exists."""

    async def load(
        self, field: Any, item: Any, constraints: Mapping[str, Any] | None = None
    ) -> Any:  # pragma: no cover - structural
        """Return the related record(s) of ``item``."""

    async def load_many(self, field: Any, items: Sequence[Any]) -> None:  # pragma: no cover - structural
        """Attach related records to every item in one round trip."""

    async def count(self, field: Any, item: Any) -> int:  # pragma: no cover - structural
        """Return the number of records related to ``item``."""

    async def query(
        self,
        field: Any,
        *,
        sorts: Mapping[str, str] | None = None,
        filters: Mapping[str, Any] | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Any]:  # pragma: no cover - structural
        """Return related records matching ``filters``, ordered by ``sorts``."""

    async def search(
        self, field: Any, term: str, columns: Sequence[str]
    ) -> list[Any]:  # pragma: no cover - structural
        """Return related records whose ``columns`` contain ``term``."""


class NullRelationshipBackend:
    """Backend with no storage behind it; every lookup comes back empty."""

    async def exists(self, field: Any, value: Any) -> bool:
        return True

    async def load(
        self, field: Any, item: Any, constraints: Mapping[str, Any] | None = None
    ) -> Any:
        return None

    async def load_many(self, field: Any, items: Sequence[Any]) -> None:
        return None

    async def count(self, field: Any, item: Any) -> int:
        return 0

    async def query(
        self,
        field: Any,
        *,
        sorts: Mapping[str, str] | None = None,
        filters: Mapping[str, Any] | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Any]:
        return []

    async def search(self, field: Any, term: str, columns: Sequence[str]) -> list[Any]:
        return []


async def call_backend(
    operation: Callable[..., Awaitable[_T]], *args: Any, **kwargs: Any
) -> _T:
    """Await a backend operation, reporting storage failures uniformly."""

    try:
        return await operation(*args, **kwargs)
    except AdminFieldsError:
        raise
    except Exception as exc:
        name = getattr(operation, "__name__", repr(operation))
        logger.warning("Relationship backend call %s failed: %s", name, exc)
        raise BackendUnavailableError(f"relationship backend failed during {name}: {exc}") from exc


# The End
