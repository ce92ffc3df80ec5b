"""Application export – ports for the collaborators the pipeline depends on.

Adapters implement these against the real event store, link database and
folder ACL service; :mod:`event_export.testing.fakes` provides in-memory
versions.
"""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Mapping, Protocol, Sequence

from event_export.kernel.types import Domain, EventRecord, EventType, Link, Workspace


@dataclasses.dataclass(frozen=True)
class EventQuery:
    """Filter handed to :class:`EventSource`.

    ``folder_id`` is the explicit folder filter only; ``None`` means no
    explicit folder and the source scopes by ``folder_ids`` instead.  When
    ``folder_ids`` is ``None`` too, a single folder has already been
    authorised (through ``link_id`` or ``folder_id``).
    """

    workspace_id: str
    event_type: EventType
    start: datetime
    end: datetime
    limit: int
    link_id: str | None = None
    folder_id: str | None = None
    folder_ids: frozenset[str] | None = None
    filters: Mapping[str, str] = dataclasses.field(default_factory=dict)
    timezone: str | None = None


class EventSource(Protocol):
    """Port: the analytics event store."""

    async def fetch_events(self, query: EventQuery) -> Sequence[EventRecord]:
        """Return at most ``query.limit`` records, newest first."""
        ...


class DomainResolver(Protocol):
    async def get_domain(self, workspace: Workspace, slug: str) -> Domain | None: ...


class LinkResolver(Protocol):
    async def get_link(self, workspace_id: str, domain: str, key: str) -> Link | None: ...


class FolderPermissions(Protocol):
    """Port: folder-level access control."""

    async def has_permission(
        self, workspace: Workspace, user_id: str, folder_id: str, permission: str
    ) -> bool: ...

    async def readable_folder_ids(self, workspace: Workspace, user_id: str) -> frozenset[str]:
        """Folders *user_id* may read; used to scope workspace-wide exports."""
        ...


__all__ = [
    "DomainResolver",
    "EventQuery",
    "EventSource",
    "FolderPermissions",
    "LinkResolver",
]
