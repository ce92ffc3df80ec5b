"""Testing fakes – in-memory doubles for the export ports.

Every fake counts its calls so tests can assert that a rejected export never
reached a lookup or the event store.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from event_export.application.export.ports import EventQuery
from event_export.kernel.security import permission_matches
from event_export.kernel.types import Domain, EventRecord, Link, Workspace


class InMemoryEventSource:
    """Returns the configured records, newest first, honouring ``limit``.

    Set ``error`` to make every fetch raise it.
    """

    def __init__(
        self,
        records: Iterable[EventRecord] = (),
        *,
        error: Exception | None = None,
    ) -> None:
        self._records = list(records)
        self.error = error
        self.calls = 0
        self.queries: list[EventQuery] = []

    async def fetch_events(self, query: EventQuery) -> Sequence[EventRecord]:
        self.calls += 1
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        matching = [
            r
            for r in self._records
            if r.event_type == query.event_type and query.start <= r.timestamp <= query.end
        ]
        if query.link_id is not None:
            matching = [r for r in matching if r.link_id == query.link_id]
        matching.sort(key=lambda r: r.timestamp, reverse=True)
        return matching[: query.limit]

    @property
    def last_query(self) -> EventQuery | None:
        return self.queries[-1] if self.queries else None


class InMemoryDomainResolver:
    def __init__(self, *slugs: str) -> None:
        self._domains = {slug: Domain(slug=slug, id=f"dom_{slug}") for slug in slugs}
        self.calls = 0

    async def get_domain(self, workspace: Workspace, slug: str) -> Domain | None:  # noqa: ARG002
        self.calls += 1
        return self._domains.get(slug)


class InMemoryLinkResolver:
    def __init__(self, *links: Link) -> None:
        self._links = {(link.domain, link.key): link for link in links}
        self.calls = 0

    async def get_link(self, workspace_id: str, domain: str, key: str) -> Link | None:  # noqa: ARG002
        self.calls += 1
        return self._links.get((domain, key))


class InMemoryFolderPermissions:
    """Folder ACL keyed by ``(user_id, folder_id)``.

    Permissions support the ``"folders.*"`` / ``"*"`` wildcards.
    """

    def __init__(self) -> None:
        self._grants: dict[tuple[str, str], set[str]] = {}
        self.permission_checks: list[tuple[str, str, str]] = []
        self.folder_set_calls = 0

    def grant(self, user_id: str, folder_id: str, *permissions: str) -> None:
        self._grants.setdefault((user_id, folder_id), set()).update(permissions or ("folders.read",))

    async def has_permission(
        self, workspace: Workspace, user_id: str, folder_id: str, permission: str  # noqa: ARG002
    ) -> bool:
        self.permission_checks.append((user_id, folder_id, permission))
        granted = self._grants.get((user_id, folder_id), set())
        return any(permission_matches(p, permission) for p in granted)

    async def readable_folder_ids(self, workspace: Workspace, user_id: str) -> frozenset[str]:  # noqa: ARG002
        self.folder_set_calls += 1
        return frozenset(
            folder_id
            for (uid, folder_id), perms in self._grants.items()
            if uid == user_id and any(permission_matches(p, "folders.read") for p in perms)
        )


__all__ = [
    "InMemoryDomainResolver",
    "InMemoryEventSource",
    "InMemoryFolderPermissions",
    "InMemoryLinkResolver",
]
