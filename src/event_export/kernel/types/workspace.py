"""Kernel types – workspace, domain and link records returned by lookups."""
from __future__ import annotations

import dataclasses
from datetime import datetime


@dataclasses.dataclass(frozen=True)
class Workspace:
    """Read-only view of the workspace an export runs against.

    ``usage`` and ``usage_limit`` are the click counters for the current
    billing cycle.
    """

    id: str
    created_at: datetime
    plan: str = "free"
    slug: str = ""
    usage: int = 0
    usage_limit: int = 1000


@dataclasses.dataclass(frozen=True)
class Domain:
    slug: str
    id: str | None = None
    verified: bool = True


@dataclasses.dataclass(frozen=True)
class Link:
    id: str
    domain: str
    key: str
    folder_id: str | None = None


__all__ = ["Domain", "Link", "Workspace"]
