"""Kernel security – Principal and Permission."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Permission:
    """Fine-grained permission string (e.g. ``'folders.read'``)."""
    value: str

    def __str__(self) -> str:
        return self.value


def permission_matches(stored: str, required: str) -> bool:
    """Return ``True`` if *stored* satisfies *required*.

    ``"*"`` matches anything and ``"folders.*"`` matches every action on
    ``folders``.
    """
    if stored == "*" or stored == required:
        return True
    if stored.endswith(".*"):
        return required.startswith(stored[:-1])
    return False


@dataclasses.dataclass(frozen=True)
class Principal:
    """The authenticated user acting on a workspace."""
    subject: str
    permissions: frozenset[Permission] = frozenset()
    email: str | None = None

    def has_permission(self, perm: Permission | str) -> bool:
        required = perm.value if isinstance(perm, Permission) else perm
        return any(permission_matches(p.value, required) for p in self.permissions)


FOLDERS_READ = Permission("folders.read")
ANALYTICS_READ = Permission("analytics.read")

__all__ = ["ANALYTICS_READ", "FOLDERS_READ", "Permission", "Principal", "permission_matches"]
