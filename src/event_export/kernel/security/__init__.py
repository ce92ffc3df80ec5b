"""Kernel security – principal and permission primitives."""
from event_export.kernel.security.principal import (
    ANALYTICS_READ,
    FOLDERS_READ,
    Permission,
    Principal,
    permission_matches,
)

__all__ = ["ANALYTICS_READ", "FOLDERS_READ", "Permission", "Principal", "permission_matches"]
