"""Testing support – in-memory fakes for the export ports."""

from event_export.kernel.time import FrozenClock
from event_export.testing.fakes import (
    InMemoryDomainResolver,
    InMemoryEventSource,
    InMemoryFolderPermissions,
    InMemoryLinkResolver,
)

__all__ = [
    "FrozenClock",
    "InMemoryDomainResolver",
    "InMemoryEventSource",
    "InMemoryFolderPermissions",
    "InMemoryLinkResolver",
]
