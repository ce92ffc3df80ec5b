"""Kernel types – event variants and workspace records."""
from event_export.kernel.types.events import (
    ClickDetails,
    ClickEvent,
    Customer,
    EventRecord,
    EventType,
    LeadEvent,
    SaleDetails,
    SaleEvent,
)
from event_export.kernel.types.workspace import Domain, Link, Workspace

__all__ = [
    "ClickDetails",
    "ClickEvent",
    "Customer",
    "Domain",
    "EventRecord",
    "EventType",
    "LeadEvent",
    "Link",
    "SaleDetails",
    "SaleEvent",
    "Workspace",
]
