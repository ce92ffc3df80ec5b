"""Kernel types – analytics event records.

An :data:`EventRecord` is one of three frozen variants.  The variant is
chosen by the data source from the requested :class:`EventType`; consumers
never mutate a record.
"""
from __future__ import annotations

import dataclasses
from datetime import datetime
from enum import Enum
from typing import ClassVar, Union


class EventType(str, Enum):
    """The analytics event variants that can be exported."""

    CLICK = "click"
    LEAD = "lead"
    SALE = "sale"

    @classmethod
    def parse(cls, raw: str) -> "EventType":
        """Accept the singular name or the plural wire alias (``clicks`` …)."""
        value = raw.strip().lower()
        if value.endswith("s"):
            value = value[:-1]
        return cls(value)


@dataclasses.dataclass(frozen=True)
class ClickDetails:
    """The click that produced (or led to) an event."""

    id: str
    url: str | None = None
    trigger: str | None = "link"
    referer: str | None = "(direct)"
    referer_url: str | None = "(direct)"
    ip: str | None = None


@dataclasses.dataclass(frozen=True)
class Customer:
    id: str | None = None
    name: str | None = None
    email: str | None = None
    external_id: str | None = None


@dataclasses.dataclass(frozen=True)
class SaleDetails:
    """Sale payload; ``amount`` is in minor currency units (cents)."""

    amount: int
    invoice_id: str | None = None
    currency: str = "usd"
    payment_processor: str | None = None


@dataclasses.dataclass(frozen=True, kw_only=True)
class _EventBase:
    event_type: ClassVar[EventType]

    timestamp: datetime
    domain: str
    key: str
    link_id: str | None = None
    country: str | None = None
    city: str | None = None
    region: str | None = None
    continent: str | None = None
    device: str | None = None
    browser: str | None = None
    os: str | None = None


@dataclasses.dataclass(frozen=True, kw_only=True)
class ClickEvent(_EventBase):
    event_type: ClassVar[EventType] = EventType.CLICK

    click: ClickDetails


@dataclasses.dataclass(frozen=True, kw_only=True)
class LeadEvent(_EventBase):
    event_type: ClassVar[EventType] = EventType.LEAD

    event_name: str
    customer: Customer | None = None
    click: ClickDetails | None = None


@dataclasses.dataclass(frozen=True, kw_only=True)
class SaleEvent(_EventBase):
    event_type: ClassVar[EventType] = EventType.SALE

    event_name: str
    sale: SaleDetails
    customer: Customer | None = None
    click: ClickDetails | None = None


EventRecord = Union[ClickEvent, LeadEvent, SaleEvent]

__all__ = [
    "ClickDetails",
    "ClickEvent",
    "Customer",
    "EventRecord",
    "EventType",
    "LeadEvent",
    "SaleDetails",
    "SaleEvent",
]
