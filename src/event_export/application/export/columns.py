"""Application export – projecting event records onto named CSV columns.

Each column key has a header label and an extractor.  Extractors are pure
functions of one record; they return ``None`` when the record variant does
not carry the field, so a column that does not apply to the exported event
type renders as an empty cell instead of failing the export.
"""
from __future__ import annotations

import dataclasses
import json
import re
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Sequence

import pycountry

from event_export.kernel.types import (
    ClickDetails,
    ClickEvent,
    EventRecord,
    LeadEvent,
    SaleEvent,
)

__all__ = [
    "COLUMN_ACCESSORS",
    "COLUMN_LABELS",
    "ROOT_KEY",
    "ColumnProjector",
    "capitalize",
    "column_label",
    "column_value",
    "country_name",
    "display_value",
]

ROOT_KEY = "_root"

COLUMN_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "trigger": "Event",
        "url": "Destination URL",
        "os": "OS",
        "referer": "Referrer",
        "refererUrl": "Referrer URL",
        "timestamp": "Date",
        "invoiceId": "Invoice ID",
        "saleAmount": "Sale Amount",
        "clickId": "Click ID",
    }
)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def capitalize(key: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    return key[:1].upper() + key[1:]


@lru_cache(maxsize=512)
def country_name(code: str) -> str | None:
    """Map an ISO 3166 alpha-2 code to its common English name."""
    country = pycountry.countries.get(alpha_2=code.upper())
    if country is None:
        return None
    return getattr(country, "common_name", None) or country.name


# ---------------------------------------------------------------------------
# extractors
# ---------------------------------------------------------------------------


def _click(record: EventRecord) -> ClickDetails | None:
    return getattr(record, "click", None)


def _trigger(record: EventRecord) -> Any:
    if isinstance(record, ClickEvent):
        return record.click.trigger
    return None


def _event_name(record: EventRecord) -> Any:
    if isinstance(record, (LeadEvent, SaleEvent)):
        return record.event_name
    return None


def _click_field(name: str) -> Callable[[EventRecord], Any]:
    def extract(record: EventRecord) -> Any:
        click = _click(record)
        return getattr(click, name, None) if click is not None else None

    extract.__name__ = f"_click_{name}"
    return extract


def _link(record: EventRecord) -> Any:
    domain = getattr(record, "domain", None)
    key = getattr(record, "key", None)
    if domain is None:
        return None
    if key is None or key == ROOT_KEY:
        return domain
    return f"{domain}/{key}"


def _country(record: EventRecord) -> Any:
    code = getattr(record, "country", None)
    if not code:
        return code
    return country_name(code) or code


def _customer(record: EventRecord) -> Any:
    if not isinstance(record, (LeadEvent, SaleEvent)):
        return None
    customer = record.customer
    name = (customer.name if customer else None) or ""
    email = customer.email if customer else None
    if email:
        return f"{name} <{email}>".strip()
    return name


def _invoice_id(record: EventRecord) -> Any:
    if isinstance(record, SaleEvent):
        return record.sale.invoice_id
    return None


def _sale_amount(record: EventRecord) -> Any:
    if not isinstance(record, SaleEvent) or record.sale.amount is None:
        return None
    return f"${Decimal(record.sale.amount) / 100:.2f}"


COLUMN_ACCESSORS: Mapping[str, Callable[[EventRecord], Any]] = MappingProxyType(
    {
        "trigger": _trigger,
        "event": _event_name,
        "url": _click_field("url"),
        "link": _link,
        "country": _country,
        "referer": _click_field("referer"),
        "refererUrl": _click_field("referer_url"),
        "customer": _customer,
        "invoiceId": _invoice_id,
        "saleAmount": _sale_amount,
        "clickId": _click_field("id"),
    }
)


def _attribute(record: EventRecord, key: str) -> Any:
    # private and dunder names are never exposed as columns
    if key.startswith("_"):
        return None
    value = getattr(record, key, None)
    if value is None:
        snake = _CAMEL_BOUNDARY.sub("_", key).lower()
        if snake != key:
            value = getattr(record, snake, None)
    return value


# ---------------------------------------------------------------------------
# public API
# ---------------------------------------------------------------------------


def column_label(key: str) -> str:
    return COLUMN_LABELS.get(key) or capitalize(key)


def column_value(key: str, record: EventRecord) -> Any:
    """Raw value of column *key* for *record* (``None`` when absent)."""
    accessor = COLUMN_ACCESSORS.get(key)
    value = accessor(record) if accessor is not None else None
    if value is None:
        value = _attribute(record, key)
    return value


def _iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def display_value(value: Any) -> str:
    """Render a scalar for a CSV cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return _iso(value)
    if isinstance(value, Enum):
        return str(value.value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return json.dumps(dataclasses.asdict(value), default=str, ensure_ascii=False)
    return str(value)


class ColumnProjector:
    """Projects records onto an ordered list of column keys.

    Headers keep the order of *columns*.  When two keys resolve to the same
    label (``trigger`` and ``event`` are both "Event") the later one is
    qualified with its key so that no column is lost.
    """

    def __init__(self, columns: Sequence[str]) -> None:
        self._columns = tuple(columns)
        labels: list[str] = []
        for key in self._columns:
            label = column_label(key)
            if label in labels:
                label = f"{label} ({key})"
            labels.append(label)
        self._labels = tuple(labels)

    @property
    def columns(self) -> tuple[str, ...]:
        return self._columns

    @property
    def headers(self) -> tuple[str, ...]:
        return self._labels

    def project_row(self, record: EventRecord) -> dict[str, str]:
        return {
            label: display_value(column_value(key, record))
            for key, label in zip(self._columns, self._labels)
        }

    def project(self, records: Iterable[EventRecord]) -> list[dict[str, str]]:
        return [self.project_row(record) for record in records]
