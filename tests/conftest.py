"""Shared fixtures: a business workspace, its user, and event builders."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any, Callable

import pytest

from event_export.application.export import AuthorizationContext, AuthorizationGate
from event_export.kernel.security import ANALYTICS_READ, Permission, Principal
from event_export.kernel.time import FrozenClock
from event_export.kernel.types import (
    ClickDetails,
    ClickEvent,
    Customer,
    LeadEvent,
    Link,
    SaleDetails,
    SaleEvent,
    Workspace,
)
from event_export.testing import (
    InMemoryDomainResolver,
    InMemoryFolderPermissions,
    InMemoryLinkResolver,
)

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(NOW)


@pytest.fixture
def workspace() -> Workspace:
    return Workspace(
        id="ws_1",
        slug="acme",
        plan="business",
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
        usage=120,
        usage_limit=50_000,
    )


@pytest.fixture
def principal() -> Principal:
    return Principal(subject="user_1", permissions=frozenset({ANALYTICS_READ, Permission("links.read")}))


@pytest.fixture
def context(workspace: Workspace, principal: Principal) -> AuthorizationContext:
    return AuthorizationContext(workspace=workspace, principal=principal)


@pytest.fixture
def domains() -> InMemoryDomainResolver:
    return InMemoryDomainResolver("dub.sh", "acme.link")


@pytest.fixture
def links() -> InMemoryLinkResolver:
    return InMemoryLinkResolver(
        Link(id="link_abc", domain="dub.sh", key="abc"),
        Link(id="link_sec", domain="dub.sh", key="secret", folder_id="fold_private"),
        Link(id="link_root", domain="dub.sh", key="_root"),
    )


@pytest.fixture
def folders() -> InMemoryFolderPermissions:
    perms = InMemoryFolderPermissions()
    perms.grant("user_1", "fold_marketing")
    return perms


@pytest.fixture
def gate(
    domains: InMemoryDomainResolver,
    links: InMemoryLinkResolver,
    folders: InMemoryFolderPermissions,
    clock: FrozenClock,
) -> AuthorizationGate:
    return AuthorizationGate(domains, links, folders, clock=clock)


@pytest.fixture
def make_click() -> Callable[..., ClickEvent]:
    def _make(**overrides: Any) -> ClickEvent:
        click = overrides.pop("click", None) or ClickDetails(
            id=overrides.pop("click_id", "clk_1"),
            url=overrides.pop("url", "https://acme.com/pricing"),
            trigger=overrides.pop("trigger", "link"),
            referer=overrides.pop("referer", "google.com"),
            referer_url=overrides.pop("referer_url", "https://google.com/search"),
        )
        fields: dict[str, Any] = {
            "timestamp": NOW - timedelta(hours=1),
            "domain": "dub.sh",
            "key": "abc",
            "link_id": "link_abc",
            "country": "US",
            "os": "Mac OS",
            "browser": "Chrome",
        }
        fields.update(overrides)
        return ClickEvent(click=click, **fields)

    return _make


@pytest.fixture
def make_lead() -> Callable[..., LeadEvent]:
    def _make(**overrides: Any) -> LeadEvent:
        fields: dict[str, Any] = {
            "timestamp": NOW - timedelta(hours=2),
            "domain": "dub.sh",
            "key": "abc",
            "link_id": "link_abc",
            "country": "DE",
            "event_name": "Sign up",
            "customer": Customer(id="cus_1", name="Jane Doe", email="jane@example.com"),
        }
        fields.update(overrides)
        return LeadEvent(**fields)

    return _make


@pytest.fixture
def make_sale() -> Callable[..., SaleEvent]:
    def _make(**overrides: Any) -> SaleEvent:
        fields: dict[str, Any] = {
            "timestamp": NOW - timedelta(hours=3),
            "domain": "dub.sh",
            "key": "abc",
            "link_id": "link_abc",
            "country": "FR",
            "event_name": "Purchase",
            "customer": Customer(id="cus_1", name="Jane Doe", email="jane@example.com"),
            "sale": SaleDetails(amount=4999, invoice_id="inv_001"),
        }
        fields.update(overrides)
        return SaleEvent(**fields)

    return _make
