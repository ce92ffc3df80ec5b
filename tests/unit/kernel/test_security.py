"""Unit tests for kernel security – permissions and principals."""

from __future__ import annotations

import pytest

from event_export.kernel.security import (
    ANALYTICS_READ,
    FOLDERS_READ,
    Permission,
    Principal,
    permission_matches,
)


class TestPermissionMatches:
    @pytest.mark.parametrize(
        ("stored", "required", "expected"),
        [
            ("folders.read", "folders.read", True),
            ("folders.write", "folders.read", False),
            ("folders.*", "folders.read", True),
            ("links.*", "folders.read", False),
            ("*", "analytics.read", True),
        ],
    )
    def test_matching(self, stored: str, required: str, expected: bool) -> None:
        assert permission_matches(stored, required) is expected


class TestPrincipal:
    def test_has_permission_by_object_or_string(self) -> None:
        user = Principal(subject="user_1", permissions=frozenset({ANALYTICS_READ}))
        assert user.has_permission(ANALYTICS_READ)
        assert user.has_permission("analytics.read")
        assert not user.has_permission(FOLDERS_READ)

    def test_no_permissions_by_default(self) -> None:
        assert not Principal(subject="anon").has_permission(ANALYTICS_READ)

    def test_permission_str(self) -> None:
        assert str(Permission("folders.read")) == "folders.read"
