"""Application-layer errors — access, quota and plan failures."""

from __future__ import annotations

from typing import Any

from event_export.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """Missing or invalid credentials."""

    default_code = "unauthorized"


class ForbiddenError(ApplicationError):
    """Authenticated principal lacks required permission."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        permission: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.permission = permission


class PermissionDeniedError(ForbiddenError):
    """The acting user may not read a resource (e.g. a folder)."""

    default_code = "permission_denied"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        *,
        permission: str | None = None,
        **kwargs: Any,
    ) -> None:
        msg = f"You don't have access to this {resource}"
        if permission is not None:
            msg = f"{msg} (requires '{permission}')"
        super().__init__(msg, permission=permission, **kwargs)
        self.resource = resource
        self.identifier = identifier


class UsageExceededError(ForbiddenError):
    """The workspace has used up its plan allowance."""

    default_code = "exceeded_limit"

    def __init__(
        self,
        message: str = "You have exceeded your monthly clicks limit",
        *,
        usage: int | None = None,
        limit: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.usage = usage
        self.limit = limit


class PlanLimitExceededError(ForbiddenError):
    """The requested time window reaches further back than the plan allows."""

    default_code = "plan_limit_exceeded"

    def __init__(
        self,
        message: str,
        *,
        plan: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.plan = plan


__all__ = [
    "ApplicationError",
    "ForbiddenError",
    "PermissionDeniedError",
    "PlanLimitExceededError",
    "UnauthorizedError",
    "UsageExceededError",
]
