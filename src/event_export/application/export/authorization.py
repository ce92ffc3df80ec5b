"""Application export – AuthorizationGate.

Checks run in a fixed order and stop at the first failure:

1. click usage against the plan allowance
2. domain exists in the workspace
3. link exists (only when both ``domain`` and ``key`` are given)
4. ``folders.read`` on the link's folder, or on the explicit ``folderId``
5. requested time window against the plan's history limit

No event data is read until every check has passed.
"""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Any, Callable, Iterable

from event_export.application.export.limits import (
    TimeWindow,
    check_click_usage,
    normalize_plan,
    resolve_time_window,
    validate_date_range_for_plan,
)
from event_export.application.export.ports import DomainResolver, FolderPermissions, LinkResolver
from event_export.application.export.request import ExportRequest
from event_export.kernel.errors import ForbiddenError, NotFoundError, PermissionDeniedError
from event_export.kernel.security import ANALYTICS_READ, FOLDERS_READ, Principal
from event_export.kernel.time import Clock, SystemClock
from event_export.kernel.types import Domain, Link, Workspace

UsageCheck = Callable[[Workspace], None]
DateRangeValidator = Callable[..., None]


@dataclasses.dataclass(frozen=True)
class AuthorizationContext:
    """Workspace and acting user, as resolved by the authentication layer."""

    workspace: Workspace
    principal: Principal

    @property
    def user_id(self) -> str:
        return self.principal.subject


@dataclasses.dataclass(frozen=True)
class AuthorizedScope:
    """What an authorised export may read."""

    window: TimeWindow
    domain: Domain | None = None
    link: Link | None = None
    folder_id: str | None = None
    folder_ids: frozenset[str] | None = None


def check_workspace_access(context: AuthorizationContext, eligible_plans: Iterable[str]) -> None:
    """Route-level requirements checked by the HTTP layer before the pipeline.

    The workspace plan must allow exports and the user must hold
    ``analytics.read``.
    """
    plans = {normalize_plan(p) for p in eligible_plans}
    plan = normalize_plan(context.workspace.plan)
    if plan not in plans:
        raise ForbiddenError(
            f"Exporting analytics requires one of the following plans: {', '.join(sorted(plans))}",
            code="plan_not_eligible",
            detail={"plan": plan},
        )
    if not context.principal.has_permission(ANALYTICS_READ):
        raise ForbiddenError(
            "You don't have the necessary permissions to export analytics",
            permission=ANALYTICS_READ.value,
        )


class AuthorizationGate:
    """Sequences usage, existence, folder and plan checks for one request."""

    def __init__(
        self,
        domains: DomainResolver,
        links: LinkResolver,
        folders: FolderPermissions,
        *,
        usage_check: UsageCheck = check_click_usage,
        date_range_validator: DateRangeValidator = validate_date_range_for_plan,
        clock: Clock | None = None,
        default_interval: str = "24h",
    ) -> None:
        self._domains = domains
        self._links = links
        self._folders = folders
        self._usage_check = usage_check
        self._date_range_validator = date_range_validator
        self._clock = clock or SystemClock()
        self._default_interval = default_interval

    def check_usage(self, context: AuthorizationContext) -> None:
        """Raise :class:`UsageExceededError` if the workspace is over quota."""
        self._usage_check(context.workspace)

    async def authorize(
        self,
        request: ExportRequest,
        context: AuthorizationContext,
        *,
        default_interval: str | None = None,
    ) -> AuthorizedScope:
        """Run every check for *request* and return what the export may read.

        *default_interval* replaces the gate's own default for this call; it
        applies when the request has neither ``interval`` nor ``start``.
        """
        workspace = context.workspace
        self.check_usage(context)

        domain: Domain | None = None
        link: Link | None = None
        folder_ids: frozenset[str] | None = None

        if request.domain and request.key:
            domain = await self._resolve_domain(workspace, request.domain)
            link = await self._resolve_link(workspace, request.domain, request.key)
        elif request.domain and not request.folder_id:
            # no link means no folder to verify; both lookups are independent
            domain, folder_ids = await self._resolve_domain_and_folders(context, request.domain)
        elif request.domain:
            domain = await self._resolve_domain(workspace, request.domain)

        folder_to_verify = (link.folder_id if link is not None else None) or request.folder_id
        if folder_to_verify:
            await self._verify_folder(context, folder_to_verify)

        window = self._check_date_range(
            request, workspace, default_interval or self._default_interval
        )

        if not folder_to_verify and folder_ids is None:
            folder_ids = await self._folders.readable_folder_ids(workspace, context.user_id)

        return AuthorizedScope(
            window=window,
            domain=domain,
            link=link,
            folder_id=folder_to_verify or None,
            folder_ids=None if folder_to_verify else frozenset(folder_ids or ()),
        )

    async def _resolve_domain(self, workspace: Workspace, slug: str) -> Domain:
        domain = await self._domains.get_domain(workspace, slug)
        if domain is None:
            raise NotFoundError("domain", slug)
        return domain

    async def _resolve_domain_and_folders(
        self, context: AuthorizationContext, slug: str
    ) -> tuple[Domain, frozenset[str]]:
        try:
            async with asyncio.TaskGroup() as group:
                domain_task = group.create_task(self._resolve_domain(context.workspace, slug))
                folders_task = group.create_task(
                    self._folders.readable_folder_ids(context.workspace, context.user_id)
                )
        except BaseExceptionGroup as failed:
            # the first failing lookup is the error; its sibling was cancelled
            raise failed.exceptions[0] from None
        return domain_task.result(), folders_task.result()

    async def _resolve_link(self, workspace: Workspace, domain: str, key: str) -> Link:
        link = await self._links.get_link(workspace.id, domain, key)
        if link is None:
            raise NotFoundError("link", f"{domain}/{key}")
        return link

    async def _verify_folder(self, context: AuthorizationContext, folder_id: str) -> None:
        allowed = await self._folders.has_permission(
            context.workspace, context.user_id, folder_id, FOLDERS_READ.value
        )
        if not allowed:
            raise PermissionDeniedError("folder", folder_id, permission=FOLDERS_READ.value)

    def _check_date_range(
        self, request: ExportRequest, workspace: Workspace, default_interval: str
    ) -> TimeWindow:
        now = self._clock.now()
        bounds: dict[str, Any] = {
            "interval": request.interval or (None if request.start else default_interval),
            "start": request.start,
            "end": request.end,
            "now": now,
            "data_available_from": workspace.created_at,
        }
        self._date_range_validator(plan=workspace.plan, **bounds)
        return resolve_time_window(default_interval=default_interval, **bounds)


__all__ = [
    "AuthorizationContext",
    "AuthorizationGate",
    "AuthorizedScope",
    "check_workspace_access",
]
