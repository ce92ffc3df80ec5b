"""Application export – plan, usage and time-window rules.

These are the default implementations of the usage check and the
plan/date-range validator injected into
:class:`~event_export.application.export.authorization.AuthorizationGate`.
"""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime, timedelta

from event_export.kernel.errors import PlanLimitExceededError, UsageExceededError
from event_export.kernel.types import Workspace

_DAY = timedelta(days=1)

_INTERVAL_SPANS: dict[str, timedelta] = {
    "24h": _DAY,
    "7d": 7 * _DAY,
    "30d": 30 * _DAY,
    "90d": 90 * _DAY,
    "1y": 365 * _DAY,
}

INTERVALS: frozenset[str] = frozenset({*_INTERVAL_SPANS, "mtd", "qtd", "ytd", "all"})

# days of history per plan; plans not listed are bounded only by workspace creation
PLAN_HISTORY_DAYS: dict[str, int] = {"free": 30, "pro": 365}

_PLAN_BLOCKED_INTERVALS: dict[str, frozenset[str]] = {
    "free": frozenset({"90d", "1y", "qtd", "ytd", "all"}),
    "pro": frozenset({"all"}),
}

_PLAN_MESSAGES: dict[str, str] = {
    "free": (
        "You can only get analytics for up to 30 days on a Free plan. "
        "Upgrade to Pro or Business to get analytics for longer periods."
    ),
    "pro": (
        "You can only get analytics for up to 1 year on a Pro plan. "
        "Upgrade to Business to get analytics for longer periods."
    ),
}


@dataclasses.dataclass(frozen=True)
class TimeWindow:
    """Closed time range ``[start, end]`` an export covers."""

    start: datetime
    end: datetime

    @property
    def days(self) -> float:
        return (self.end - self.start) / _DAY


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def normalize_plan(plan: str | None) -> str:
    return (plan or "free").strip().lower()


def interval_start(interval: str, end: datetime, data_available_from: datetime) -> datetime:
    """Return where *interval* begins when it ends at *end*."""
    if interval in _INTERVAL_SPANS:
        return end - _INTERVAL_SPANS[interval]
    midnight = end.replace(hour=0, minute=0, second=0, microsecond=0)
    if interval == "mtd":
        return midnight.replace(day=1)
    if interval == "qtd":
        return midnight.replace(month=3 * ((end.month - 1) // 3) + 1, day=1)
    if interval == "ytd":
        return midnight.replace(month=1, day=1)
    if interval == "all":
        return data_available_from
    raise ValueError(f"Unknown interval: {interval!r}")


def resolve_time_window(
    *,
    interval: str | None,
    start: datetime | None,
    end: datetime | None,
    now: datetime,
    data_available_from: datetime,
    default_interval: str = "24h",
) -> TimeWindow:
    """Resolve the effective window of an export.

    Explicit *start* wins over *interval*.  *end* defaults to *now*; an *end*
    without a *start* keeps the interval's span ending at *end*.  The start
    never precedes *data_available_from* (the workspace creation date).
    """
    data_available_from = as_utc(data_available_from)
    resolved_end = end or now
    if start is None:
        start = interval_start(interval or default_interval, resolved_end, data_available_from)
    start = max(start, data_available_from)
    return TimeWindow(start=min(start, resolved_end), end=resolved_end)


def validate_date_range_for_plan(
    *,
    plan: str | None,
    data_available_from: datetime,
    interval: str | None,
    start: datetime | None,
    end: datetime | None,
    now: datetime,
) -> None:
    """Raise :class:`PlanLimitExceededError` if the plan cannot see the range.

    An explicit *start* overrides *interval*.  A one-day grace is allowed on
    explicit starts so that "30 days ago at midnight" passes on a 30-day plan.
    An *end* without a *start* is checked through the start its interval
    implies, so moving *end* back cannot widen the visible history.
    """
    tier = normalize_plan(plan)
    history_days = PLAN_HISTORY_DAYS.get(tier)
    if history_days is None:
        return

    data_available_from = as_utc(data_available_from)
    if start is None:
        if interval is not None and interval in _PLAN_BLOCKED_INTERVALS.get(tier, frozenset()):
            raise PlanLimitExceededError(
                _PLAN_MESSAGES[tier], plan=tier, detail={"interval": interval}
            )
        if end is None:
            return
        # an interval ending at an explicit end still has to fit the history
        start = interval_start(interval or "24h", end, data_available_from)

    effective_start = max(start, data_available_from)
    reach_back = now - effective_start
    span = (end or now) - effective_start
    if max(reach_back, span) > (history_days + 1) * _DAY:
        raise PlanLimitExceededError(
            _PLAN_MESSAGES[tier],
            plan=tier,
            detail={"start": effective_start.isoformat(), "history_days": history_days},
        )


def check_click_usage(workspace: Workspace) -> None:
    """Raise :class:`UsageExceededError` once usage passes the plan allowance."""
    if workspace.usage > workspace.usage_limit:
        raise UsageExceededError(
            f"You have exceeded your monthly clicks limit of {workspace.usage_limit:,}. "
            "Upgrade your plan to keep exporting analytics.",
            usage=workspace.usage,
            limit=workspace.usage_limit,
            detail={"workspace_id": workspace.id},
        )


__all__ = [
    "INTERVALS",
    "PLAN_HISTORY_DAYS",
    "TimeWindow",
    "as_utc",
    "check_click_usage",
    "interval_start",
    "normalize_plan",
    "resolve_time_window",
    "validate_date_range_for_plan",
]
