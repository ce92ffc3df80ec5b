"""Kernel – framework-agnostic building blocks (errors, records, security, time)."""

from event_export.kernel.errors import (
    ApplicationError,
    BaseError,
    DataSourceError,
    DomainError,
    ForbiddenError,
    InfrastructureError,
    NotFoundError,
    PermissionDeniedError,
    PlanLimitExceededError,
    UnauthorizedError,
    UsageExceededError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DataSourceError",
    "DomainError",
    "ForbiddenError",
    "InfrastructureError",
    "NotFoundError",
    "PermissionDeniedError",
    "PlanLimitExceededError",
    "UnauthorizedError",
    "UsageExceededError",
    "ValidationError",
]
