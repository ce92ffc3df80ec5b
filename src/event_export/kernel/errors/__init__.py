"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   └── NotFoundError
    ├── ApplicationError         (application.py)
    │   ├── UnauthorizedError
    │   └── ForbiddenError
    │       ├── PermissionDeniedError
    │       ├── UsageExceededError
    │       └── PlanLimitExceededError
    └── InfrastructureError      (infrastructure.py)
        └── DataSourceError
"""

from event_export.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    PermissionDeniedError,
    PlanLimitExceededError,
    UnauthorizedError,
    UsageExceededError,
)
from event_export.kernel.errors.base import BaseError
from event_export.kernel.errors.domain import DomainError, NotFoundError, ValidationError
from event_export.kernel.errors.infrastructure import DataSourceError, InfrastructureError

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
