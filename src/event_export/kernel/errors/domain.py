"""Domain errors: rejected parameters and unknown domains or links."""

from __future__ import annotations

from typing import Any, Iterable

from event_export.kernel.errors.base import BaseError

FieldError = dict[str, Any]


class DomainError(BaseError):
    """A request the export rules refuse."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """One or more query parameters are malformed.

    ``errors`` holds one ``{"field", "message"}`` entry per offending
    parameter, named as it appears on the query string.  Without an explicit
    *message* one is built from the field names.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str | None = None,
        *,
        errors: Iterable[FieldError] = (),
        **kwargs: Any,
    ) -> None:
        self.errors: list[FieldError] = [dict(e) for e in errors]
        if message is None:
            message = "Invalid export parameters"
            if self.fields:
                message = f"{message}: {', '.join(self.fields)}"
        super().__init__(message, **kwargs)

    @classmethod
    def for_field(cls, field: str, message: str) -> ValidationError:
        return cls(errors=[{"field": field, "message": message}])

    @property
    def fields(self) -> list[str]:
        return [str(e["field"]) for e in self.errors if e.get("field")]

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        payload = super().to_dict(include_cause=include_cause)
        payload["errors"] = [dict(e) for e in self.errors]
        return payload


class NotFoundError(DomainError):
    """A domain or link named by the request is not in the workspace."""

    default_code = "not_found"

    def __init__(self, resource: str, identifier: str | None = None, **kwargs: Any) -> None:
        label = resource.capitalize()
        message = f"{label} not found" if identifier is None else f"{label} '{identifier}' not found"
        kwargs.setdefault("detail", {"resource": resource, "identifier": identifier})
        super().__init__(message, **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = [
    "DomainError",
    "FieldError",
    "NotFoundError",
    "ValidationError",
]
