"""FastAPI adapter – ExportExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from event_export.kernel.errors import (
    BaseError,
    DataSourceError,
    DomainError,
    ForbiddenError,
    InfrastructureError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'event-export[fastapi]' to use the FastAPI adapter"
        ) from exc


# ORDER MATTERS: more-specific subtypes first
_STATUS_MAP: list[tuple[type[BaseError], int]] = [
    (ValidationError, 400),
    (NotFoundError, 404),
    (UnauthorizedError, 401),
    (ForbiddenError, 403),
    (DataSourceError, 503),
    (InfrastructureError, 503),
    (DomainError, 422),
    (BaseError, 500),
]

_DESCRIPTIONS: dict[int, str] = {
    400: "Invalid export parameters",
    401: "Unauthorized",
    403: "Usage, plan or folder access denied",
    404: "Domain or link not found",
    422: "Domain rule violated",
    500: "Internal server error",
    503: "Event store unavailable",
}

_ERROR_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "code": {"type": "string"},
        "message": {"type": "string"},
        "detail": {"type": "object"},
        "errors": {"type": "array", "items": {"type": "object"}},
    },
    "required": ["code", "message"],
}


def status_for(exc: BaseException) -> int:
    """HTTP status for an export error (500 for anything unmapped)."""
    for exc_type, status in _STATUS_MAP:
        if isinstance(exc, exc_type):
            return status
    return 500


def error_body(exc: BaseError) -> dict[str, Any]:
    """JSON body for *exc*; the underlying cause is never exposed."""
    return exc.to_dict(include_cause=False)


def error_responses(*codes: int) -> dict[int | str, dict[str, Any]]:
    """OpenAPI ``responses`` entries for the given status codes."""
    return {
        str(code): {
            "description": _DESCRIPTIONS.get(code, "Error"),
            "content": {"application/json": {"schema": _ERROR_SCHEMA}},
        }
        for code in codes
    }


class ExportExceptionMapper:
    """Register export error → HTTP status mappings on a FastAPI app.

    Error body schema::

        {"code": "not_found", "message": "...", "detail": {...}}

    ``ValidationError`` bodies also carry ``errors`` with the offending
    query parameters.
    """

    def __init__(self) -> None:
        _require_fastapi()
        self._map = list(_STATUS_MAP)

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        from fastapi.responses import JSONResponse

        for exc_type, status in self._map:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                    headers = {"Retry-After": "30"} if getattr(exc, "retryable", False) else None
                    return JSONResponse(status_code=code, content=error_body(exc), headers=headers)

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["ExportExceptionMapper", "error_body", "error_responses", "status_for"]
