"""FastAPI adapter – export router and exception mapper."""
from event_export.adapters.fastapi.exception_mapper import (
    ExportExceptionMapper,
    error_body,
    error_responses,
    status_for,
)
from event_export.adapters.fastapi.routers import ContextProvider, create_export_router

__all__ = [
    "ContextProvider",
    "ExportExceptionMapper",
    "create_export_router",
    "error_body",
    "error_responses",
    "status_for",
]
