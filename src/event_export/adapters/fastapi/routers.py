"""FastAPI adapter – the events export router."""
# No ``from __future__ import annotations`` here: FastAPI inspects the
# endpoint signature at runtime and must see the real ``Request`` class.
from typing import Any, Callable, Sequence

from event_export.adapters.fastapi.exception_mapper import _require_fastapi, error_responses
from event_export.application.export import (
    AuthorizationContext,
    ExportPipeline,
    check_workspace_access,
)

ContextProvider = Callable[..., Any]


def create_export_router(
    pipeline: ExportPipeline,
    context_provider: ContextProvider,
    *,
    path: str = "/api/events/export",
    eligible_plans: Sequence[str] | None = None,
    tags: list[str] | None = None,
) -> Any:
    """Return a router serving ``GET {path}`` as a CSV download.

    Parameters
    ----------
    pipeline:
        The configured :class:`ExportPipeline`.
    context_provider:
        FastAPI dependency resolving the workspace and acting user for the
        request (sync or async); it owns authentication and may raise
        :class:`~event_export.kernel.errors.UnauthorizedError`.
    eligible_plans:
        Workspace plans allowed to export; defaults to
        ``pipeline.settings.eligible_plans``.
    tags:
        OpenAPI tags for the generated route.
    """
    _require_fastapi()
    from fastapi import APIRouter, Depends, Request
    from fastapi.responses import Response

    router = APIRouter(tags=tags or ["analytics"])
    plans = tuple(pipeline.settings.eligible_plans if eligible_plans is None else eligible_plans)

    @router.get(
        path,
        response_class=Response,
        responses={
            200: {"description": "CSV export", "content": {"application/csv": {}}},
            **error_responses(400, 401, 403, 404, 503),
        },
    )
    async def export_events(
        request: Request,
        context: AuthorizationContext = Depends(context_provider),
    ) -> Response:
        """Export the workspace's click, lead or sale events as CSV."""
        check_workspace_access(context, plans)
        params: dict[str, Any] = dict(request.query_params)
        columns = request.query_params.getlist("columns")
        if len(columns) > 1:
            params["columns"] = columns
        result = await pipeline.run(params, context)
        return Response(
            content=result.content,
            media_type=result.media_type,
            headers=result.http_headers(),
        )

    return router


__all__ = ["ContextProvider", "create_export_router"]
