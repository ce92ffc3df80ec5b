"""
event_export – workspace analytics events as CSV downloads.

Import path convention::

    from event_export.kernel.errors import ValidationError
    from event_export.application.export import ExportPipeline, AuthorizationGate
    from event_export.adapters.fastapi import create_export_router, ExportExceptionMapper
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
