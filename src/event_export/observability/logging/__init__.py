"""Observability – structured logging helpers."""
from event_export.observability.logging.factory import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
