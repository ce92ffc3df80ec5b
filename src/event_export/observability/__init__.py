"""Observability – logging."""
from event_export.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
