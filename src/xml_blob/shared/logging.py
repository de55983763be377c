"""Structured logging for blob printing.

Records carry the emitting component and the correlation ID of the printer
configuration that produced them, so output written on behalf of a request
can be traced back to it. The library never installs handlers.
"""

import logging
from typing import Any, Dict, Optional


class CorrelationLogger:
    """Wraps a standard logger and stamps component and correlation ID on records."""

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        """Initialize correlation logger.

        Args:
            name: Logger name (typically __name__)
            correlation_id: Optional correlation ID for request tracking
            component: Component name; defaults to the last part of ``name``
        """
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.rsplit(".", 1)[-1]

    def bind(self, correlation_id: Optional[str]) -> "CorrelationLogger":
        """Get a logger for the same component tagged with another correlation ID."""
        if correlation_id == self.correlation_id:
            return self
        return CorrelationLogger(self.logger.name, correlation_id, self.component)

    def is_debug_enabled(self) -> bool:
        """Check whether DEBUG records would be emitted.

        The printing path runs once per node, so callers check this before
        building ``extra`` payloads.
        """
        return self.logger.isEnabledFor(logging.DEBUG)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log a debug message with component and correlation ID."""
        fields = {"component": self.component, "correlation_id": self.correlation_id}
        if extra:
            fields.update(extra)
        self.logger.debug(message, extra=fields)


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Get a correlation-aware logger instance."""
    return CorrelationLogger(name, correlation_id, component)
