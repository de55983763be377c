"""Shared utilities for XML blob construction.

This module provides configuration objects, error types and logging used by
every other layer of the package.
"""

from .config import (
    DEFAULT_MASK,
    AttributeOrder,
    BlobConfig,
    ConfigError,
    ConfigValidationError,
    PrinterConfig,
)
from .errors import InvalidArgumentError, XmlBlobError
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "DEFAULT_MASK",
    "AttributeOrder",
    "BlobConfig",
    "ConfigError",
    "ConfigValidationError",
    "PrinterConfig",
    "InvalidArgumentError",
    "XmlBlobError",
    "CorrelationLogger",
    "get_logger",
]
