"""Configuration classes for XML blob construction and printing.

Configuration objects are frozen dataclasses so a single instance can be shared
by printers running on different threads.
"""

import json
from dataclasses import dataclass, fields, replace
from enum import Enum, auto
from typing import Any, Dict, List, Optional

DEFAULT_MASK = "***masked***"


class AttributeOrder(Enum):
    """Order in which an attribute collection is written out."""

    SORTED = auto()      # Sorted by key, reproducible across runs
    INSERTION = auto()   # Order in which keys were first added


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class BlobConfig:
    """Construction-time defaults for blob factories."""

    default_mask: str = DEFAULT_MASK

    def __post_init__(self) -> None:
        """Validate blob configuration."""
        if not isinstance(self.default_mask, str) or not self.default_mask:
            raise ConfigValidationError(
                "default_mask must be a non-empty string",
                field_name="default_mask",
            )


@dataclass(frozen=True)
class PrinterConfig:
    """Settings that control how a printer writes a blob tree.

    Attributes:
        mask: Write masked replacements instead of the original values
        attribute_order: Order of attributes inside a start tag
        ascii_only: Write every non-ASCII character as a numeric reference
        correlation_id: Optional correlation ID attached to log records
    """

    mask: bool = False
    attribute_order: AttributeOrder = AttributeOrder.SORTED
    ascii_only: bool = False
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate printer configuration."""
        if not isinstance(self.mask, bool):
            raise ConfigValidationError("mask must be a boolean", field_name="mask")
        if not isinstance(self.attribute_order, AttributeOrder):
            raise ConfigValidationError(
                f"attribute_order must be one of {[o.name for o in AttributeOrder]}",
                field_name="attribute_order",
                suggestions=["Use AttributeOrder.SORTED for reproducible output"],
            )
        if not isinstance(self.ascii_only, bool):
            raise ConfigValidationError(
                "ascii_only must be a boolean", field_name="ascii_only"
            )

    def override(self, **kwargs: Any) -> "PrinterConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> PrinterConfig().override(mask=True).mask
            True
        """
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a JSON-compatible dictionary."""
        result: Dict[str, Any] = {}
        for config_field in fields(self):
            value = getattr(self, config_field.name)
            result[config_field.name] = value.name if isinstance(value, Enum) else value
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrinterConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected rather than silently ignored.

        Raises:
            ConfigValidationError: If a key or value cannot be mapped
        """
        known = {config_field.name for config_field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {unknown}",
                suggestions=sorted(known),
            )

        values = dict(data)
        order = values.get("attribute_order")
        if isinstance(order, str):
            try:
                values["attribute_order"] = AttributeOrder[order.upper()]
            except KeyError as e:
                raise ConfigValidationError(
                    f"Unknown attribute order: {order}",
                    field_name="attribute_order",
                    suggestions=[o.name for o in AttributeOrder],
                ) from e
        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "PrinterConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def masked(cls) -> "PrinterConfig":
        """Preset that writes masked replacements."""
        return cls(mask=True)

    @classmethod
    def portable(cls) -> "PrinterConfig":
        """Preset that produces pure ASCII output, safe for any encoding."""
        return cls(ascii_only=True)
