"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    HydrationError,
    MutationError,
    validate_content_size,
    validate_content_depth,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import JSONParseError, loads, decode_mapping
from .id import ComponentID, new_component_id, split_component_id, extract_type


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "HydrationError",
    "MutationError",
    "validate_content_size",
    "validate_content_depth",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "JSONParseError",
    "loads",
    "decode_mapping",
    # IDs
    "ComponentID",
    "new_component_id",
    "split_component_id",
    "extract_type",
]
