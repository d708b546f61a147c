"""Validation errors and guards for builder input."""

import sys
from dataclasses import dataclass
from typing import Any


MAX_CONTENT_SIZE = 5 * 1024 * 1024  # 5MB
MAX_CONTENT_DEPTH = 32


class ValidationError(Exception):
    """Validation failed."""

    pass


class HydrationError(ValidationError):
    """Persisted project content could not be loaded into the builder."""

    pass


@dataclass(frozen=True)
class MutationError:
    """Rejected store mutation (for Result pattern)."""

    message: str
    component_id: str | None = None
    index: int | None = None


def validate_content_size(data: str | bytes, max_size: int = MAX_CONTENT_SIZE) -> None:
    """
    Reject oversized serialized content before decoding it.

    Raises:
        ValidationError: If size exceeds limit
    """
    size = sys.getsizeof(data)
    if size > max_size:
        raise ValidationError(f"Content size {size} bytes exceeds maximum {max_size} bytes")


def validate_content_depth(obj: Any, max_depth: int = MAX_CONTENT_DEPTH, current_depth: int = 0) -> None:
    """
    Validate nesting depth of decoded content.

    Raises:
        ValidationError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise ValidationError(f"Content nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_content_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_content_depth(item, max_depth, current_depth + 1)
