"""Fast JSON encoding and decoding for persisted project content."""

from typing import Any

import orjson


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def loads(data: str | bytes) -> Any:
    """
    Decode a JSON document.

    Args:
        data: JSON text or UTF-8 bytes

    Returns:
        Decoded Python value

    Raises:
        JSONParseError: If the document is not valid JSON
    """
    try:
        return orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise JSONParseError(f"Invalid JSON: {e}", e) from e


def decode_mapping(data: str | bytes | dict[str, Any]) -> dict[str, Any]:
    """
    Decode content that may arrive either already parsed or JSON-encoded.

    Raises:
        JSONParseError: If the text is invalid or does not hold an object
    """
    if isinstance(data, dict):
        return data

    result = loads(data)
    if not isinstance(result, dict):
        raise JSONParseError(f"Expected object, got {type(result).__name__}")
    return result
