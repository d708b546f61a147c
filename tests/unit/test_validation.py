"""Tests for JSON decoding and content validation."""

import pytest
from hypothesis import given, strategies as st

from webbuilder.core import (
    JSONParseError,
    ValidationError,
    decode_mapping,
    loads,
    validate_content_depth,
    validate_content_size,
)


@pytest.mark.unit
def test_loads_invalid():
    """Test invalid JSON raises JSONParseError."""
    with pytest.raises(JSONParseError) as exc:
        loads("{not json")
    assert exc.value.original is not None


@pytest.mark.unit
@pytest.mark.parametrize("data", ['{"components": []}', b'{"components": []}', {"components": []}])
def test_decode_mapping_accepts_text_bytes_and_dicts(data):
    """Test content may arrive encoded or decoded."""
    assert decode_mapping(data) == {"components": []}


@pytest.mark.unit
def test_decode_mapping_rejects_non_object():
    """Test a JSON array is not valid content."""
    with pytest.raises(JSONParseError):
        decode_mapping("[1, 2]")


@pytest.mark.unit
def test_size_limit():
    """Test oversized content is rejected."""
    with pytest.raises(ValidationError):
        validate_content_size("x" * 2048, max_size=1024)


@pytest.mark.unit
def test_depth_limit():
    """Test deep nesting is rejected."""
    nested: dict = {}
    cursor = nested
    for _ in range(10):
        cursor["child"] = {}
        cursor = cursor["child"]

    validate_content_depth(nested, max_depth=10)
    with pytest.raises(ValidationError):
        validate_content_depth(nested, max_depth=5)


@given(st.dictionaries(st.text(min_size=1), st.integers()))
def test_flat_mappings_pass_depth_check(data):
    """Property: flat mappings are always shallow enough."""
    validate_content_depth(data)
