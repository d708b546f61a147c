"""Tests for log context binding."""

import pytest
import structlog

from webbuilder.core import LogContext


@pytest.fixture(autouse=True)
def clean_context():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.mark.unit
def test_scope_binds_and_unbinds():
    with LogContext(project_id="p1"):
        assert structlog.contextvars.get_contextvars() == {"project_id": "p1"}

    assert structlog.contextvars.get_contextvars() == {}


@pytest.mark.unit
def test_unbind_is_idempotent():
    """Leaving twice only removes the keys once."""
    context = LogContext(project_id="p1")
    context.bind()
    context.unbind()
    structlog.contextvars.bind_contextvars(project_id="other")

    context.unbind()

    assert structlog.contextvars.get_contextvars() == {"project_id": "other"}
    assert not context.active
