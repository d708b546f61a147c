"""Pytest configuration and fixtures."""

import os

import httpx
import pytest
import respx

from webbuilder.clients import BackendClient
from webbuilder.core import Settings
from webbuilder.registry import ComponentRegistry
from webbuilder.state import BuilderStore, Component

BACKEND_URL = "http://backend.test/api"


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["WB_LOG_LEVEL"] = "DEBUG"
    os.environ["WB_BACKEND_URL"] = BACKEND_URL


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings, independent of the cached environment settings."""
    return Settings(backend_url=BACKEND_URL, history_limit=50)


@pytest.fixture
def registry():
    """Component registry built from the full catalog."""
    return ComponentRegistry()


@pytest.fixture
def store():
    """Empty builder store."""
    return BuilderStore()


# ============================================================================
# Component Fixtures
# ============================================================================

@pytest.fixture
def sample_components():
    """Three components as persisted by the project service."""
    return [
        {"id": "header-1", "type": "header", "data": {"logo": "Acme", "links": ["Home", "Contact"]}},
        {"id": "hero-2", "type": "hero", "data": {"title": "Welcome", "cta": "Start"}},
        {
            "id": "faq-3",
            "type": "faq",
            "data": {"title": "FAQ", "items": [{"question": "Why?", "answer": "Because."}]},
        },
    ]


@pytest.fixture
def loaded_store(store, sample_components):
    """Store hydrated with the sample components."""
    store.initialize_from_project({"content": {"components": sample_components}})
    return store


@pytest.fixture
def make_component():
    """Factory for ad-hoc components."""

    def _make(component_id: str, component_type: str = "text", **data) -> Component:
        return Component(id=component_id, type=component_type, data=data)

    return _make


# ============================================================================
# Backend Fixtures
# ============================================================================

@pytest.fixture
def project_payload(sample_components):
    """Project record as returned by GET /projects/{id}."""
    return {
        "success": True,
        "data": {
            "id": "p1",
            "name": "My Site!",
            "content": {"components": sample_components},
        },
    }


@pytest.fixture
def backend_client():
    """Backend client pointed at the mocked API."""
    client = BackendClient(BACKEND_URL, timeout=1.0, export_timeout=1.0, fail_max=3, reset_timeout=60)
    yield client
    client.close()


@pytest.fixture
def mock_backend():
    """respx router for the backend API."""
    with respx.mock(base_url=BACKEND_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def ok():
    """Builds success envelope responses."""

    def _ok(data=None, message=None):
        body = {"success": True, "data": data}
        if message:
            body["message"] = message
        return httpx.Response(200, json=body)

    return _ok
