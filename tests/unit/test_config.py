"""Tests for configuration settings."""

import pytest
from pydantic import ValidationError

from webbuilder.core import Settings, get_settings


@pytest.mark.unit
def test_defaults():
    """Test default values."""
    settings = Settings(_env_file=None)

    assert settings.export_credit_cost == 200
    assert settings.default_framework == "tailwind"
    assert settings.history_limit == 200
    assert settings.breaker_fail_max == 5
    assert settings.api_token == ""


@pytest.mark.unit
def test_env_prefix(monkeypatch):
    """Test environment variables with WB_ prefix override defaults."""
    monkeypatch.setenv("WB_EXPORT_CREDIT_COST", "150")
    monkeypatch.setenv("WB_JSON_LOGS", "true")

    settings = Settings()

    assert settings.export_credit_cost == 150
    assert settings.json_logs is True


@pytest.mark.unit
@pytest.mark.parametrize(
    "field,value",
    [
        ("history_limit", 0),
        ("export_credit_cost", -1),
        ("backend_timeout", 0),
    ],
)
def test_invalid_values_rejected(field, value):
    """Test out-of-range values fail validation."""
    with pytest.raises(ValidationError):
        Settings(**{field: value})


@pytest.mark.unit
def test_get_settings_cached():
    """Test settings are cached."""
    assert get_settings() is get_settings()
