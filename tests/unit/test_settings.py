# ============================================================================
# Tests for GusSettings
# ============================================================================
"""Unit tests for configuration loading."""

import pytest

from gusapi.config import settings as settings_module
from gusapi.config.settings import GusSettings, get_settings
from gusapi.constants import PRODUCTION_URL, Environment


class TestGusSettings:
    """Tests for GusSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("GUS_USER_KEY", "GUS_ENVIRONMENT", "GUS_BASE_URL", "GUS_PROXY", "GUS_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

        config = GusSettings(_env_file=None)

        assert config.GUS_ENVIRONMENT is Environment.PROD
        assert config.GUS_USER_KEY is None
        assert config.GUS_TIMEOUT == 30.0
        assert config.GUS_ENVIRONMENT.url == PRODUCTION_URL

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should load values from environment variables."""
        monkeypatch.setenv("GUS_USER_KEY", "secret")
        monkeypatch.setenv("GUS_ENVIRONMENT", " DEV ")
        monkeypatch.setenv("GUS_TIMEOUT", "5")

        config = GusSettings(_env_file=None)

        assert config.GUS_USER_KEY == "secret"
        assert config.GUS_ENVIRONMENT is Environment.DEV
        assert config.GUS_TIMEOUT == 5.0

    def test_transport_options(self) -> None:
        config = GusSettings(_env_file=None, GUS_TIMEOUT=10, GUS_VERIFY_SSL=False, GUS_PROXY=None)
        assert config.transport_options() == {"timeout": 10.0, "verify": False}

    def test_transport_options_with_proxy(self) -> None:
        config = GusSettings(_env_file=None, GUS_PROXY="http://proxy:3128")
        assert config.transport_options()["proxy"] == "http://proxy:3128"

    def test_invalid_environment(self) -> None:
        with pytest.raises(ValueError):
            GusSettings(_env_file=None, GUS_ENVIRONMENT="staging")


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    """Should return the same instance on repeated calls."""
    monkeypatch.setattr(settings_module, "_settings_instance", None)
    assert get_settings() is get_settings()
