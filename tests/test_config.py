"""Tests for settings loading."""

import pytest

from telraam.config import get_settings, reset_settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = get_settings()

        assert settings.base_url == "https://telraam-api.net"
        assert settings.api_version == "v1"
        assert settings.token is None

    def test_token_from_environment_is_secret(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TELRAAM_TOKEN", "s3cret")

        settings = reset_settings()

        assert settings.token == "s3cret"
        assert "s3cret" not in repr(settings)

    def test_reset_returns_fresh_instance(self) -> None:
        before = get_settings()

        assert reset_settings() is not before
        assert get_settings() is not before
