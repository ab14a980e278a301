"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from findeasily.shared.config.settings import Settings


class TestSecrets:

    @pytest.mark.parametrize("missing", ["SECRET_KEY", "JWT_SECRET_KEY"])
    def test_signing_keys_have_no_default(self, monkeypatch, missing):
        monkeypatch.delenv(missing, raising=False)

        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None)

        assert missing in str(exc_info.value)

    def test_keys_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "session-key")
        monkeypatch.setenv("JWT_SECRET_KEY", "jwt-key")

        settings = Settings(_env_file=None)

        assert settings.SECRET_KEY == "session-key"
        assert settings.JWT_SECRET_KEY == "jwt-key"
