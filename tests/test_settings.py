"""
Tests for settings helpers.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from app.config.settings import Settings, parse_duration


class TestParseDuration:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("3600000", timedelta(hours=1)),
            ("1500", timedelta(milliseconds=1500)),
            ("1h", timedelta(hours=1)),
            ("30m", timedelta(minutes=30)),
            ("7d", timedelta(days=7)),
            ("2w", timedelta(weeks=2)),
            ("45s", timedelta(seconds=45)),
            ("1500ms", timedelta(milliseconds=1500)),
            ("1D", timedelta(days=1)),
            ("1.5h", timedelta(minutes=90)),
            ("7 days", timedelta(days=7)),
            ("2 hours", timedelta(hours=2)),
            ("1 hr", timedelta(hours=1)),
            ("90 minutes", timedelta(minutes=90)),
            ("10 secs", timedelta(seconds=10)),
            ("1 year", timedelta(days=365.25)),
            (" 1d ", timedelta(days=1)),
        ],
    )
    def test_valid_durations(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["", "soon", "1 fortnight", "-1d", "h1", "0", "0d", "1 h 2"])
    def test_invalid_durations_raise(self, value):
        with pytest.raises(ValueError):
            parse_duration(value)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("PORT", "EXPIRES_IN", "MONGODB_DB_NAME", "CORS_ORIGINS"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.port == 5000
        assert settings.mongodb_db_name == "l2-assignment-06"
        assert settings.get_token_lifetime() == timedelta(days=1)
        assert settings.get_cors_origins_list() == ["*"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("EXPIRES_IN", "12h")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
        settings = Settings(_env_file=None)
        assert settings.port == 8080
        assert settings.get_token_lifetime() == timedelta(hours=12)
        assert settings.get_cors_origins_list() == ["http://a.test", "http://b.test"]

    def test_long_form_expires_in(self, monkeypatch):
        monkeypatch.setenv("EXPIRES_IN", "7 days")
        assert Settings(_env_file=None).get_token_lifetime() == timedelta(days=7)

    def test_invalid_expires_in_fails_at_load(self, monkeypatch):
        monkeypatch.setenv("EXPIRES_IN", "a while")
        with pytest.raises(ValidationError, match="expires_in"):
            Settings(_env_file=None)

    def test_missing_jwt_secret_fails_at_load(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET", raising=False)
        with pytest.raises(ValidationError, match="jwt_secret"):
            Settings(_env_file=None)

    def test_empty_jwt_secret_fails_at_load(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "")
        with pytest.raises(ValidationError, match="jwt_secret"):
            Settings(_env_file=None)
