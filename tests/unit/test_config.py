"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from sbs.config import DEV_JWT_SECRET, Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.jwt_algorithm == "HS256"
        assert settings.jwt_expire_hours == 72
        assert settings.port == 8080
        assert settings.cors_origins == ["*"]
        assert settings.leaderboard_limit == 10

    def test_dev_secret_fallback(self):
        assert Settings(_env_file=None, jwt_secret="").signing_secret == DEV_JWT_SECRET

    def test_configured_secret_used(self):
        assert Settings(_env_file=None, jwt_secret="s3cret").signing_secret == "s3cret"

    def test_hmac_algorithm_normalized(self):
        assert Settings(_env_file=None, jwt_algorithm="hs384").jwt_algorithm == "HS384"

    @pytest.mark.parametrize("alg", ["RS256", "ES256", "none"])
    def test_non_hmac_algorithm_rejected(self, alg):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, jwt_algorithm=alg)

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("SBS_PORT", "9090")
        assert Settings(_env_file=None).port == 9090
