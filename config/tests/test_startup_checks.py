from django.core.exceptions import ImproperlyConfigured

import pytest

from config.startup_checks import REQUIRED_PRODUCTION_VARS, validate_production_config


@pytest.fixture
def production_env(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "a-real-production-secret")
    monkeypatch.setenv("ALLOWED_HOSTS", "accounts.example.com")
    monkeypatch.setenv("DB_NAME", "accounts")
    monkeypatch.setenv("DB_USER", "accounts")
    monkeypatch.setenv("DB_PASSWORD", "secret")
    return monkeypatch


@pytest.mark.unit
@pytest.mark.config
class TestValidateProductionConfig:
    def test_complete_environment_passes(self, production_env) -> None:
        validate_production_config()

    @pytest.mark.parametrize("var", REQUIRED_PRODUCTION_VARS)
    def test_missing_variable(self, production_env, var) -> None:
        production_env.delenv(var)

        with pytest.raises(ImproperlyConfigured, match=var):
            validate_production_config()

    def test_blank_allowed_hosts(self, production_env) -> None:
        production_env.setenv("ALLOWED_HOSTS", " , ")

        with pytest.raises(ImproperlyConfigured, match="at least one hostname"):
            validate_production_config()

    def test_placeholder_secret_key(self, production_env) -> None:
        production_env.setenv(
            "SECRET_KEY", "django-insecure-placeholder-key-for-tests-and-local-dev"
        )

        with pytest.raises(ImproperlyConfigured, match="SECRET_KEY"):
            validate_production_config()
