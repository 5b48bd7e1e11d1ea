from __future__ import annotations

import pytest

from ses_mailer.config import DEFAULT_API_VERSION, DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings


def test_from_env_reads_required_and_defaults():
    settings = Settings.from_env({"SES_ACCESS_KEY": "access", "SES_SECRET_KEY": "secret"})
    assert settings.access_key == "access"
    assert settings.secret_key == "secret"
    assert settings.version == DEFAULT_API_VERSION == "2010-12-01"
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.default_sender == ""
    assert settings.default_sender_name == ""


def test_from_env_reads_optional_values():
    settings = Settings.from_env(
        {
            "SES_ACCESS_KEY": " access ",
            "SES_SECRET_KEY": "secret",
            "SES_API_VERSION": "2011-01-01",
            "SES_SENDER": "user@example.com",
            "SES_SENDER_NAME": "User",
            "SES_BASE_URL": "https://email.eu-west-1.amazonaws.com",
            "SES_TIMEOUT": "5",
        }
    )
    assert settings.access_key == "access"
    assert settings.version == "2011-01-01"
    assert settings.default_sender == "user@example.com"
    assert settings.default_sender_name == "User"
    assert settings.base_url == "https://email.eu-west-1.amazonaws.com"
    assert settings.timeout == 5.0


@pytest.mark.parametrize("missing", ["SES_ACCESS_KEY", "SES_SECRET_KEY"])
def test_from_env_requires_credentials(missing):
    env = {"SES_ACCESS_KEY": "access", "SES_SECRET_KEY": "secret"}
    env[missing] = "  "
    with pytest.raises(ValueError) as excinfo:
        Settings.from_env(env)
    assert missing in str(excinfo.value)


def test_from_env_rejects_non_numeric_timeout():
    with pytest.raises(ValueError):
        Settings.from_env({"SES_ACCESS_KEY": "a", "SES_SECRET_KEY": "s", "SES_TIMEOUT": "soon"})


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv("SES_ACCESS_KEY", "access")
    monkeypatch.setenv("SES_SECRET_KEY", "secret")
    assert Settings.from_env().access_key == "access"


def test_secret_key_is_hidden_from_repr():
    assert "secret-value" not in repr(Settings(access_key="access", secret_key="secret-value"))
