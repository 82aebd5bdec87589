from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from stripe_terminal.client import StripeClient
from stripe_terminal.core.config import DEFAULT_API_BASE, StripeSettings, configure_logging


def test_settings_defaults() -> None:
    s = StripeSettings()
    assert s.api_key is None
    assert s.api_base == DEFAULT_API_BASE
    assert s.api_version is None
    assert s.stripe_account is None
    assert s.timeout == 30.0
    assert s.log_level == "WARNING"


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRIPE_API_KEY", "sk_test_env")
    monkeypatch.setenv("STRIPE_API_BASE", "http://mock/")
    monkeypatch.setenv("STRIPE_API_VERSION", "2024-06-20")
    monkeypatch.setenv("STRIPE_ACCOUNT", "acct_123")
    monkeypatch.setenv("STRIPE_TIMEOUT", "5")
    monkeypatch.setenv("STRIPE_LOG_LEVEL", "debug")

    s = StripeSettings()
    assert s.api_key == "sk_test_env"
    assert s.api_base == "http://mock"
    assert s.api_version == "2024-06-20"
    assert s.stripe_account == "acct_123"
    assert s.timeout == 5.0
    assert s.log_level == "DEBUG"


def test_settings_read_from_dotenv_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("STRIPE_API_KEY=sk_test_dotenv\n", encoding="utf-8")
    assert StripeSettings().api_key == "sk_test_dotenv"


def test_settings_reject_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRIPE_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        StripeSettings()


def test_settings_reject_non_positive_timeout() -> None:
    with pytest.raises(ValidationError):
        StripeSettings(timeout=0)


def test_client_from_settings_applies_values() -> None:
    s = StripeSettings(api_key="sk_test_x", api_base="http://mock", stripe_account="acct_9", log_level="INFO")
    client = StripeClient.from_settings(s)
    assert client.requestor.api_key == "sk_test_x"
    assert client.requestor.api_base == "http://mock"
    assert client.requestor.stripe_account == "acct_9"
    assert logging.getLogger("stripe_terminal").level == logging.INFO
    client.close()


def test_configure_logging_sets_package_logger_level() -> None:
    configure_logging("error")
    assert logging.getLogger("stripe_terminal").level == logging.ERROR
    configure_logging("WARNING")
