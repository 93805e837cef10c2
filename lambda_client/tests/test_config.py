"""
Where: lambda_client/tests/test_config.py
What: Validate ClientConfig defaults and environment overrides.
Why: Keep retry and transport defaults stable.
"""

import pytest
from pydantic import ValidationError

from lambda_client.config import ClientConfig
from lambda_client.models.result import RetryPolicy


def _clear_env(monkeypatch) -> None:
    for key in ("RETRY_ATTEMPTS", "RETRY_DELAY", "AWS_REGION", "LAMBDA_ENDPOINT_URL", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_defaults(monkeypatch):
    _clear_env(monkeypatch)

    config = ClientConfig(_env_file=None)

    assert config.RETRY_ATTEMPTS == 5
    assert config.RETRY_DELAY == 4.0
    assert config.AWS_REGION == "us-east-1"
    assert config.LAMBDA_ENDPOINT_URL == ""
    assert config.default_retry_policy() == RetryPolicy(attempts=5, delay=4)


def test_env_overrides(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("RETRY_ATTEMPTS", "2")
    monkeypatch.setenv("RETRY_DELAY", "0.5")
    monkeypatch.setenv("LAMBDA_ENDPOINT_URL", "http://localhost:4566")

    config = ClientConfig(_env_file=None)

    assert config.default_retry_policy() == RetryPolicy(attempts=2, delay=0.5)
    assert config.LAMBDA_ENDPOINT_URL == "http://localhost:4566"


def test_invalid_attempts_rejected(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("RETRY_ATTEMPTS", "0")

    with pytest.raises(ValidationError):
        ClientConfig(_env_file=None)
