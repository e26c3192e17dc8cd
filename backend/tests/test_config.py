"""Settings — verifies environment-driven configuration and its defaults."""

import pytest
from pydantic import ValidationError

from employee_registry.config import Settings


def test_defaults(monkeypatch):
    for var in (
        "PORT", "REQUEST_LOG_FORMAT", "MORGAN_FORMAT", "SKIP_CODE_THRESHOLD",
    ):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.request_log_format == "tiny"
    assert settings.skip_code_threshold == 400


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8081")
    monkeypatch.setenv("REQUEST_LOG_FORMAT", "Combined")
    monkeypatch.setenv("SKIP_CODE_THRESHOLD", "0")
    settings = Settings(_env_file=None)
    assert settings.port == 8081
    assert settings.request_log_format == "combined"
    assert settings.skip_code_threshold == 0


def test_rejects_unknown_request_log_format(monkeypatch):
    monkeypatch.setenv("REQUEST_LOG_FORMAT", "verbose")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_rejects_out_of_range_port(monkeypatch):
    monkeypatch.setenv("PORT", "70000")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_reads_log_format_from_morgan_format(monkeypatch):
    monkeypatch.delenv("REQUEST_LOG_FORMAT", raising=False)
    monkeypatch.setenv("MORGAN_FORMAT", "dev")
    assert Settings(_env_file=None).request_log_format == "dev"
