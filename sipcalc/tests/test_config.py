from __future__ import annotations

import logging

import pytest

from sipcalc.config import AppSettings
from sipcalc.core.logging import LOG_FORMAT, configure_logging


def test_settings_defaults_match_widget_start_values(monkeypatch):
    for name in ("SIPCALC_DEFAULT_MONTHLY_CONTRIBUTION", "SIPCALC_DEFAULT_YEARS", "SIPCALC_DEFAULT_ANNUAL_RATE_PERCENT"):
        monkeypatch.delenv(name, raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.default_monthly_contribution == 5000.0
    assert settings.default_years == 10
    assert settings.default_annual_rate_percent == 12.0


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("SIPCALC_DEFAULT_YEARS", "15")
    monkeypatch.setenv("SIPCALC_APP_ENV", "staging")

    settings = AppSettings(_env_file=None)

    assert settings.default_years == 15
    assert settings.app_env == "staging"


def test_cors_origins_are_split_and_trimmed():
    settings = AppSettings(_env_file=None, cors_origins="http://a.test, http://b.test ,,")

    assert settings.cors_allowed_origins == ["http://a.test", "http://b.test"]


def test_invalid_default_is_rejected():
    with pytest.raises(ValueError):
        AppSettings(_env_file=None, default_years=-1)


def test_configure_logging_is_idempotent():
    root = logging.getLogger()
    previous_level = root.level
    try:
        configure_logging("warning")
        configure_logging("debug")

        ours = [
            handler
            for handler in root.handlers
            if handler.formatter is not None and handler.formatter._fmt == LOG_FORMAT
        ]
        assert len(ours) == 1
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous_level)
