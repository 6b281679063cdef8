"""Tests for settings module behavior."""

from __future__ import annotations

import importlib


def test_settings_default_values(config_runtime_env: None) -> None:
    """Default configuration yields the documented runtime constants."""
    _ = config_runtime_env

    import querysync.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.MODAL_PARAM == "modal"
    assert reloaded.QUERY_STALE_AFTER_SECONDS is None
    assert reloaded.API_BASE_URL == "http://localhost:3000/api"
    assert reloaded.REQUEST_TIMEOUT_SECONDS == 15.0


def test_settings_derive_from_config(config_runtime_env: None) -> None:
    """Settings are validated copies of the loaded configuration."""
    _ = config_runtime_env

    from querysync.config.config import config as app_config

    app_config.modal_param = "  dialog  "
    app_config.query_stale_after_seconds = 30
    app_config.api_base_url = "https://portal.example/api/"
    app_config.request_timeout_seconds = 5

    import querysync.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.MODAL_PARAM == "dialog"
    assert reloaded.QUERY_STALE_AFTER_SECONDS == 30.0
    assert reloaded.API_BASE_URL == "https://portal.example/api"
    assert reloaded.REQUEST_TIMEOUT_SECONDS == 5.0


def test_settings_reject_invalid_values(config_runtime_env: None) -> None:
    """Blank or non-positive values fall back to safe defaults."""
    _ = config_runtime_env

    from querysync.config.config import config as app_config

    app_config.modal_param = "   "
    app_config.query_stale_after_seconds = 0
    app_config.request_timeout_seconds = -1

    import querysync.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.MODAL_PARAM == "modal"
    assert reloaded.QUERY_STALE_AFTER_SECONDS is None
    assert reloaded.REQUEST_TIMEOUT_SECONDS == 15.0
