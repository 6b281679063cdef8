"""Test configuration management."""

from pathlib import Path

from querysync.config.config import (
    API_BASE_URL_DEFAULT,
    MODAL_PARAM_DEFAULT,
    REQUEST_TIMEOUT_SECONDS_DEFAULT,
    Config,
)
from querysync.config.paths import default_config_path


def _reload() -> Config:
    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    return Config.load()


def test_missing_file_yields_defaults_without_writing(config_runtime_env: None) -> None:
    """Loading without a config file returns defaults and leaves the disk untouched."""
    _ = config_runtime_env

    config = _reload()

    assert config.log_file is None
    assert config.api_base_url == API_BASE_URL_DEFAULT
    assert config.request_timeout_seconds == REQUEST_TIMEOUT_SECONDS_DEFAULT
    assert config.modal_param == MODAL_PARAM_DEFAULT
    assert config.query_stale_after_seconds is None
    assert not default_config_path().exists()


def test_save_load_toml(config_runtime_env: None) -> None:
    """Saved values survive a reload from the portable location."""
    _ = config_runtime_env

    written = Config(
        log_file=Path("/test/logs/querysync.log"),
        api_base_url="https://portal.example/api",
        request_timeout_seconds=30.0,
        modal_param="dialog",
        query_stale_after_seconds=60.0,
    ).save()

    loaded = _reload()

    assert written == default_config_path()
    assert loaded.log_file == Path("/test/logs/querysync.log")
    assert loaded.api_base_url == "https://portal.example/api"
    assert loaded.request_timeout_seconds == 30.0
    assert loaded.modal_param == "dialog"
    assert loaded.query_stale_after_seconds == 60.0


def test_save_load_none_values(config_runtime_env: None) -> None:
    """Optional values left unset are omitted and load back as None."""
    _ = config_runtime_env

    _ = Config(log_file=None, query_stale_after_seconds=None).save()

    loaded = _reload()

    assert loaded.log_file is None
    assert loaded.query_stale_after_seconds is None


def test_singleton_behavior(config_runtime_env: None) -> None:
    """Repeated loads without an explicit file return the same object."""
    _ = config_runtime_env

    config1 = Config.load()
    config1.modal_param = "panel"

    config2 = Config.load()

    assert config2 is config1
    assert config2.modal_param == "panel"


def test_toml_comments(config_runtime_env: None) -> None:
    """The written TOML explains each setting."""
    _ = config_runtime_env

    _ = Config().save()

    content = default_config_path().read_text(encoding="utf-8")

    assert "# querysync configuration file" in content
    assert "# Log file path" in content
    assert "# Query-string parameter that carries the modal mode" in content
    assert 'modal_param = "modal"' in content


def test_unknown_keys_are_ignored(config_runtime_env: None, tmp_path: Path) -> None:
    """Keys the dataclass does not declare are dropped with a warning."""
    _ = config_runtime_env

    source = tmp_path / "custom.toml"
    _ = source.write_text(
        'modal_param = "sheet"\nlog_file = ""\nlegacy_theme = "dark"\n',
        encoding="utf-8",
    )

    loaded = Config.load(source)

    assert loaded.modal_param == "sheet"
    assert loaded.log_file is None
    assert not hasattr(loaded, "legacy_theme")
