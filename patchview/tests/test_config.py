from pathlib import Path

import pytest

from patchview.config import ViewerSettings, load_settings
from patchview.exceptions import InvalidConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "PATCHVIEW_CONFIG",
        "PATCHVIEW_NO_COLOR",
        "PATCHVIEW_DOWNLOAD_NAME",
        "PATCHVIEW_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings == ViewerSettings()
    assert settings.download_name == "fix.diff"
    assert settings.color is True


def test_yaml_file(tmp_path: Path):
    config = tmp_path / "patchview.yaml"
    config.write_text("color: false\ndownload_name: proposed.patch\n", encoding="utf-8")

    settings = load_settings(config)

    assert settings.color is False
    assert settings.download_name == "proposed.patch"
    assert settings.show_line_numbers is True


def test_config_path_from_env(tmp_path: Path, monkeypatch):
    config = tmp_path / "patchview.yaml"
    config.write_text("show_line_numbers: false\n", encoding="utf-8")
    monkeypatch.setenv("PATCHVIEW_CONFIG", str(config))

    assert load_settings().show_line_numbers is False


def test_env_wins_over_file(tmp_path: Path, monkeypatch):
    config = tmp_path / "patchview.yaml"
    config.write_text("color: true\nlog_level: INFO\n", encoding="utf-8")
    monkeypatch.setenv("PATCHVIEW_NO_COLOR", "1")
    monkeypatch.setenv("PATCHVIEW_LOG_LEVEL", "debug")

    settings = load_settings(config)

    assert settings.color is False
    assert settings.log_level == "DEBUG"


def test_empty_file_gives_defaults(tmp_path: Path):
    config = tmp_path / "empty.yaml"
    config.write_text("", encoding="utf-8")
    assert load_settings(config) == ViewerSettings()


def test_unknown_key_rejected(tmp_path: Path):
    config = tmp_path / "bad.yaml"
    config.write_text("colour: false\n", encoding="utf-8")

    with pytest.raises(InvalidConfigError) as exc_info:
        load_settings(config)
    assert "bad.yaml" in str(exc_info.value)


def test_non_mapping_rejected(tmp_path: Path):
    config = tmp_path / "list.yaml"
    config.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(InvalidConfigError):
        load_settings(config)


def test_missing_file_rejected(tmp_path: Path):
    with pytest.raises(InvalidConfigError):
        load_settings(tmp_path / "missing.yaml")
