"""brewtracker.yml settings."""

from pathlib import Path

import pytest

from brewtracker.config import CONFIG_FILE, ConfigError, Settings, load_settings


def test_defaults_without_config_file(tmp_path):
    settings = load_settings(tmp_path)
    assert settings == Settings(data_file=tmp_path / "data.json")
    assert settings.tick_rate == 0.25
    assert settings.log_file is None


def test_values_from_config_file(tmp_path):
    (tmp_path / CONFIG_FILE).write_text(
        "data_file: brews/mine.json\ntick_rate: 0.5\nlog_file: bt.log\n"
    )
    settings = load_settings(tmp_path)
    assert settings.data_file == tmp_path / "brews" / "mine.json"
    assert settings.tick_rate == 0.5
    assert settings.log_file == tmp_path / "bt.log"


def test_empty_config_file_means_defaults(tmp_path):
    (tmp_path / CONFIG_FILE).write_text("")
    assert load_settings(tmp_path).data_file == tmp_path / "data.json"


def test_uses_cwd_by_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_settings().data_file == Path.cwd() / "data.json"


@pytest.mark.parametrize(
    "content, message",
    [
        ("tick_rate: [1\n", "Cannot read"),
        ("- a\n- b\n", "must contain a mapping"),
        ("refresh: 1\n", "unknown setting"),
        ("tick_rate: 0\n", "tick_rate"),
        ("tick_rate: fast\n", "tick_rate"),
        ("data_file: ''\n", "data_file"),
    ],
)
def test_invalid_config(tmp_path, content, message):
    (tmp_path / CONFIG_FILE).write_text(content)
    with pytest.raises(ConfigError, match=message):
        load_settings(tmp_path)
