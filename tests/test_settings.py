# tests/test_settings.py
"""Tests for YAML settings."""

import pytest
import yaml

from english_words.core.settings import Settings, config_path, load_settings, save_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("GIGACHAT_CREDENTIALS", raising=False)
    monkeypatch.delenv("ENGLISH_WORDS_CONFIG", raising=False)


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "nope.yaml") == Settings()
    assert Settings().file_path == "English Words.md"


def test_file_merged_over_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("gigachat_credentials: abc\nsomething_else: 1\n", encoding="utf-8")

    settings = load_settings(path)
    assert settings.gigachat_credentials == "abc"
    assert settings.file_path == "English Words.md"


def test_empty_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_non_mapping_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(path)


def test_env_overrides_credentials(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text("gigachat_credentials: from-file\n", encoding="utf-8")
    monkeypatch.setenv("GIGACHAT_CREDENTIALS", "from-env")

    assert load_settings(path).gigachat_credentials == "from-env"
    assert load_settings(path, use_env=False).gigachat_credentials == "from-file"


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "settings.yaml"
    saved = Settings(gigachat_credentials="abc", file_path="Словарь/Words.md")

    assert save_settings(saved, path) == path
    assert load_settings(path) == saved
    assert yaml.safe_load(path.read_text(encoding="utf-8")) == {
        "gigachat_credentials": "abc",
        "file_path": "Словарь/Words.md",
    }


def test_config_path_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("ENGLISH_WORDS_CONFIG", str(tmp_path / "x.yaml"))
    assert config_path() == tmp_path / "x.yaml"
    assert config_path(tmp_path / "y.yaml") == tmp_path / "y.yaml"


def test_invalid_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("gigachat_credentials: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="not valid YAML"):
        load_settings(path)
