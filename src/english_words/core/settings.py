# src/english_words/core/settings.py
"""
User settings: GigaChat credentials and the word list path.

Stored as YAML. Loading merges the file over the defaults, so a partial or
missing file is fine. GIGACHAT_CREDENTIALS in the environment wins over the
file.
"""

import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path

import yaml


CONFIG_ENV = "ENGLISH_WORDS_CONFIG"
CREDENTIALS_ENV = "GIGACHAT_CREDENTIALS"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "english-words" / "settings.yaml"


@dataclass
class Settings:
    gigachat_credentials: str = ""
    file_path: str = "English Words.md"


SETTING_KEYS = tuple(f.name for f in fields(Settings))


def config_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path)
    return Path(os.environ.get(CONFIG_ENV, DEFAULT_CONFIG_PATH))


def load_settings(path: str | Path | None = None, use_env: bool = True) -> Settings:
    file = config_path(path)
    data = {}
    if file.is_file():
        with open(file, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Settings file {file} is not valid YAML: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {file} must contain a mapping")

    settings = Settings(**{k: str(v) for k, v in data.items() if k in SETTING_KEYS and v is not None})

    credentials = os.environ.get(CREDENTIALS_ENV) if use_env else None
    if credentials:
        settings = replace(settings, gigachat_credentials=credentials)
    return settings


def save_settings(settings: Settings, path: str | Path | None = None) -> Path:
    file = config_path(path)
    file.parent.mkdir(parents=True, exist_ok=True)
    with open(file, "w", encoding="utf-8") as f:
        yaml.safe_dump(asdict(settings), f, allow_unicode=True, sort_keys=False)
    return file
