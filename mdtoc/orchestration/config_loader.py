from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from mdtoc.errors import ConfigError
from mdtoc.models.configs import TocSettings


def _load_structured_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    ext = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc

    try:
        if ext in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        elif ext == ".toml":
            data = tomllib.loads(text)
        elif ext == ".json":
            data = json.loads(text)
        else:
            raise ConfigError(f"Unsupported config format '{ext}' for {path}")
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Unable to parse config file {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at the top level")
    return data


def load_settings(path: Path) -> TocSettings:
    raw = _load_structured_file(Path(path))
    # allow the settings to live under a [mdtoc] table in a shared file
    if isinstance(raw.get("mdtoc"), dict):
        raw = raw["mdtoc"]
    try:
        return TocSettings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {path}: {exc}") from exc


__all__ = ["load_settings"]
