"""Locate and read YAML configuration files."""

import os
from pathlib import Path
from typing import Any

import yaml

from newsdata.config.models import NewsDataConfig

CONFIG_ENV_VAR = "NEWSDATA_CONFIG"

# <repo>/configs/default.yaml, next to src/
_DEFAULT_CONFIG = Path(__file__).resolve().parents[3] / "configs" / "default.yaml"


def load_config(path: Path | str) -> NewsDataConfig:
    """Read a YAML file into a validated NewsDataConfig.

    Sections and keys left out of the file take their defaults; an empty file
    yields the default configuration.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the document is not a mapping.
        pydantic.ValidationError: If a value is invalid.
    """
    return NewsDataConfig.model_validate(_read_mapping(Path(path)))


def get_default_config_path() -> Path:
    """Path of the bundled ``configs/default.yaml``."""
    return _DEFAULT_CONFIG


def resolve_config_path(path: Path | str | None = None) -> Path:
    """Pick the config file to load.

    An explicit ``path`` wins, then the NEWSDATA_CONFIG env var, then the
    bundled default.
    """
    if path:
        return Path(path)
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    return get_default_config_path()


def _read_mapping(path: Path) -> dict[str, Any]:
    with path.open() as f:
        raw = yaml.safe_load(f)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level, got {type(raw).__name__}")
    return raw
