"""Application configuration stored as JSON."""

from __future__ import annotations

import json
import os
from dataclasses import asdict
from pathlib import Path

from logger import get_logger
from models import Config, Currency

logger = get_logger(__name__)


def get_config_path() -> Path:
    """Get config path from environment variable or default location."""
    if env_path := os.environ.get("WORKLOG_CONFIG"):
        return Path(env_path)
    return Path.home() / ".worklog" / "config.json"


def load_config(path: Path | None = None) -> Config:
    """Load config from disk. Missing or unreadable files give the defaults."""
    path = path or get_config_path()
    config = Config()
    if not path.exists():
        return config

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Failed to read config %s, using defaults: %s", path, e)
        return config

    if not isinstance(data, dict):
        logger.warning("Config %s is not a JSON object, using defaults", path)
        return config

    if "default_currency" in data:
        try:
            config.default_currency = Currency(data["default_currency"])
        except ValueError:
            logger.warning("Unknown default_currency %r in %s", data["default_currency"], path)
    if isinstance(data.get("export_dir"), str):
        config.export_dir = data["export_dir"]
    if isinstance(data.get("log_file"), str):
        config.log_file = data["log_file"]

    return config


def save_config(config: Config, path: Path | None = None) -> None:
    """Save config to disk."""
    path = path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    data = asdict(config)
    data["default_currency"] = config.default_currency.value
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
