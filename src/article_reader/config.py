"""Configuration loader for article_reader."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from common.config import ConfigSingleton, find_config_path, load_yaml

# Load .env file if it exists
load_dotenv()

CONFIG_DIR = Path(__file__).parent / "configs"
CONFIG_ENV_VAR = "ARTICLE_READER_CONFIG"

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ReaderConfig:
    log_file: str = "parser_errors.log"
    log_level: str = "WARNING"
    user_agent: str = "article-reader/1.0"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVEL_NAMES:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. Must be one of {list(_LEVEL_NAMES)}"
            )
        if not self.log_file:
            raise ValueError("log_file must not be empty")


def _parse_config(data: dict) -> ReaderConfig:
    """Build a ReaderConfig from YAML data, applying environment overrides."""
    defaults = ReaderConfig()
    return ReaderConfig(
        log_file=os.getenv("ARTICLE_READER_LOG_FILE") or data.get("log_file", defaults.log_file),
        log_level=os.getenv("ARTICLE_READER_LOG_LEVEL") or data.get("log_level", defaults.log_level),
        user_agent=data.get("user_agent", defaults.user_agent),
    )


def load_config(name: str | None = None) -> ReaderConfig:
    """Load config by name (e.g. 'default' or 'test') or path to a YAML file.

    When name is None the ARTICLE_READER_CONFIG env var is used, then 'default'.
    """
    config_path = find_config_path(name, CONFIG_DIR, env_var=CONFIG_ENV_VAR)
    return _parse_config(load_yaml(config_path))


_manager: ConfigSingleton[ReaderConfig] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
