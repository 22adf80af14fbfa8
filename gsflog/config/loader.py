"""
Configuration loader for parser settings.

Allows users to override settings via YAML configuration files.
"""

import yaml
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional

from .settings import ParserSettings, TRUE_VALUES

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and applies custom configuration from YAML files."""

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to custom config file, tried before the
                default gsflog.yaml locations

        Returns:
            Configuration dictionary
        """
        search_paths = [
            Path("gsflog.yaml"),
            Path("config/gsflog.yaml"),
            Path.home() / ".gsflog" / "gsflog.yaml",
        ]

        if config_path:
            search_paths.insert(0, Path(config_path))

        for path in search_paths:
            if path.exists():
                try:
                    with open(path, "r") as f:
                        config = yaml.safe_load(f) or {}
                except (OSError, yaml.YAMLError) as e:
                    logger.error(f"Failed to load config from {path}: {e}")
                    continue

                if not isinstance(config, dict):
                    logger.error(f"Ignoring config {path}: top level must be a mapping")
                    continue

                logger.info(f"Loaded configuration from {path}")
                return config

        logger.debug("No custom configuration file found, using defaults")
        return {}

    @staticmethod
    def apply_config(config: Dict[str, Any], settings: ParserSettings) -> ParserSettings:
        """
        Apply custom configuration on top of existing settings.

        Args:
            config: Configuration dictionary from YAML
            settings: Settings to start from

        Returns:
            New settings with the recognised keys applied
        """
        changes: Dict[str, Any] = {}

        for key in ("encoding", "errors"):
            if key in config:
                value = config[key]
                if isinstance(value, str) and value:
                    changes[key] = value
                else:
                    logger.warning(f"Invalid {key} setting {value!r}, keeping {getattr(settings, key)!r}")

        if "flush_trailing_match" in config:
            value = config["flush_trailing_match"]
            if isinstance(value, bool):
                changes["flush_trailing_match"] = value
            elif isinstance(value, str):
                changes["flush_trailing_match"] = value.lower() in TRUE_VALUES
            else:
                logger.warning(f"Invalid flush_trailing_match setting {value!r}")

        if "log_level" in config:
            value = str(config["log_level"]).upper()
            if isinstance(logging.getLevelName(value), int):
                changes["log_level"] = value
            else:
                logger.warning(f"Invalid log_level setting {value!r}")

        unknown = set(config) - {"encoding", "errors", "flush_trailing_match", "log_level"}
        for key in sorted(unknown):
            logger.warning(f"Unknown configuration key: {key}")

        return replace(settings, **changes)


def load_settings(config_path: Optional[str] = None) -> ParserSettings:
    """
    Load settings from the environment and apply a config file on top.

    Args:
        config_path: Optional path to custom config file
    """
    loader = ConfigLoader()
    settings = ParserSettings.from_env()
    config = loader.load_config(config_path)
    if config:
        settings = loader.apply_config(config, settings)
    return settings
