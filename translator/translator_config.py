# Configuration for the CREATE TABLE translator.
# Output layout and dialect-specific choices that callers may want to tune per environment.

import json
import logging
from typing import Any, Dict

logger = logging.getLogger("TranslatorConfig")


class TranslatorConfig:
    """
    Translator settings.
    Loads an environment section from a JSON config file, or built-in defaults.

    Example file::

        {
          "default": {"output": {"indent": 4}},
          "prod": {"mysql": {"table_options": "ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci"}}
        }
    """

    def __init__(self, config_path: str = None, environment: str = "dev"):
        self.environment = environment
        self._config: Dict[str, Any] = {}
        self._load_defaults()

        if config_path:
            self._load_from_file(config_path)

    def _load_from_file(self, config_path: str) -> None:
        """Merge one environment section of a JSON file over the defaults."""
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                all_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
            return

        section = all_config.get(self.environment, all_config.get("default", {}))
        for key, value in section.items():
            if isinstance(value, dict) and isinstance(self._config.get(key), dict):
                self._config[key].update(value)
            else:
                self._config[key] = value
        logger.info(f"Loaded config for environment: {self.environment}")

    def _load_defaults(self) -> None:
        """Load default configuration values."""
        self._config = {
            "mysql": {
                "table_options": "ENGINE=InnoDB DEFAULT CHARSET=utf8mb4",
            },
            "sqlserver": {
                "enum_type": "NVARCHAR(255)",
            },
            "output": {
                "indent": 4,
            },
            "logging": {
                "log_level": "INFO",
            },
        }

    @property
    def mysql_table_options(self) -> str:
        return self.get("mysql.table_options", "")

    @property
    def sqlserver_enum_type(self) -> str:
        return self.get("sqlserver.enum_type", "NVARCHAR(255)")

    @property
    def indent(self) -> str:
        """Indentation placed before each column / constraint line."""
        return " " * int(self.get("output.indent", 4))

    @property
    def log_level(self) -> str:
        return str(self.get("logging.log_level", "INFO")).upper()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-notation key."""
        keys = key.split(".")
        value = self._config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default


def load_config(environment: str = "dev", config_path: str = None) -> TranslatorConfig:
    """Load configuration for the given environment."""
    return TranslatorConfig(config_path=config_path, environment=environment)
