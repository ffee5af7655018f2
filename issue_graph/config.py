"""Configuration management for issue-graph using YAML files."""

from pathlib import Path
from typing import Any

import structlog
import yaml

from issue_graph.errors import ConfigurationError
from issue_graph.styles import DEFAULT_STYLES, StyleRules

logger = structlog.get_logger()

CONFIG_DIR_NAME = ".issue-graph"

DEFAULTS: dict[str, Any] = {
    "source.path": "issue-graph.yaml",
    "output": "out",
    "render.binary": "dot",
}

STATUS_STYLE_PREFIX = "styles.status."
PRIORITY_STYLE_PREFIX = "styles.priority."


class Config:
    """Configuration manager using YAML file storage.

    Supports both local (repository-level) and global (user-level) configuration.
    Local config is stored in .issue-graph/config.yaml in the current directory.
    Global config is stored in ~/.issue-graph/config.yaml.

    When reading, values are looked up in local config first, then global config.
    """

    def __init__(self, use_global: bool = False, config_dir: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            use_global: If True, use global config only. If False, use local config with global fallback.
            config_dir: Custom directory to store config file (overrides use_global)
        """
        if config_dir is not None:
            self.config_dir = Path(config_dir)
            self.is_global = use_global
        elif use_global:
            self.config_dir = Path.home() / CONFIG_DIR_NAME
            self.is_global = True
        else:
            self.config_dir = Path.cwd() / CONFIG_DIR_NAME
            self.is_global = False

        self.config_file = self.config_dir / "config.yaml"
        self._config: dict[str, Any] = self._load(self.config_file)

        self._global_config: dict[str, Any] = {}
        if not self.is_global:
            global_config_file = Path.home() / CONFIG_DIR_NAME / "config.yaml"
            if global_config_file.exists() and global_config_file != self.config_file:
                try:
                    self._global_config = self._load(global_config_file)
                except ConfigurationError as e:
                    logger.warning("Failed to load global config", error=str(e))

        logger.debug("Config initialized", config_file=str(self.config_file), is_global=self.is_global)

    def _load(self, path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file, or an empty config if it is missing."""
        if not path.exists():
            logger.debug("Config file does not exist, initializing empty config", path=str(path))
            return {}

        try:
            with open(path, "r") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to load config", error=str(e))
            raise ConfigurationError(f"Failed to load config from {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        logger.debug("Config loaded successfully", keys=list(config.keys()))
        return config

    def _save(self) -> None:
        """Save configuration to YAML file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w") as f:
                yaml.safe_dump(self._config, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
            logger.debug("Config saved successfully")
        except OSError as e:
            logger.error("Failed to save config", error=str(e))
            raise ConfigurationError(f"Failed to save config to {self.config_file}: {e}") from e

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value.

        Local config wins over global config, which wins over built-in defaults.

        Args:
            key: Configuration key
            default: Value returned when the key is set nowhere and has no built-in default

        Returns:
            Configuration value or default
        """
        if key in self._config:
            logger.debug("Getting config value from local", key=key)
            return self._config[key]

        if not self.is_global and key in self._global_config:
            logger.debug("Getting config value from global", key=key)
            return self._global_config[key]

        logger.debug("Config value not found", key=key)
        return DEFAULTS.get(key, default)

    def get_int(self, key: str) -> int | None:
        value = self.get(key)
        if value is None or value == "":
            return None
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Config value {key} must be an integer, got {value!r}") from e

    def set(self, key: str, value: str) -> None:
        """Set a configuration value.

        Args:
            key: Configuration key
            value: Configuration value
        """
        logger.debug("Setting config value", key=key)
        self._config[key] = value
        self._save()

    def unset(self, key: str) -> None:
        """Remove a configuration value.

        Args:
            key: Configuration key
        """
        logger.debug("Unsetting config value", key=key)
        if key in self._config:
            del self._config[key]
            self._save()

    def list(self) -> dict[str, Any]:
        """List all configuration settings.

        For local config, merges global config with local config (local takes precedence).

        Returns:
            Dictionary of all config settings
        """
        if self.is_global:
            logger.debug("Listing global config values", count=len(self._config))
            return self._config.copy()

        merged = self._global_config.copy()
        merged.update(self._config)
        logger.debug("Listing merged config values", count=len(merged))
        return merged

    def styles(self) -> StyleRules:
        """Build style rules from the defaults plus any ``styles.*`` overrides."""
        settings = self.list()
        status = {
            key[len(STATUS_STYLE_PREFIX) :]: str(value)
            for key, value in settings.items()
            if key.startswith(STATUS_STYLE_PREFIX)
        }
        priorities = {
            key[len(PRIORITY_STYLE_PREFIX) :]: str(value)
            for key, value in settings.items()
            if key.startswith(PRIORITY_STYLE_PREFIX)
        }
        if not status and not priorities:
            return DEFAULT_STYLES
        logger.debug("Applying style overrides", status=list(status), priorities=list(priorities))
        return DEFAULT_STYLES.with_overrides(status=status, priorities=priorities)


def get_config(use_global: bool = False) -> Config:
    """Get a configuration instance.

    Args:
        use_global: If True, return global config. If False, return local config with global fallback.

    Returns:
        Config instance
    """
    return Config(use_global=use_global)
