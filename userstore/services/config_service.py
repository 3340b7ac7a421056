"""
Configuration service for repository and menu settings.

Provides a single source of truth for configuration, loaded from JSON
with environment variable overrides.
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Any, Optional

CONFIG_ENV_VAR = "USERSTORE_CONFIG"
LOG_LEVEL_ENV_VAR = "USERSTORE_LOG_LEVEL"


class ConfigService:
    """Service for loading and providing user store configuration."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize the configuration service.

        Args:
            config_path: Path to configuration JSON file.
                        Defaults to $USERSTORE_CONFIG, then
                        userstore/config/repository_config.json
        """
        if config_path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if env_path:
                config_path = Path(env_path)
            else:
                package_dir = Path(__file__).parent.parent
                config_path = package_dir / "config" / "repository_config.json"

        self.config_path = config_path
        self._config = None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from JSON file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            json.JSONDecodeError: If config file is invalid JSON
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration (cached)."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def is_strict_batch_size(self) -> bool:
        """Whether save_batch must reject a wrong declared count."""
        return bool(self.config.get("repository", {}).get("strictBatchSize", True))

    def get_log_level(self) -> str:
        """Get log level name, $USERSTORE_LOG_LEVEL taking precedence."""
        env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
        if env_level:
            return env_level
        return self.config.get("logging", {}).get("level", "INFO")

    def get_demo_batch(self) -> List[Dict[str, Any]]:
        """Seed users for the batch save demo."""
        return self.config.get("demo", {}).get("batch", [])

    def get_demo_bulk(self) -> List[Dict[str, Any]]:
        """Seed users for the save-all demo."""
        return self.config.get("demo", {}).get("bulk", [])


# Global instance for easy import
_config_service = None

def get_config_service() -> ConfigService:
    """Get the global configuration service instance."""
    global _config_service
    if _config_service is None:
        _config_service = ConfigService()
    return _config_service


def reset_config_service() -> None:
    """Drop the cached global instance so the next call reloads."""
    global _config_service
    _config_service = None
