import os
from pathlib import Path
import json
from typing import Dict, Any

# Package defaults (bundled with code)
PACKAGE_CONFIG_DIR = Path(__file__).parent / "defaults"

# User configs (in project root, gitignored)
PROJECT_ROOT = Path(__file__).resolve().parents[3]
USER_CONFIG_DIR = PROJECT_ROOT / "config"

DB_PATH_ENV_VAR = "FINANCE_TRACKER_DB"
DEFAULT_DB_PATH = "data/finance.db"

class ConfigLoader:
    """Load configuration with user overrides"""

    @staticmethod
    def load_config(config_name: str) -> Dict[str, Any]:
        """
        Load config with fallback: user config -> default config

        Args:
            config_name: Name of the config file (e.g., 'settings.json')

        Raises:
            FileNotFoundError: If no config file was found

        Returns:
            Parsed JSON configuration
        """
        user_config_path = USER_CONFIG_DIR / config_name
        if user_config_path.exists():
            with open(user_config_path) as f:
                return json.load(f)

        default_config_path = PACKAGE_CONFIG_DIR / config_name
        if default_config_path.exists():
            with open(default_config_path) as f:
                return json.load(f)

        raise FileNotFoundError(
            f"Config file '{config_name}' not found in:\n"
            f" - {user_config_path}\n"
            f" - {default_config_path}"
        )

    @staticmethod
    def load_settings_config() -> Dict[str, Any]:
        """Load general application settings"""
        return ConfigLoader.load_config('settings.json')

    @staticmethod
    def load_categories_config() -> Dict[str, Any]:
        """Load the income/expense category vocabularies"""
        return ConfigLoader.load_config('categories.json')

    @staticmethod
    def database_path() -> str:
        """
        Resolve the database file location.

        Environment variable wins over settings.json, which wins over the
        built-in default.
        """
        env_path = os.getenv(DB_PATH_ENV_VAR)
        if env_path:
            return env_path

        try:
            settings = ConfigLoader.load_settings_config()
        except FileNotFoundError:
            return DEFAULT_DB_PATH

        return settings.get("database", {}).get("path", DEFAULT_DB_PATH)
