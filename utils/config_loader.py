"""
config_loader.py - Load and manage configuration from YAML file.

Settings live in config.yaml at the project root so the club site can be
re-pointed (database file, port, CORS origins) without touching Python code.
Environment variables (optionally from a .env file) override the YAML values.
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigLoader:
    """Load and cache configuration from config.yaml."""

    _instance = None
    _config = None

    def __new__(cls):
        """Singleton pattern - return same instance."""
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if self._config is None:
            self.reload()

    def reload(self, config_path: Optional[Path] = None):
        """Load config from YAML file, falling back to defaults."""
        config_path = config_path or Path(__file__).parent.parent / 'config.yaml'

        if not config_path.exists():
            logger.warning(f"Config file not found at {config_path}, using defaults")
            self._config = self._get_default_config()
            return

        try:
            with open(config_path, 'r') as f:
                loaded = yaml.safe_load(f) or {}
            self._config = _deep_merge(self._get_default_config(), loaded)
            logger.info(f"Configuration loaded from {config_path}")
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error loading config: {e}. Using defaults.")
            self._config = self._get_default_config()

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get config value by dot-notation path.

        Args:
            key: Path to config value (e.g., 'server.port')
            default: Default value if key not found

        Returns:
            Config value or default
        """
        parts = key.split('.')
        value = self._config

        for part in parts:
            if isinstance(value, dict):
                value = value.get(part)
                if value is None:
                    return default
            else:
                return default

        return value if value is not None else default

    @staticmethod
    def _get_default_config() -> Dict[str, Any]:
        """
        Return default configuration if YAML file not found.
        This should match config.yaml defaults.
        """
        return {
            'server': {
                'host': '0.0.0.0',
                'port': 8000,
                'cors_origins': ['*'],
            },
            'database': {
                'url': 'sqlite:///./database.sqlite',
                'seed_demo_data': False,
            },
            'api': {
                'enforce_team_reference': True,
            },
            'client': {
                'base_url': 'http://localhost:8000',
                'timeout': 10.0,
            },
            'logging': {
                'level': 'INFO',
            },
        }


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@dataclass
class AppSettings:
    """Resolved runtime settings for the API process."""
    database_url: str = 'sqlite:///./database.sqlite'
    host: str = '0.0.0.0'
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ['*'])
    enforce_team_reference: bool = True
    seed_demo_data: bool = False
    log_level: str = 'INFO'


def get_settings(config: Optional[ConfigLoader] = None) -> AppSettings:
    """
    Build AppSettings from config.yaml with environment overrides.

    Recognised variables: DATABASE_URL, HOST, PORT, CORS_ORIGINS (comma
    separated), ENFORCE_TEAM_REFERENCE, SEED_DEMO_DATA, LOG_LEVEL.
    """
    load_dotenv()
    config = config or ConfigLoader()

    cors_env = os.getenv('CORS_ORIGINS')
    if cors_env:
        cors_origins = [origin.strip() for origin in cors_env.split(',') if origin.strip()]
    else:
        cors_origins = list(config.get('server.cors_origins', ['*']))

    return AppSettings(
        database_url=os.getenv('DATABASE_URL', config.get('database.url')),
        host=os.getenv('HOST', config.get('server.host')),
        port=int(os.getenv('PORT', config.get('server.port'))),
        cors_origins=cors_origins,
        enforce_team_reference=_env_flag(
            'ENFORCE_TEAM_REFERENCE', config.get('api.enforce_team_reference', True)
        ),
        seed_demo_data=_env_flag('SEED_DEMO_DATA', config.get('database.seed_demo_data', False)),
        log_level=os.getenv('LOG_LEVEL', config.get('logging.level', 'INFO')).upper(),
    )


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    return raw.strip().lower() in TRUE_VALUES
