"""
Configuration management for Dice Roller.

Provides centralized configuration loading from environment variables
with sensible defaults for all settings.
"""

import os
from pathlib import Path
from typing import Optional
import logging
import threading

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Config:
    """
    Centralized configuration management for Dice Roller.

    Loads configuration from environment variables with fallback defaults.
    Supports .env files via python-dotenv.

    Example:
        config = Config()
        print(config.dice_seed)  # None unless DICE_SEED is set
        print(config.log_level)  # INFO
    """

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            env_file: Optional path to .env file. If None, auto-discovers .env
                     in project root or skips if not found.
        """
        if env_file:
            load_dotenv(env_file)
            logger.info(f"Loaded configuration from {env_file}")
        else:
            # Auto-discover .env in project root
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / '.env'
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded configuration from {env_path}")
            else:
                logger.debug("No .env file found, using environment variables and defaults")

        # === Randomness ===
        self.dice_seed_raw = os.getenv('DICE_SEED', '').strip()
        self.dice_seed = self._parse_seed(self.dice_seed_raw)

        # === Logging ===
        self.log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
        self.log_file = os.getenv('LOG_FILE', None)

    @staticmethod
    def _parse_seed(raw: str) -> Optional[int]:
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            return None

    def validate(self) -> bool:
        """
        Validate configuration and log problems with configured values.

        Returns:
            True if config is valid, False otherwise
        """
        valid = True

        if self.dice_seed_raw and self.dice_seed is None:
            logger.error(f"Invalid DICE_SEED: {self.dice_seed_raw!r}. Must be an integer; ignoring it")
            valid = False

        if self.log_level not in LOG_LEVELS:
            logger.error(f"Invalid LOG_LEVEL: {self.log_level}. Must be one of: {', '.join(LOG_LEVELS)}")
            valid = False

        return valid

    def __repr__(self) -> str:
        return (
            f"Config("
            f"dice_seed={self.dice_seed}, "
            f"log_level={self.log_level}, "
            f"log_file={self.log_file})"
        )


# Global config instance (lazy-loaded)
_config: Optional[Config] = None
_config_lock = threading.Lock()


def get_config() -> Config:
    """
    Get the global config instance (singleton pattern).

    Returns:
        Global Config instance

    Example:
        from src.core.config import get_config
        config = get_config()
        print(config.dice_seed)
    """
    global _config
    with _config_lock:
        if _config is None:
            _config = Config()
            _config.validate()
        return _config


def reset_config() -> None:
    """Forget the global config so the next get_config() re-reads the environment."""
    global _config
    with _config_lock:
        _config = None


__all__ = ['Config', 'get_config', 'reset_config']
