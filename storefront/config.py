# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file.
#   Provides typed config objects to the rest of the package.
#
# CLASSES:
# --------
# - StateDefaults (dataclass)
#     theme: str          (default "light")
#     current_page: str   (default "home")
#
# - AppConfig (dataclass)
#     defaults: StateDefaults
#     log_level: str      (default "WARNING")
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the cached singleton so the next get_config() re-reads
#     the environment.
#
# - configure_logging(config: AppConfig | None = None) -> None
#     Apply the configured level to the "storefront" logger.
#
# USAGE:
# ------
#   from storefront.config import get_config
#   config = get_config()
#   print(config.defaults.current_page)
#
# ==============================================

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class StateDefaults:
    """Fallbacks used when a saved app state omits a key."""
    theme: str = "light"
    current_page: str = "home"


@dataclass
class AppConfig:
    """Main package configuration."""
    defaults: StateDefaults = field(default_factory=StateDefaults)
    log_level: str = "WARNING"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Package configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    defaults = StateDefaults(
        theme=os.getenv("STOREFRONT_DEFAULT_THEME", "light"),
        current_page=os.getenv("STOREFRONT_DEFAULT_PAGE", "home"),
    )

    _config_instance = AppConfig(
        defaults=defaults,
        log_level=os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").upper(),
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration."""
    global _config_instance
    _config_instance = None


def configure_logging(config: Optional[AppConfig] = None) -> None:
    """
    Set the level of the package logger hierarchy.

    Args:
        config: Optional configuration. If None, loads from environment.
    """
    config = config or get_config()
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.getLogger("storefront").setLevel(level)
