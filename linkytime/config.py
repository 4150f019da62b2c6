# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - StorageConfig (dataclass)
#     backend: str       (default "json", or "mongo")
#     data_file: str     (default "data/linkytime.json")
#     autosave: bool     (default False)
#
# - MongoConfig (dataclass)
#     host: str          (default "localhost")
#     port: int          (default 27017)
#     user: str | None   (default None)
#     password: str | None (default None)
#     database: str      (default "linkytime")
#     collection: str    (default "meetings")
#
# - AppConfig (dataclass)
#     storage: StorageConfig
#     mongo: MongoConfig
#     open_links_in_browser: bool (default True)
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# USAGE:
# ------
#   from linkytime.config import get_config
#   config = get_config()
#   print(config.storage.data_file)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


TRUE_VARIANTS = {"1", "true", "yes", "y", "on"}

SUPPORTED_BACKENDS = ("json", "mongo")


@dataclass
class StorageConfig:
    """Where and how the meeting entries are persisted."""
    backend: str = "json"
    data_file: str = "data/linkytime.json"
    autosave: bool = False


@dataclass
class MongoConfig:
    """MongoDB database configuration."""
    host: str = "localhost"
    port: int = 27017
    user: Optional[str] = None
    password: Optional[str] = None
    database: str = "linkytime"
    collection: str = "meetings"


@dataclass
class AppConfig:
    """Main application configuration."""
    storage: StorageConfig = field(default_factory=StorageConfig)
    mongo: MongoConfig = field(default_factory=MongoConfig)
    open_links_in_browser: bool = True


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in TRUE_VARIANTS


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration

    Raises:
        ValueError: If STORAGE_BACKEND names an unsupported backend
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    backend = os.getenv("STORAGE_BACKEND", "json").strip().lower()
    if backend not in SUPPORTED_BACKENDS:
        raise ValueError(
            f"Unsupported STORAGE_BACKEND '{backend}', expected one of {SUPPORTED_BACKENDS}"
        )

    # Build storage configuration
    storage_config = StorageConfig(
        backend=backend,
        data_file=os.getenv("DATA_FILE", "data/linkytime.json"),
        autosave=_env_flag("AUTOSAVE", "false")
    )

    # Build MongoDB configuration
    mongo_config = MongoConfig(
        host=os.getenv("MONGO_HOST", "localhost"),
        port=int(os.getenv("MONGO_PORT", "27017")),
        user=os.getenv("MONGO_USER") or None,
        password=os.getenv("MONGO_PASSWORD") or None,
        database=os.getenv("MONGO_DATABASE", "linkytime"),
        collection=os.getenv("MONGO_COLLECTION", "meetings")
    )

    # Build main application configuration
    _config_instance = AppConfig(
        storage=storage_config,
        mongo=mongo_config,
        open_links_in_browser=_env_flag("OPEN_LINKS_IN_BROWSER", "true")
    )

    return _config_instance


def reset_config() -> None:
    """Drop the cached singleton so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None
