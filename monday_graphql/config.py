"""
Configuration module for the monday.com GraphQL client.
Handles environment variables and per-client settings.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


DEFAULT_HOST = "https://api.monday.com/v2"
DEFAULT_FILES_HOST = "https://api.monday.com/v2/file"
DEFAULT_VERSION = "2024-01"
DEFAULT_OPEN_TIMEOUT = 10
DEFAULT_READ_TIMEOUT = 30


class Configuration(BaseSettings):
    """
    Client settings.

    Values come from keyword arguments first, then ``MONDAY_*`` environment
    variables (or a ``.env`` file), then the defaults below. Instances are
    frozen; derive a new one with ``model_copy(update=...)``.
    """

    # Authentication
    token: Optional[str] = None

    # Endpoints
    host: str = DEFAULT_HOST
    files_host: str = DEFAULT_FILES_HOST
    version: Optional[str] = DEFAULT_VERSION

    # Transport timeouts (seconds)
    open_timeout: float = DEFAULT_OPEN_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT

    class Config:
        env_prefix = "MONDAY_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        frozen = True


CONFIGURATION_FIELDS = frozenset(Configuration.model_fields)


def build_config(**config_args) -> Configuration:
    """
    Build a configuration from keyword arguments.

    Args:
        **config_args: Any of ``token``, ``host``, ``files_host``,
            ``version``, ``open_timeout``, ``read_timeout``

    Returns:
        A new Configuration instance

    Raises:
        ValueError: If an unknown option is given
    """
    invalid_keys = set(config_args) - CONFIGURATION_FIELDS
    if invalid_keys:
        raise ValueError(f"Unknown arguments: {sorted(invalid_keys)}")

    return Configuration(**config_args)


@lru_cache()
def get_settings() -> Configuration:
    """Get cached default configuration."""
    return Configuration()
