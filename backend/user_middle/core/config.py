"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

# Public selector env var
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'


# Load .env during development (no-op when the file is absent)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints. Empty by default, so the
        user routes live at ``/user``.
    APP_VERSION: str
        Version string reported by the health endpoint.
    JSON_SORT_KEYS: bool
        Keeps JSON output order stable when ``False``.
    PROPAGATE_EXCEPTIONS: bool
        Controls Flask error propagation.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.
    USER_SEED_ENABLED: bool
        Load start-up records into the store.
    USER_SEED_FILE: str | None
        JSON file replacing the built-in start-up records.
    USER_UPDATE_MATCH_CASE_INSENSITIVE: bool
        Ignore id case when a replace removes the previous record.
    USER_DELETE_MATCH_CASE_INSENSITIVE: bool
        Ignore id case when deleting records.
    DEBUG: bool
        Toggles Flask debug mode.
    TESTING: bool
        Enables Flask testing mode when ``True``.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = os.getenv("API_BASE_PREFIX", "")
    APP_VERSION = os.getenv("APP_VERSION", "dev")

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173")
    CORS_MAX_AGE = 600

    # User store
    USER_SEED_ENABLED = env_bool("USER_SEED_ENABLED", True)
    USER_SEED_FILE = os.getenv("USER_SEED_FILE") or None
    USER_UPDATE_MATCH_CASE_INSENSITIVE = env_bool("USER_UPDATE_MATCH_CASE_INSENSITIVE", True)
    USER_DELETE_MATCH_CASE_INSENSITIVE = env_bool("USER_DELETE_MATCH_CASE_INSENSITIVE", False)

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    DEBUG = env_bool("FLASK_DEBUG", True)


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Always starts from the built-in seed records, ignoring
      ``USER_SEED_FILE`` from the environment.
    - Propagates exceptions so pytest can surface tracebacks directly.
    """

    TESTING = True
    DEBUG = False
    USER_SEED_ENABLED = True
    USER_SEED_FILE = None
    PROPAGATE_EXCEPTIONS = True


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""

    DEBUG = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
