"""
READMIN Configuration

Central configuration for the READMIN admin layer.

The config classes double as the process-wide default store: a Resource reads
DEFAULT_NAMESPACE and DEFAULT_SORT_ORDER from whichever config class it is
given at construction time.
"""

import os
import logging
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "READMIN_"

VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}


def parse_env_value(env_value: str) -> Any:
    """
    Auto-detect the type of an environment value.

    Args:
        env_value: Raw string from the environment

    Returns:
        None, bool, int, float, list or str
    """
    # Explicit empty values (null, none, empty)
    if env_value.lower() in ('null', 'none', '~', ''):
        return None

    if env_value.lower() in ('true', 'false', 'yes', 'no', 'on', 'off'):
        return env_value.lower() in ('true', 'yes', 'on')

    # Integer detection (negative numbers too)
    if env_value.lstrip('-').isdigit():
        return int(env_value)

    # Comma-separated lists
    if ',' in env_value:
        return [item.strip() for item in env_value.split(',') if item.strip()]

    if '.' in env_value and env_value.replace('.', '', 1).lstrip('-').isdigit():
        return float(env_value)

    return env_value


class Config:
    """
    READMIN configuration settings.

    Organized into:
    - Internal: naming conventions the admin layer relies on (DO NOT MODIFY)
    - Env: Environment file configuration
    - User Settings: Configurable by developers

    Usage:
        class AppConfig(Config):
            DEFAULT_NAMESPACE = "backoffice"
            DEFAULT_SORT_ORDER = "created_at_desc"

        resource = Resource(Post, config=AppConfig)
    """

    class Internal:
        """
        READMIN Internal Configuration

        WARNING: THESE SETTINGS ARE PROTECTED AND CANNOT BE MODIFIED.
        Generated controller and route helper names depend on them.
        """
        # Naming conventions
        CONTROLLER_SUFFIX = "Controller"
        NAMESPACE_SEPARATOR = "."
        DASHBOARD_CONTROLLER_NAME = "DashboardController"
        ROUTE_HELPER_SUFFIX = "path"
        ROUTE_HELPER_SEPARATOR = "_"

        # Menu placement for resources registered without a namespace
        ROOT_MENU_NAME = "root"

        # Actions every resource controller answers to
        DEFAULT_ACTIONS = ["index", "show", "new", "create", "edit", "update", "destroy"]
        SUPPORTED_HTTP_METHODS = ["get", "post", "put", "delete", "patch"]

    class Env:
        """Environment file configuration"""
        file = ".env"  # Path to .env file (can be ".env.prod", ".env.dev", etc.)
        auto_load = True  # Automatically load .env file
        override = True  # Override existing environment variables

    # User-Configurable Settings
    # ============================

    # Registration defaults
    DEFAULT_NAMESPACE: Optional[str] = "admin"  # None registers into the root namespace
    DEFAULT_SORT_ORDER = "id_desc"

    # Code generation
    ADMIN_DIR = "app/admin"  # Where `readmin generate resource` writes files

    # Framework Behavior
    VERBOSE_LOGGING = True
    LOG_LEVEL = "INFO"  # Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL

    def __init_subclass__(cls, **kwargs):
        """
        Validate that child classes don't override the Internal settings.

        This hook is called automatically when a class inherits from Config.
        """
        super().__init_subclass__(**kwargs)

        if 'Internal' in cls.__dict__:
            raise TypeError(
                f"Cannot override Config.Internal in {cls.__name__}. "
                "Config.Internal contains the admin naming conventions."
            )

    @classmethod
    def defaults(cls) -> dict:
        """
        Registration defaults merged under every resource's options.

        Returns:
            Dict with ``namespace`` and ``sort_order`` keys
        """
        return {
            "namespace": cls.DEFAULT_NAMESPACE,
            "sort_order": cls.DEFAULT_SORT_ORDER,
        }

    @classmethod
    def load_from_env(cls, env_file: Optional[str] = None):
        """
        Load configuration from .env file and environment variables.

        All environment variables must be prefixed with READMIN_*

        Args:
            env_file: Path to .env file (overrides Config.Env.file)

        Example .env file:
            READMIN_DEFAULT_NAMESPACE=backoffice
            READMIN_DEFAULT_SORT_ORDER=name_asc
            READMIN_LOG_LEVEL=DEBUG

        Example usage:
            Config.load_from_env()  # Uses Config.Env.file
            Config.load_from_env(".env.prod")  # Custom file
        """
        env_file_path = env_file or cls.Env.file

        if cls.Env.auto_load:
            env_path = Path(env_file_path)
            if env_path.exists():
                load_dotenv(env_path, override=cls.Env.override)
                if cls.VERBOSE_LOGGING:
                    logger.info(f"Loaded environment from: {env_path}")
            elif cls.VERBOSE_LOGGING:
                logger.info(f".env file not found: {env_path}")

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(ENV_PREFIX):
                continue

            attr_name = env_key[len(ENV_PREFIX):]

            if attr_name == 'INTERNAL' or attr_name in vars(Config.Internal):
                logger.warning(f"Cannot override internal setting: {env_key}")
                continue

            parsed_value = parse_env_value(env_value)

            if attr_name == 'LOG_LEVEL':
                if not isinstance(parsed_value, str) or parsed_value.upper() not in VALID_LOG_LEVELS:
                    logger.warning(
                        f"Invalid LOG_LEVEL: {env_value}. "
                        f"Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}. "
                        f"Using default value."
                    )
                    continue
                parsed_value = parsed_value.upper()

            # Namespaces are identifiers, never numbers or lists
            elif attr_name == 'DEFAULT_NAMESPACE' and parsed_value is not None:
                parsed_value = env_value.strip()

            setattr(cls, attr_name, parsed_value)

            if cls.VERBOSE_LOGGING:
                logger.info(f"Auto-set {attr_name} = {parsed_value} (from {env_key})")

        return cls

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration settings.

        Returns:
            True if configuration is valid
        """
        if not cls.Internal.SUPPORTED_HTTP_METHODS:
            raise ValueError("Internal.SUPPORTED_HTTP_METHODS cannot be empty")

        if cls.LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}")

        if cls.DEFAULT_NAMESPACE is not None and not str(cls.DEFAULT_NAMESPACE).strip():
            raise ValueError("DEFAULT_NAMESPACE must be None or a non-empty name")

        return True


class DevConfig(Config):
    """Development configuration with helpful defaults."""

    class Env:
        """Development environment configuration"""
        file = ".env.dev"
        auto_load = True
        override = True

    VERBOSE_LOGGING = True
    LOG_LEVEL = "DEBUG"


class ProdConfig(Config):
    """Production configuration: quiet logging, system env wins."""

    class Env:
        """Production environment configuration"""
        file = ".env.prod"
        auto_load = True
        override = False  # Don't override system env vars in production

    VERBOSE_LOGGING = False
    LOG_LEVEL = "WARNING"
