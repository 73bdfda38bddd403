"""Configuration module for the Web3 Error Helper.

Settings are read from the environment (optionally via a ``.env`` file) and
validated once; the translator accepts an explicit ``TranslatorSettings``
instance when a caller wants to bypass the environment entirely.
"""

# Standard library imports
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Optional

# Third-party library imports
from dotenv import load_dotenv

from web3_error_helper.utils.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

ENV_PREFIX = "WEB3_ERROR_HELPER_"


def get_env_var(key: str, default: Any = None, required: bool = False,
                validator: Optional[Callable[[str], Any]] = None) -> Any:
    """Get and validate environment variable.

    Args:
        key: Environment variable name
        default: Default value if not present
        required: If True, raises ConfigurationError when not found
        validator: Optional validation function

    Returns:
        The environment variable value or default

    Raises:
        ConfigurationError: If required and not found, or fails validation
    """
    value = os.environ.get(key)

    if value is None:
        if required:
            raise ConfigurationError(
                f"Required environment variable '{key}' not found",
                details={"key": key}
            )
        return default

    if validator:
        try:
            return validator(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for environment variable '{key}': {str(e)}",
                details={"key": key, "value": value}
            )

    return value


def bool_validator(value: str) -> bool:
    """Validate and convert string to boolean.

    Args:
        value: String value to convert

    Returns:
        Boolean value
    """
    return value.strip().lower() in ("true", "1", "yes", "y", "on")


def int_validator(value: str) -> int:
    """Validate and convert string to integer.

    Args:
        value: String value to convert

    Returns:
        Integer value

    Raises:
        ValueError: If not a valid integer
    """
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid integer")


def log_level_validator(value: str) -> str:
    """Validate log level.

    Args:
        value: Log level to validate

    Returns:
        The validated log level

    Raises:
        ValueError: If not a valid log level
    """
    valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    upper_value = value.upper()
    if upper_value not in valid_levels:
        raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
    return upper_value


def chain_validator(value: str) -> str:
    """Validate a chain identifier (built-in or custom)."""
    chain = value.strip()
    if not chain:
        raise ValueError("Chain identifier must be a non-empty string")
    return chain


def language_validator(value: str) -> str:
    """Validate a language code such as ``en`` or ``pt-BR``."""
    code = value.strip()
    if not re.match(r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})?$", code):
        raise ValueError(f"'{value}' is not a valid language code")
    return code


@dataclass
class TranslatorSettings:
    """Settings for the error translator."""
    default_chain: str = "ethereum"
    default_language: str = "en"
    cache_enabled: bool = True
    cache_max_size: int = 1000
    cache_ttl: int = 300
    log_level: str = "INFO"

    def validate(self) -> None:
        """Validate the settings.

        Raises:
            ConfigurationError: If any setting is out of range
        """
        if not self.default_chain:
            raise ConfigurationError(
                "default_chain must be a non-empty string",
                details={"default_chain": self.default_chain}
            )

        if self.cache_max_size <= 0:
            raise ConfigurationError(
                "cache_max_size must be greater than 0",
                details={"cache_max_size": self.cache_max_size}
            )

        if self.cache_ttl <= 0:
            raise ConfigurationError(
                "cache_ttl must be greater than 0",
                details={"cache_ttl": self.cache_ttl}
            )


@lru_cache()
def get_settings() -> TranslatorSettings:
    """Get translator settings from environment variables.

    Returns:
        Validated TranslatorSettings instance

    Raises:
        ConfigurationError: If a variable fails validation
    """
    settings = TranslatorSettings(
        default_chain=get_env_var(f"{ENV_PREFIX}DEFAULT_CHAIN", "ethereum", validator=chain_validator),
        default_language=get_env_var(f"{ENV_PREFIX}DEFAULT_LANGUAGE", "en", validator=language_validator),
        cache_enabled=get_env_var(f"{ENV_PREFIX}CACHE_ENABLED", True, validator=bool_validator),
        cache_max_size=get_env_var(f"{ENV_PREFIX}CACHE_MAX_SIZE", 1000, validator=int_validator),
        cache_ttl=get_env_var(f"{ENV_PREFIX}CACHE_TTL", 300, validator=int_validator),
        log_level=get_env_var(f"{ENV_PREFIX}LOG_LEVEL", "INFO", validator=log_level_validator),
    )
    settings.validate()
    return settings
