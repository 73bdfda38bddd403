"""Web3 Error Helper Package.

This package turns raw blockchain errors (node, wallet and SDK errors from
EVM and non-EVM ecosystems) into stable, human-readable messages, with
custom chains, pluggable ecosystem adapters and localized output.

The module-level functions operate on a shared default ``ErrorTranslator``;
create your own ``ErrorTranslator`` for isolated state.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from web3_error_helper.version import __version__, __author__, __email__
from web3_error_helper.constants import (
    DEFAULT_FALLBACK_MESSAGES,
    BlockchainEcosystem,
    ErrorType,
    SupportedChain,
)
from web3_error_helper.fallback import detect_error_type, get_matching_error_types, is_error_type
from web3_error_helper.logging_config import configure_logging
from web3_error_helper.models import (
    CustomChainConfig,
    CustomFallbacks,
    ErrorContext,
    ErrorMapping,
    ErrorSeverity,
    ErrorTranslationResult,
    TranslateErrorOptions,
)
from web3_error_helper.services.translation_service import ErrorTranslator
from web3_error_helper.utils.config import TranslatorSettings
from web3_error_helper.utils.errors import (
    AdapterError,
    ChainValidationError,
    ConfigurationError,
    DuplicateChainError,
    TranslationError,
    Web3ErrorHelperError,
)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

_default_translator: Optional[ErrorTranslator] = None


def get_default_translator() -> ErrorTranslator:
    """Get the shared translator, creating it on first use."""
    global _default_translator
    if _default_translator is None:
        _default_translator = ErrorTranslator()
        logger.debug(f"Initialized default error translator v{__version__}")
    return _default_translator


def reset_default_translator() -> None:
    """Discard the shared translator and all state registered on it."""
    global _default_translator
    _default_translator = None


def translate_error(error: Any, options: Optional[Any] = None, **kwargs: Any) -> ErrorTranslationResult:
    """Translate ``error`` into a user-facing message.

    Args:
        error: A string, exception, mapping or arbitrary error object
        options: ``TranslateErrorOptions`` or a mapping (snake_case or
            camelCase keys)
        **kwargs: Option values, e.g. ``chain="polygon"``

    Returns:
        ErrorTranslationResult with ``message``, ``translated`` and ``chain``
    """
    return get_default_translator().translate_error(error, options, **kwargs)


def register_custom_chain(config: Any) -> CustomChainConfig:
    return get_default_translator().register_custom_chain(config)


def unregister_custom_chain(chain_id: str) -> bool:
    return get_default_translator().unregister_custom_chain(chain_id)


def get_custom_chain(chain_id: str) -> Optional[CustomChainConfig]:
    return get_default_translator().get_custom_chain(chain_id)


def get_all_custom_chains() -> List[CustomChainConfig]:
    return get_default_translator().get_all_custom_chains()


def has_custom_chain(chain_id: str) -> bool:
    return get_default_translator().has_custom_chain(chain_id)


def clear_custom_chains() -> None:
    get_default_translator().clear_custom_chains()


def get_available_chains() -> List[str]:
    return get_default_translator().chains.get_available_chains()


def get_chain_info(chain: str) -> Optional[Dict[str, str]]:
    return get_default_translator().chains.get_chain_info(chain)


def register_adapter(adapter: Any) -> None:
    get_default_translator().register_adapter(adapter)


def unregister_adapter(ecosystem: str) -> bool:
    return get_default_translator().unregister_adapter(ecosystem)


def register_locale(language: str, translations: Mapping, overrides: Optional[Mapping] = None) -> None:
    get_default_translator().register_locale(language, translations, overrides)


def add_overrides(language: str, overrides: Mapping) -> None:
    get_default_translator().add_overrides(language, overrides)


def remove_overrides(language: str, keys: List[str]) -> None:
    get_default_translator().remove_overrides(language, keys)


def set_current_language(language: str) -> None:
    get_default_translator().set_current_language(language)


def get_current_language() -> str:
    return get_default_translator().get_current_language()


def get_supported_languages() -> List[str]:
    return get_default_translator().get_supported_languages()


def translate(key: str, language: Optional[str] = None, params: Optional[Mapping] = None) -> str:
    return get_default_translator().translate(key, language, params)


__all__ = [
    "__version__",
    "ErrorTranslator",
    "TranslatorSettings",
    "get_default_translator",
    "reset_default_translator",
    "translate_error",
    "register_custom_chain",
    "unregister_custom_chain",
    "get_custom_chain",
    "get_all_custom_chains",
    "has_custom_chain",
    "clear_custom_chains",
    "get_available_chains",
    "get_chain_info",
    "register_adapter",
    "unregister_adapter",
    "register_locale",
    "add_overrides",
    "remove_overrides",
    "set_current_language",
    "get_current_language",
    "get_supported_languages",
    "translate",
    "detect_error_type",
    "is_error_type",
    "get_matching_error_types",
    "configure_logging",
    "DEFAULT_FALLBACK_MESSAGES",
    "SupportedChain",
    "BlockchainEcosystem",
    "ErrorType",
    "ErrorMapping",
    "CustomFallbacks",
    "CustomChainConfig",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorTranslationResult",
    "TranslateErrorOptions",
    "Web3ErrorHelperError",
    "ConfigurationError",
    "ChainValidationError",
    "DuplicateChainError",
    "AdapterError",
    "TranslationError",
]
