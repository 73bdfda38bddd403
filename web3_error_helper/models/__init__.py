"""
Data models for the Web3 Error Helper.
"""

from web3_error_helper.models.mapping import (
    ErrorMapping,
    CustomFallbacks,
    CustomChainConfig,
)
from web3_error_helper.models.chain import (
    NativeCurrency,
    ChainMetadata,
    ChainErrorConfig,
    ChainConfig,
)
from web3_error_helper.models.result import (
    ErrorSeverity,
    ErrorContext,
    ErrorTranslationResult,
    TranslateErrorOptions,
)

__all__ = [
    "ErrorMapping",
    "CustomFallbacks",
    "CustomChainConfig",
    "NativeCurrency",
    "ChainMetadata",
    "ChainErrorConfig",
    "ChainConfig",
    "ErrorSeverity",
    "ErrorContext",
    "ErrorTranslationResult",
    "TranslateErrorOptions",
]
