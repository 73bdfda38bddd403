"""
Services for the Web3 Error Helper.
"""

from web3_error_helper.services.cache_service import CacheEntry, TranslationCache
from web3_error_helper.services.translation_service import ErrorTranslator

__all__ = ["CacheEntry", "TranslationCache", "ErrorTranslator"]
