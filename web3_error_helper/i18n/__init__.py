"""
Internationalization support for the Web3 Error Helper.
"""

from web3_error_helper.i18n.manager import I18nManager, interpolate, lookup_key
from web3_error_helper.i18n.detection import LanguageDetector
from web3_error_helper.i18n.bundles import LanguageBundleManager

__all__ = [
    "I18nManager",
    "LanguageDetector",
    "LanguageBundleManager",
    "interpolate",
    "lookup_key",
]
