"""
Language bundle manager.

Loads the bundled translation dictionaries into an ``I18nManager`` on demand
and suggests a supported language for a misspelled code or name.
"""

import copy
import difflib
import logging
from typing import Any, Dict, Iterable, List, Optional

from web3_error_helper.data.languages import LANGUAGE_METADATA
from web3_error_helper.data.translations import BUNDLED_TRANSLATIONS
from web3_error_helper.i18n.manager import I18nManager

logger = logging.getLogger(__name__)


class LanguageBundleManager:
    """Loads and unloads bundled languages for one ``I18nManager``."""

    def __init__(self, i18n: I18nManager, bundles: Optional[Dict[str, Dict[str, Any]]] = None):
        self.i18n = i18n
        self.bundles = bundles if bundles is not None else BUNDLED_TRANSLATIONS
        self._loaded: List[str] = []

    def get_available_languages(self) -> List[str]:
        """Base language, bundled languages and developer-registered ones."""
        languages = [self.i18n.base_language, *self.bundles, *self.i18n.get_supported_languages()]
        return list(dict.fromkeys(languages))

    def load_language(self, language: str) -> bool:
        """Make ``language`` usable.

        A developer-registered locale is never replaced by a bundle.

        Returns:
            True if the language is available after the call
        """
        if language == self.i18n.base_language or self.i18n.has_locale(language):
            return True

        bundle = self.bundles.get(language)
        if bundle is None:
            return self.i18n.is_language_supported(language)

        self.i18n.register_locale(language, copy.deepcopy(bundle))
        self._loaded.append(language)
        logger.debug(f"Loaded bundled language '{language}'")
        return True

    def unload_language(self, language: str) -> bool:
        """Unload a language previously loaded from a bundle."""
        if language not in self._loaded:
            return False
        self._loaded.remove(language)
        return self.i18n.unregister_locale(language)

    def is_language_loaded(self, language: str) -> bool:
        return language in self._loaded

    def get_loaded_languages(self) -> List[str]:
        return list(self._loaded)

    def suggest_language(self, query: str) -> Optional[str]:
        """Closest available language to a code or English/native name."""
        if not query:
            return None
        needle = query.strip().lower()
        available = self.get_available_languages()
        if needle in available:
            return needle

        names: Dict[str, str] = {}
        for language in available:
            names[language] = language
            metadata = LANGUAGE_METADATA.get(language, {})
            for field in ("name", "native_name"):
                if metadata.get(field):
                    names[str(metadata[field]).lower()] = language

        matches = difflib.get_close_matches(needle, list(names), n=1, cutoff=0.6)
        return names[matches[0]] if matches else None

    def configure_language_selection(self, preferred: Iterable[str]) -> str:
        """Load and select the first preferred language that is available."""
        for language in preferred:
            if self.load_language(language):
                self.i18n.set_current_language(language)
                return language
        return self.i18n.get_current_language()
