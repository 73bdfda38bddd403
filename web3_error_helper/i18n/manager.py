"""
Internationalization manager.

Resolves dotted translation keys through, in order: per-language overrides
(exact keys), the developer-registered locale, the base-language dictionary,
and finally the key itself. Empty strings count as missing at every step.
"""

import copy
import logging
import re
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from web3_error_helper.constants import BASE_LANGUAGE
from web3_error_helper.data.languages import LANGUAGE_METADATA
from web3_error_helper.data.translations import BASE_TRANSLATIONS
from web3_error_helper.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def lookup_key(dictionary: Optional[Mapping], key: str) -> Optional[str]:
    """Find ``key`` in a nested dictionary.

    A top-level entry named exactly ``key`` wins; otherwise the key is split
    on dots and walked. Only non-empty strings count as found.
    """
    if not dictionary:
        return None

    value = dictionary.get(key)
    if isinstance(value, str) and value:
        return value

    node: Any = dictionary
    for part in key.split("."):
        if not isinstance(node, Mapping):
            return None
        node = node.get(part)
    if isinstance(node, str) and node:
        return node
    return None


def interpolate(template: str, params: Optional[Mapping] = None) -> str:
    """Substitute ``{{name}}`` placeholders; unknown names are left as-is."""
    if not params:
        return template
    return PLACEHOLDER_RE.sub(
        lambda match: str(params[match.group(1)]) if match.group(1) in params else match.group(0),
        template,
    )


class I18nManager:
    """Per-language dictionaries and overrides layered over a base language."""

    def __init__(
        self,
        base_language: str = BASE_LANGUAGE,
        base_translations: Optional[Dict[str, Any]] = None
    ):
        self.base_language = base_language
        self._base = copy.deepcopy(base_translations if base_translations is not None else BASE_TRANSLATIONS)
        self._locales: Dict[str, Dict[str, Any]] = {}
        self._overrides: Dict[str, Dict[str, str]] = {}
        self._supported: List[str] = [base_language]
        self._current_language = base_language
        self.version = 0

    def _mark_supported(self, language: str) -> None:
        if language not in self._supported:
            self._supported.append(language)

    @staticmethod
    def _check_language(language: Any) -> None:
        if not isinstance(language, str) or not language.strip():
            raise ConfigurationError("Language code must be a non-empty string", details={"language": language})

    def register_locale(
        self,
        language: str,
        translations: Mapping,
        overrides: Optional[Mapping] = None
    ) -> None:
        """Register (or replace) the developer dictionary for ``language``.

        Args:
            language: Language code
            translations: Nested dictionary of translation strings
            overrides: Optional exact-key overrides layered on top

        Raises:
            ConfigurationError: If the language code or dictionaries are invalid
        """
        self._check_language(language)
        if not isinstance(translations, Mapping):
            raise ConfigurationError(
                f"Translations for '{language}' must be a dictionary",
                details={"language": language}
            )

        self._locales[language] = copy.deepcopy(dict(translations))
        self._mark_supported(language)
        if overrides:
            self.add_overrides(language, overrides)
        self.version += 1
        logger.info(f"Registered locale '{language}'")

    def register_locales(self, locales: Mapping) -> None:
        """Register several locales at once, keyed by language code."""
        for language, translations in locales.items():
            self.register_locale(language, translations)

    def unregister_locale(self, language: str) -> bool:
        """Remove a developer locale and its overrides."""
        if language not in self._locales:
            return False
        del self._locales[language]
        self._overrides.pop(language, None)
        if language != self.base_language and language in self._supported:
            self._supported.remove(language)
        if self._current_language == language:
            self._current_language = self.base_language
        self.version += 1
        logger.info(f"Unregistered locale '{language}'")
        return True

    def has_locale(self, language: str) -> bool:
        return language in self._locales

    def get_locale(self, language: str) -> Optional[Dict[str, Any]]:
        """A copy of the developer dictionary for ``language``."""
        locale = self._locales.get(language)
        return copy.deepcopy(locale) if locale is not None else None

    def add_overrides(self, language: str, overrides: Mapping) -> None:
        """Add exact-key overrides for ``language``, merging with existing ones."""
        self._check_language(language)
        if not isinstance(overrides, Mapping):
            raise ConfigurationError(
                f"Overrides for '{language}' must be a dictionary",
                details={"language": language}
            )
        self._overrides.setdefault(language, {}).update(
            {str(key): value for key, value in overrides.items() if isinstance(value, str)}
        )
        self._mark_supported(language)
        self.version += 1

    def remove_overrides(self, language: str, keys: Iterable[str]) -> None:
        overrides = self._overrides.get(language)
        if not overrides:
            return
        for key in keys:
            overrides.pop(key, None)
        self.version += 1

    def get_overrides(self, language: str) -> Dict[str, str]:
        return dict(self._overrides.get(language, {}))

    def set_current_language(self, language: str) -> None:
        """Switch the default language; unsupported languages are ignored."""
        if language not in self._supported:
            logger.warning(f"Language '{language}' is not supported; keeping '{self._current_language}'")
            return
        self._current_language = language
        self.version += 1

    def get_current_language(self) -> str:
        return self._current_language

    def get_supported_languages(self) -> List[str]:
        return list(self._supported)

    def is_language_supported(self, language: str) -> bool:
        return language in self._supported

    def lookup(self, key: str, language: str) -> Optional[str]:
        """Look ``key`` up in the override and developer locale of ``language`` only."""
        override = self._overrides.get(language, {}).get(key)
        if isinstance(override, str) and override:
            return override
        return lookup_key(self._locales.get(language), key)

    def lookup_base(self, key: str) -> Optional[str]:
        return self.lookup(key, self.base_language) or lookup_key(self._base, key)

    def translate(
        self,
        key: str,
        language: Optional[str] = None,
        params: Optional[Mapping] = None
    ) -> str:
        """Translate ``key`` into ``language`` (default: the current language).

        Args:
            key: Dotted translation key, e.g. ``errors.network``
            language: Target language code
            params: Values for ``{{name}}`` placeholders

        Returns:
            The most specific translation available, or ``key`` itself
        """
        key = str(key)
        language = language or self._current_language

        template = self.lookup(key, language) or self.lookup_base(key) or key
        return interpolate(template, params)

    def get_all_locales(self) -> Dict[str, Dict[str, Any]]:
        """Supported languages with their metadata and registration state."""
        return {
            language: {
                **LANGUAGE_METADATA.get(language, {"name": language}),
                "has_locale": language in self._locales or language == self.base_language,
                "override_count": len(self._overrides.get(language, {})),
            }
            for language in self._supported
        }

    def clear(self) -> None:
        """Drop every locale and override and reset to the base language."""
        self._locales.clear()
        self._overrides.clear()
        self._supported = [self.base_language]
        self._current_language = self.base_language
        self.version += 1
