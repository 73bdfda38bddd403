"""
Language detection.

Keyword-based detection from error text plus environment and region
heuristics for choosing a default language.
"""

import logging
import os
from typing import Iterable, List, Mapping, Optional, Tuple

from web3_error_helper.constants import BASE_LANGUAGE
from web3_error_helper.data.languages import LANGUAGE_KEYWORDS, REGIONAL_FALLBACKS

logger = logging.getLogger(__name__)

LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE")


class LanguageDetector:
    """Guess a language code from text or the process environment.

    Only languages in ``supported_languages`` are ever returned (plus the
    base language, which is always the final answer).
    """

    def __init__(self, supported_languages: Optional[Iterable[str]] = None):
        if supported_languages is None:
            supported_languages = list(LANGUAGE_KEYWORDS)
        self.supported_languages: List[str] = list(supported_languages)

    def _is_supported(self, language: str) -> bool:
        return language in self.supported_languages

    def detect_from_message(self, message: str) -> str:
        """First supported language with a keyword in ``message``, else the base language."""
        if not isinstance(message, str):
            return BASE_LANGUAGE
        for language in self.supported_languages:
            if self.contains_language_keywords(message, language):
                return language
        return BASE_LANGUAGE

    def contains_language_keywords(self, message: str, language: str) -> bool:
        text = message.lower()
        return any(keyword in text for keyword in LANGUAGE_KEYWORDS.get(language, ()))

    def detect_from_environment(self, environ: Optional[Mapping[str, str]] = None) -> str:
        """Language from POSIX locale variables such as ``LANG=es_ES.UTF-8``."""
        environ = os.environ if environ is None else environ
        for var in LOCALE_ENV_VARS:
            value = environ.get(var)
            if not value:
                continue
            for candidate in value.split(":"):
                language = candidate.split(".")[0].replace("-", "_").split("_")[0].lower()
                if language and self._is_supported(language):
                    return language

        fallback = self.get_regional_fallback(self.detect_region(environ.get("TZ")))
        if self._is_supported(fallback):
            return fallback
        return BASE_LANGUAGE

    def detect_region(self, timezone: Optional[str] = None) -> str:
        """Coarse region from an IANA time zone name like ``Europe/Paris``."""
        timezone = timezone if timezone is not None else os.environ.get("TZ", "")
        if not timezone:
            return "global"
        if timezone in ("Asia/Shanghai", "Asia/Beijing", "Asia/Chongqing", "Asia/Hong_Kong"):
            return "china"
        for prefix, region in (
            ("America/", "americas"),
            ("Europe/", "europe"),
            ("Africa/", "africa"),
            ("Asia/", "asia"),
            ("Pacific/", "oceania"),
            ("Australia/", "oceania"),
        ):
            if timezone.startswith(prefix):
                return region
        return "global"

    def get_regional_fallback(self, region: str) -> str:
        return REGIONAL_FALLBACKS.get(region, BASE_LANGUAGE)

    def get_language_confidence(self, message: str, language: str) -> float:
        """Share of a language's keywords found in ``message`` (0 to 1)."""
        keywords = LANGUAGE_KEYWORDS.get(language)
        if not keywords:
            return 0.0
        text = message.lower()
        matches = sum(1 for keyword in keywords if keyword in text)
        return min(matches / len(keywords), 1.0)

    def get_all_possible_languages(self, message: str) -> List[Tuple[str, float]]:
        """(language, confidence) pairs with non-zero confidence, best first."""
        results = [
            (language, self.get_language_confidence(message, language))
            for language in self.supported_languages
        ]
        results = [result for result in results if result[1] > 0]
        return sorted(results, key=lambda result: result[1], reverse=True)

    def detect_from_multiple_sources(
        self,
        message: Optional[str] = None,
        user_preference: Optional[str] = None,
        environment: bool = False,
        region: bool = False
    ) -> str:
        """Combine sources: user preference, message, environment, region."""
        if user_preference and self._is_supported(user_preference):
            return user_preference

        if message:
            detected = self.detect_from_message(message)
            if detected != BASE_LANGUAGE:
                return detected

        if environment:
            detected = self.detect_from_environment()
            if detected != BASE_LANGUAGE:
                return detected

        if region:
            fallback = self.get_regional_fallback(self.detect_region())
            if self._is_supported(fallback):
                return fallback

        return BASE_LANGUAGE
