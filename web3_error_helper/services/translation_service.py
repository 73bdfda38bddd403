"""
Error translation service.

``ErrorTranslator`` bundles the custom chain registry, the adapter registry,
the i18n state and the result cache, and runs the resolution pipeline:

1. detect the ecosystem adapter and extract a plain-text message
2. try per-call custom mappings
3. return a custom chain's type-specific fallback early, before the
   chain's mappings are loaded
4. match against the chain's sorted candidate mappings
5. otherwise resolve a fallback message
6. localize the outcome for the target language
"""

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from web3_error_helper.adapters.registry import AdapterRegistry
from web3_error_helper.chains.builtin import get_chain_metadata
from web3_error_helper.chains.manager import ChainManager
from web3_error_helper.chains.registry import CustomChainRegistry, format_validation_error
from web3_error_helper.constants import (
    DEFAULT_FALLBACK_MESSAGES,
    UNKNOWN_ERROR_MESSAGE,
    BlockchainEcosystem,
    ErrorType,
)
from web3_error_helper.fallback import (
    detect_error_type,
    get_custom_fallback,
    get_default_fallback,
    get_fallback_key,
    get_type_specific_fallback,
    resolve_fallback_message,
)
from web3_error_helper.i18n.bundles import LanguageBundleManager
from web3_error_helper.i18n.detection import LanguageDetector
from web3_error_helper.i18n.manager import I18nManager
from web3_error_helper.mappings.loader import load_error_mappings
from web3_error_helper.mappings.matcher import find_best_match
from web3_error_helper.mappings.utils import build_custom_mappings
from web3_error_helper.models.mapping import CustomChainConfig, ErrorMapping
from web3_error_helper.models.result import (
    ErrorContext,
    ErrorSeverity,
    ErrorTranslationResult,
    TranslateErrorOptions,
)
from web3_error_helper.services.cache_service import TranslationCache
from web3_error_helper.utils.config import TranslatorSettings, get_settings
from web3_error_helper.utils.errors import ConfigurationError, TranslationError

logger = logging.getLogger(__name__)

EVM = BlockchainEcosystem.EVM.value


class ErrorTranslator:
    """Translate raw blockchain errors into user-facing messages.

    Every registry is owned by the instance, so separate translators never
    share state. Registration methods raise on invalid input;
    :meth:`translate_error` never raises for a well-formed request.
    """

    def __init__(
        self,
        settings: Optional[TranslatorSettings] = None,
        custom_chains: Optional[CustomChainRegistry] = None,
        adapters: Optional[AdapterRegistry] = None,
        i18n: Optional[I18nManager] = None,
        cache: Optional[TranslationCache] = None
    ):
        """Initialize the translator.

        Args:
            settings: Translator settings; read from the environment if None
            custom_chains: Custom chain registry
            adapters: Adapter registry
            i18n: Internationalization manager
            cache: Result cache; built from the settings if None and
                caching is enabled
        """
        self.settings = settings or get_settings()
        self.custom_chains = custom_chains or CustomChainRegistry()
        self.adapters = adapters or AdapterRegistry()
        self.i18n = i18n or I18nManager()
        self.bundles = LanguageBundleManager(self.i18n)
        self.detector = LanguageDetector()
        self.chains = ChainManager(self.custom_chains)

        if cache is None and self.settings.cache_enabled:
            cache = TranslationCache(self.settings.cache_max_size, self.settings.cache_ttl)
        self.cache = cache

        default_language = self.settings.default_language
        if default_language != self.i18n.base_language and self.bundles.load_language(default_language):
            self.i18n.set_current_language(default_language)

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    def translate_error(
        self,
        error: Any,
        options: Optional[Any] = None,
        **kwargs: Any
    ) -> ErrorTranslationResult:
        """Translate ``error`` into a user-facing message.

        Args:
            error: A string, exception, mapping or arbitrary error object
            options: ``TranslateErrorOptions`` or a mapping of option values
            **kwargs: Option values, overriding those in ``options``

        Returns:
            The translation result

        Raises:
            ConfigurationError: If the options themselves are malformed
        """
        options = self._build_options(options, kwargs)
        chain = options.chain or self.settings.default_chain

        try:
            return self._translate(error, options, chain)
        except Exception as e:
            failure = TranslationError(f"Unexpected failure while translating error for chain '{chain}'", e)
            logger.exception(str(failure))
            return ErrorTranslationResult(
                message=options.fallback_message or DEFAULT_FALLBACK_MESSAGES["generic"],
                translated=False,
                chain=chain,
                original_error=error if options.include_original_error else None,
                retryable=True,
                fallback_used=True,
                context=ErrorContext(
                    chain=chain,
                    ecosystem=options.ecosystem or EVM,
                    language=self.i18n.base_language,
                    severity=ErrorSeverity.CRITICAL,
                    metadata=failure.to_dict(),
                ),
            )

    @staticmethod
    def _build_options(options: Any, overrides: Dict[str, Any]) -> TranslateErrorOptions:
        if isinstance(options, TranslateErrorOptions) and not overrides:
            return options

        if options is None:
            data: Dict[str, Any] = {}
        elif isinstance(options, TranslateErrorOptions):
            data = options.model_dump(exclude_unset=True)
        elif isinstance(options, Mapping):
            data = dict(options)
        else:
            raise ConfigurationError(
                f"Translation options must be a mapping, got {type(options).__name__}"
            )
        data.update(overrides)

        try:
            return TranslateErrorOptions.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid translation options: {format_validation_error(e)}"
            ) from e

    def _translate(
        self,
        error: Any,
        options: TranslateErrorOptions,
        chain: str
    ) -> ErrorTranslationResult:
        adapter = self._resolve_adapter(error, options.ecosystem, chain)
        message = self._extract_message(adapter, error)
        ecosystem = getattr(adapter, "ecosystem", EVM)

        if options.custom_locales:
            self._register_custom_locales(options.custom_locales)
        language = self._resolve_language(options, message)

        cache_key = None
        if self.cache is not None:
            cache_key = TranslationCache.make_key(message, options, (
                chain,
                ecosystem,
                language,
                self.custom_chains.version,
                self.adapters.version,
                self.i18n.version,
            ))
            cached = self.cache.get(cache_key)
            if cached is not None:
                logger.debug(f"Cache hit for message {message!r}")
                return self._finalize(cached, error, options)

        result = self._resolve(message, options, chain, ecosystem, adapter, language)

        if cache_key is not None:
            self.cache.set(cache_key, result)
        return self._finalize(result, error, options)

    def _finalize(
        self,
        result: ErrorTranslationResult,
        error: Any,
        options: TranslateErrorOptions
    ) -> ErrorTranslationResult:
        # Cached results never hold the caller's error object
        if options.include_original_error:
            return dataclasses.replace(result, original_error=error)
        return result

    def _resolve_adapter(self, error: Any, ecosystem: Optional[str], chain: str) -> Any:
        adapter = None
        if ecosystem and ecosystem != EVM:
            adapter = self.adapters.get_adapter(ecosystem)
        elif not ecosystem:
            adapter = self.adapters.detect_adapter(error)

        if adapter is None or getattr(adapter, "ecosystem", None) == EVM:
            if self.adapters.has_custom_adapter(EVM):
                return self.adapters.get_adapter(EVM)
            metadata = get_chain_metadata(chain)
            return self.adapters.get_evm_adapter(metadata.chain_id if metadata else None)

        logger.debug(f"Using {ecosystem or 'detected'} adapter {adapter!r}")
        return adapter

    @staticmethod
    def _extract_message(adapter: Any, error: Any) -> str:
        try:
            message = adapter.extract_error_message(error)
        except Exception:
            logger.warning(f"Adapter {adapter!r} failed to extract an error message", exc_info=True)
            return UNKNOWN_ERROR_MESSAGE
        if isinstance(message, str) and message:
            return message
        return UNKNOWN_ERROR_MESSAGE

    def _register_custom_locales(self, locales: Dict[str, Dict[str, Any]]) -> None:
        for language, translations in locales.items():
            if self.i18n.get_locale(language) != translations:
                self.i18n.register_locale(language, translations)

    def _resolve_language(self, options: TranslateErrorOptions, message: str) -> str:
        if options.language:
            target = options.language
        elif options.auto_detect_language:
            target = self.detector.detect_from_message(message)
        else:
            target = self.i18n.get_current_language()

        for candidate in (target, options.fallback_language):
            if candidate and self.bundles.load_language(candidate):
                return candidate
        return self.i18n.base_language

    def _resolve(
        self,
        message: str,
        options: TranslateErrorOptions,
        chain: str,
        ecosystem: str,
        adapter: Any,
        language: str
    ) -> ErrorTranslationResult:
        error_type = detect_error_type(message)
        custom_fallbacks = self.custom_chains.get_custom_fallbacks(chain)

        match = find_best_match(message, build_custom_mappings(options.custom_mappings))

        if match is None and not options.fallback_message:
            specific = get_type_specific_fallback(custom_fallbacks, error_type)
            if specific:
                return self._fallback_result(
                    specific, "custom_chain", chain, ecosystem, language, error_type
                )

        if match is None:
            mappings = load_error_mappings(chain, self.custom_chains, self._ecosystem_patterns(adapter))
            match = find_best_match(message, mappings)

        if match is not None:
            return ErrorTranslationResult(
                message=self._localize_match(match, language),
                translated=True,
                chain=chain,
                retryable=error_type == ErrorType.NETWORK,
                context=ErrorContext(
                    chain=chain,
                    ecosystem=ecosystem,
                    language=language,
                    severity=ErrorSeverity.LOW,
                    error_type=error_type.value if error_type else None,
                    metadata={"pattern": match.pattern, "priority": match.priority},
                ),
            )

        if options.fallback_message or get_custom_fallback(custom_fallbacks, error_type):
            text = resolve_fallback_message(message, options.fallback_message, custom_fallbacks)
            source = "explicit" if options.fallback_message else "custom_chain"
        else:
            text, source = self._localized_fallback(error_type, language, options.fallback_language)

        logger.debug(f"No mapping matched {message!r} on chain '{chain}'; using {source} fallback")
        return self._fallback_result(text, source, chain, ecosystem, language, error_type)

    def _fallback_result(
        self,
        text: str,
        source: str,
        chain: str,
        ecosystem: str,
        language: str,
        error_type: Optional[ErrorType]
    ) -> ErrorTranslationResult:
        return ErrorTranslationResult(
            message=text,
            translated=False,
            chain=chain,
            retryable=error_type == ErrorType.NETWORK,
            fallback_used=True,
            context=ErrorContext(
                chain=chain,
                ecosystem=ecosystem,
                language=language,
                severity=ErrorSeverity.MEDIUM if error_type else ErrorSeverity.HIGH,
                error_type=error_type.value if error_type else None,
                metadata={"fallback_source": source},
            ),
        )

    def _ecosystem_patterns(self, adapter: Any) -> Optional[Dict[str, str]]:
        if getattr(adapter, "ecosystem", EVM) == EVM:
            return None
        try:
            patterns = adapter.get_error_patterns()
        except Exception:
            logger.warning(f"Adapter {adapter!r} failed to provide error patterns", exc_info=True)
            return None
        return patterns if isinstance(patterns, Mapping) else None

    def _localize_match(self, match: ErrorMapping, language: str) -> str:
        if language == self.i18n.base_language:
            return match.message
        return (
            self.i18n.lookup(match.message, language)
            or self.i18n.lookup(match.pattern, language)
            or match.message
        )

    def _localized_fallback(
        self,
        error_type: Optional[ErrorType],
        language: str,
        fallback_language: Optional[str]
    ) -> Tuple[str, str]:
        key = f"errors.{get_fallback_key(error_type)}"
        for candidate in (language, fallback_language):
            if candidate and candidate != self.i18n.base_language:
                text = self.i18n.lookup(key, candidate)
                if text:
                    return text, "i18n"
        text = self.i18n.lookup_base(key)
        if text:
            return text, "default"
        return get_default_fallback(error_type), "default"

    # ------------------------------------------------------------------
    # Custom chains
    # ------------------------------------------------------------------

    def register_custom_chain(self, config: Any) -> CustomChainConfig:
        """Register a custom chain. See ``CustomChainRegistry.register``."""
        return self.custom_chains.register(config)

    def unregister_custom_chain(self, chain_id: str) -> bool:
        return self.custom_chains.unregister(chain_id)

    def get_custom_chain(self, chain_id: str) -> Optional[CustomChainConfig]:
        return self.custom_chains.get(chain_id)

    def get_all_custom_chains(self) -> List[CustomChainConfig]:
        return self.custom_chains.get_all()

    def has_custom_chain(self, chain_id: str) -> bool:
        return self.custom_chains.has(chain_id)

    def clear_custom_chains(self) -> None:
        self.custom_chains.clear()

    # ------------------------------------------------------------------
    # Adapters
    # ------------------------------------------------------------------

    def register_adapter(self, adapter: Any) -> None:
        self.adapters.register_adapter(adapter)

    def unregister_adapter(self, ecosystem: str) -> bool:
        return self.adapters.unregister_adapter(ecosystem)

    def get_adapter(self, ecosystem: str) -> Optional[Any]:
        return self.adapters.get_adapter(ecosystem)

    def detect_adapter(self, error: Any) -> Optional[Any]:
        return self.adapters.detect_adapter(error)

    # ------------------------------------------------------------------
    # Internationalization
    # ------------------------------------------------------------------

    def register_locale(self, language: str, translations: Mapping, overrides: Optional[Mapping] = None) -> None:
        self.i18n.register_locale(language, translations, overrides)

    def add_overrides(self, language: str, overrides: Mapping) -> None:
        self.i18n.add_overrides(language, overrides)

    def remove_overrides(self, language: str, keys: List[str]) -> None:
        self.i18n.remove_overrides(language, keys)

    def set_current_language(self, language: str) -> None:
        self.bundles.load_language(language)
        self.i18n.set_current_language(language)

    def get_current_language(self) -> str:
        return self.i18n.get_current_language()

    def get_supported_languages(self) -> List[str]:
        return self.i18n.get_supported_languages()

    def translate(self, key: str, language: Optional[str] = None, params: Optional[Mapping] = None) -> str:
        return self.i18n.translate(key, language, params)

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    def clear_cache(self) -> None:
        if self.cache is not None:
            self.cache.clear()

    def get_cache_stats(self) -> Optional[Dict[str, Any]]:
        return self.cache.get_stats() if self.cache is not None else None

    def reset(self) -> None:
        """Drop custom chains, custom adapters, locales and cached results."""
        self.custom_chains.clear()
        self.adapters.clear_custom_adapters()
        for language in self.bundles.get_loaded_languages():
            self.bundles.unload_language(language)
        self.i18n.clear()
        self.clear_cache()
