"""Unit tests for the data models."""

import pytest
from pydantic import ValidationError

from web3_error_helper.models import (
    CustomChainConfig,
    CustomFallbacks,
    ErrorContext,
    ErrorMapping,
    ErrorSeverity,
    ErrorTranslationResult,
    TranslateErrorOptions,
)


class TestErrorMapping:
    """Test suite for ErrorMapping."""

    def test_camel_case_alias(self):
        mapping = ErrorMapping.model_validate({"pattern": "p", "message": "m", "isRegex": True})

        assert mapping.is_regex is True
        assert mapping.priority == 0

    def test_none_priority_defaults_to_zero(self):
        assert ErrorMapping(pattern="p", message="m", priority=None).priority == 0

    @pytest.mark.parametrize("field", ["pattern", "message"])
    def test_blank_text_rejected(self, field):
        data = {"pattern": "p", "message": "m", field: "  "}

        with pytest.raises(ValidationError):
            ErrorMapping.model_validate(data)

    def test_frozen(self):
        mapping = ErrorMapping(pattern="p", message="m")

        with pytest.raises(ValidationError):
            mapping.priority = 5


class TestCustomChainConfig:
    """Test suite for CustomChainConfig and CustomFallbacks."""

    def test_snake_case_fields(self):
        config = CustomChainConfig(
            chain_id="snake",
            name="Snake",
            error_mappings=[],
            custom_fallbacks=CustomFallbacks(generic="Oops"),
            metadata={"rpc": "http://localhost:8545"},
        )

        assert config.custom_fallbacks.get("generic") == "Oops"
        assert config.is_evm_compatible is False

    def test_fallback_lookup(self):
        fallbacks = CustomFallbacks(network="Down", wallet="")

        assert fallbacks.get("network") == "Down"
        assert fallbacks.get("wallet") is None
        assert fallbacks.get("gas") is None


class TestTranslationModels:
    """Test suite for the request and result models."""

    def test_options_accept_camel_case(self):
        options = TranslateErrorOptions.model_validate({
            "chain": "polygon",
            "fallbackMessage": "Custom",
            "includeOriginalError": True,
            "customMappings": {"a": "b"},
            "autoDetectLanguage": True,
            "fallbackLanguage": "es",
        })

        assert options.fallback_message == "Custom"
        assert options.include_original_error is True
        assert options.custom_mappings == {"a": "b"}
        assert options.auto_detect_language is True
        assert options.fallback_language == "es"

    def test_result_equality_ignores_context(self):
        """Test two results differing only in context compare equal."""
        # Setup
        first = ErrorTranslationResult(
            message="m", translated=True, chain="ethereum",
            context=ErrorContext(chain="ethereum", ecosystem="evm", language="en",
                                 severity=ErrorSeverity.LOW, timestamp=1.0),
        )
        second = ErrorTranslationResult(
            message="m", translated=True, chain="ethereum",
            context=ErrorContext(chain="ethereum", ecosystem="evm", language="en",
                                 severity=ErrorSeverity.LOW, timestamp=2.0),
        )

        # Verify
        assert first == second

    def test_result_to_dict(self):
        result = ErrorTranslationResult(message="m", translated=False, chain="bsc")

        data = result.to_dict()

        assert data == {
            "message": "m",
            "translated": False,
            "chain": "bsc",
            "retryable": False,
            "fallback_used": False,
        }

    def test_result_to_dict_with_original_error(self):
        error = {"code": 4001}
        result = ErrorTranslationResult(
            message="m", translated=True, chain="ethereum", original_error=error,
            context=ErrorContext(chain="ethereum", ecosystem="evm", language="en",
                                 severity=ErrorSeverity.LOW),
        )

        data = result.to_dict()

        assert data["original_error"] is error
        assert data["context"]["severity"] == ErrorSeverity.LOW
