"""
Bundled translation dictionaries.

``BASE_TRANSLATIONS`` is the English dictionary every lookup falls back to;
its ``errors`` section carries the default fallback messages. The other
bundles are loaded on demand by the language bundle manager.
"""

from typing import Any, Dict

from web3_error_helper.constants import DEFAULT_FALLBACK_MESSAGES

BASE_TRANSLATIONS: Dict[str, Any] = {
    "errors": {
        **DEFAULT_FALLBACK_MESSAGES,
        "gas": "Gas estimation failed. Please try again or increase your gas limit.",
        "transaction": "Transaction failed. Please try again.",
        "unknown": "An unknown error occurred",
    },
    "messages": {
        "retry": "Please try again.",
        "check_connection": "Please check your connection.",
        "check_wallet": "Please check your wallet connection.",
    },
}

BUNDLED_TRANSLATIONS: Dict[str, Dict[str, Any]] = {
    "es": {
        "errors": {
            "generic": "Ocurrió un error al procesar tu solicitud. Por favor, inténtalo de nuevo.",
            "network": "Ocurrió un error de red. Por favor, verifica tu conexión e inténtalo de nuevo.",
            "wallet": "Ocurrió un error en la billetera. Por favor, verifica la conexión de tu billetera e inténtalo de nuevo.",
            "contract": "Ocurrió un error en el contrato inteligente. Por favor, verifica los detalles de la transacción e inténtalo de nuevo.",
            "gas": "Falló la estimación de gas. Por favor, inténtalo de nuevo o aumenta el límite de gas.",
            "transaction": "La transacción falló. Por favor, inténtalo de nuevo.",
            "unknown": "Ocurrió un error desconocido",
        },
        "messages": {
            "retry": "Por favor, inténtalo de nuevo.",
            "check_connection": "Por favor, verifica tu conexión.",
            "check_wallet": "Por favor, verifica la conexión de tu billetera.",
        },
    },
    "pt": {
        "errors": {
            "generic": "Ocorreu um erro ao processar sua solicitação. Por favor, tente novamente.",
            "network": "Ocorreu um erro de rede. Por favor, verifique sua conexão e tente novamente.",
            "wallet": "Ocorreu um erro na carteira. Por favor, verifique a conexão da sua carteira e tente novamente.",
            "contract": "Ocorreu um erro no contrato inteligente. Por favor, verifique os detalhes da transação e tente novamente.",
            "gas": "A estimativa de gas falhou. Por favor, tente novamente ou aumente o limite de gas.",
            "transaction": "A transação falhou. Por favor, tente novamente.",
            "unknown": "Ocorreu um erro desconhecido",
        },
        "messages": {
            "retry": "Por favor, tente novamente.",
            "check_connection": "Por favor, verifique sua conexão.",
            "check_wallet": "Por favor, verifique a conexão da sua carteira.",
        },
    },
}
