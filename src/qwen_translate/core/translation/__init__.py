"""Translation engine for qwen-translate."""

from typing import Optional

from qwen_translate.core.translation.interface import (
    ConfigurationError,
    HttpError,
    ModelInterface,
    Transport,
    TransportError,
    TranslationError,
    UnexpectedResponseShapeError,
)
from qwen_translate.core.translation.qwen import QwenTranslator, translate
from qwen_translate.core.types import QwenConfig


def create_translator(
    config: QwenConfig, transport: Optional[Transport] = None
) -> ModelInterface:
    """Create a translator instance based on configuration.

    Args:
        config: API key and model name
        transport: HTTP capability to use. Defaults to an httpx transport.

    Returns:
        Configured translator instance
    """
    if transport is None:
        from qwen_translate.core.transport import HttpxTransport

        transport = HttpxTransport()

    return QwenTranslator(config, transport)


__all__ = [
    "ConfigurationError",
    "HttpError",
    "ModelInterface",
    "QwenTranslator",
    "Transport",
    "TransportError",
    "TranslationError",
    "UnexpectedResponseShapeError",
    "create_translator",
    "translate",
]
