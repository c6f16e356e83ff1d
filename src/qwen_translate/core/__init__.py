"""Core functionality for qwen-translate."""

from qwen_translate.core.types import (
    DEFAULT_MODEL,
    QWEN_API_URL,
    QwenConfig,
    RequestOptions,
    TranslationRequest,
    TranslationResponse,
    TransportResponse,
)
from qwen_translate.core.translation import (
    ConfigurationError,
    HttpError,
    TranslationError,
    UnexpectedResponseShapeError,
    create_translator,
    translate,
)

__all__ = [
    "DEFAULT_MODEL",
    "QWEN_API_URL",
    "QwenConfig",
    "RequestOptions",
    "TranslationRequest",
    "TranslationResponse",
    "TransportResponse",
    "ConfigurationError",
    "HttpError",
    "TranslationError",
    "UnexpectedResponseShapeError",
    "create_translator",
    "translate",
]
