"""Translation interface definitions."""

from typing import Any, Protocol

from qwen_translate.core.types import (
    RequestOptions,
    TransportResponse,
    TranslationRequest,
    TranslationResponse,
)


class TranslationError(Exception):
    """Base class for translation-related errors.

    ``str(error)`` is a display-ready message; ``kind`` tells the variants apart.
    """

    kind = "translation"


class ConfigurationError(TranslationError):
    """The configuration cannot be used to make a request."""

    kind = "configuration"


class HttpError(TranslationError):
    """The endpoint answered with a non-success status."""

    kind = "http"

    def __init__(self, message: str, status: int, body: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class UnexpectedResponseShapeError(TranslationError):
    """The endpoint answered successfully but without translated content."""

    kind = "unexpected_response"

    def __init__(self, message: str, body: Any = None) -> None:
        super().__init__(message)
        self.body = body


class TransportError(TranslationError):
    """The transport could not complete the HTTP exchange."""

    kind = "transport"


class Transport(Protocol):
    """Protocol for the HTTP capability supplied by the host."""

    async def __call__(self, url: str, options: RequestOptions) -> TransportResponse:
        """Perform the request described by ``options`` against ``url``.

        Args:
            url: Absolute endpoint URL
            options: Method, headers and a JSON body descriptor

        Returns:
            The success flag, numeric status and deserialized body
        """
        ...


class ModelInterface(Protocol):
    """Protocol for objects that translate a request end to end."""

    async def translate(
        self,
        request: TranslationRequest,
    ) -> TranslationResponse:
        """Translate content using the model.

        Args:
            request: The translation request

        Returns:
            A single translation response

        Raises:
            TranslationError: If translation fails
        """
        ...
