"""Qwen (DashScope) translation adapter."""

import json
from datetime import datetime
from typing import Any, Optional, Sequence, Union

from qwen_translate.core.translation.interface import (
    ConfigurationError,
    HttpError,
    ModelInterface,
    Transport,
    UnexpectedResponseShapeError,
)
from qwen_translate.core.types import (
    DEFAULT_MODEL,
    QWEN_API_URL,
    TRANSLATION_MODEL_PREFIX,
    ChatMessage,
    ChatPayload,
    QwenConfig,
    RequestBody,
    RequestOptions,
    TranslationOptions,
    TranslationRequest,
    TranslationResponse,
)
_MISSING = object()


def effective_model_name(model_name: Optional[str]) -> str:
    """Return the configured model, or the default when none is set."""
    return model_name or DEFAULT_MODEL


def is_translation_model(model_name: str) -> bool:
    """Whether the model belongs to the translation-specialized qwen-mt family."""
    return model_name.startswith(TRANSLATION_MODEL_PREFIX)


def build_payload(
    text: str, source_lang: str, target_lang: str, model_name: str
) -> ChatPayload:
    """Build the chat-completions body for a single text.

    Language codes are passed through untouched; only qwen-mt models receive
    them, as ``translation_options``. Other models get plain chat prompting.
    """
    options = None
    if is_translation_model(model_name):
        options = TranslationOptions(source_lang=source_lang, target_lang=target_lang)

    return ChatPayload(
        model=model_name,
        messages=(ChatMessage(role="user", content=text),),
        translation_options=options,
    )


def build_request_options(api_key: str, payload: ChatPayload) -> RequestOptions:
    return RequestOptions(
        method="POST",
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        },
        body=RequestBody(type="Json", payload=payload.to_json()),
    )


def lookup_path(data: Any, path: Sequence[Union[str, int]]) -> Optional[Any]:
    """Walk ``path`` through nested dicts and lists.

    Returns None as soon as a key is missing, an index is out of range or a
    container has the wrong type.
    """
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, (list, tuple)) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(step, _MISSING)
            if current is _MISSING:
                return None
    return current


def dump_body(data: Any) -> str:
    """Serialize a response body for error messages, compact and unescaped."""
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"), default=str)


async def translate(
    text: str,
    source_lang: str,
    target_lang: str,
    config: QwenConfig,
    transport: Transport,
) -> str:
    """Translate ``text`` with a single chat-completions call.

    Args:
        text: Text to translate, passed to the model as-is
        source_lang: Source language code, sent verbatim
        target_lang: Target language code, sent verbatim
        config: API key and optional model name
        transport: Capability that performs the HTTP request

    Returns:
        The translated text from ``choices[0].message.content``

    Raises:
        ConfigurationError: If no API key is configured (nothing is sent)
        HttpError: If the endpoint answers with a non-success status
        UnexpectedResponseShapeError: If the response carries no content
    """
    if not config.api_key:
        raise ConfigurationError(
            "API key missing. Please provide your Qwen (DashScope) API key."
        )

    model_name = effective_model_name(config.model_name)
    payload = build_payload(text, source_lang, target_lang, model_name)
    options = build_request_options(config.api_key, payload)

    response = await transport(QWEN_API_URL, options)

    if not response.ok:
        raise HttpError(
            "Qwen API Http Request Error\n"
            f"Http Status: {response.status}\n"
            f"{dump_body(response.data)}",
            status=response.status,
            body=response.data,
        )

    content = lookup_path(response.data, ("choices", 0, "message", "content"))
    if not isinstance(content, str) or not content:
        raise UnexpectedResponseShapeError(
            "Qwen API Error: no translated content found in response.\n"
            f"Response: {dump_body(response.data)}",
            body=response.data,
        )

    return content


class QwenTranslator(ModelInterface):
    """Binds a configuration and a transport to the adapter."""

    def __init__(self, config: QwenConfig, transport: Transport) -> None:
        self.config = config
        self.transport = transport

    @property
    def model(self) -> str:
        return effective_model_name(self.config.model_name)

    async def translate(self, request: TranslationRequest) -> TranslationResponse:
        """Translate a request and record the model used and the time taken.

        Raises:
            TranslationError: If translation fails
        """
        start_time = datetime.now()

        text = await translate(
            request.text,
            request.source_lang,
            request.target_lang,
            self.config,
            self.transport,
        )

        time_taken = (datetime.now() - start_time).total_seconds()
        return TranslationResponse(text=text, model=self.model, time_taken=time_taken)

