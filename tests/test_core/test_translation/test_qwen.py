"""Tests for the Qwen translation adapter."""

from typing import Any, List, Tuple

import pytest

from qwen_translate.core.translation import create_translator
from qwen_translate.core.translation.interface import (
    ConfigurationError,
    HttpError,
    TranslationError,
    UnexpectedResponseShapeError,
)
from qwen_translate.core.translation.qwen import (
    QwenTranslator,
    build_payload,
    dump_body,
    effective_model_name,
    lookup_path,
    translate,
)
from qwen_translate.core.transport import HttpxTransport
from qwen_translate.core.types import (
    DEFAULT_MODEL,
    QWEN_API_URL,
    QwenConfig,
    RequestOptions,
    TranslationRequest,
    TransportResponse,
)


class RecordingTransport:
    """Transport spy that answers every call with the same response."""

    def __init__(self, response: TransportResponse) -> None:
        self.response = response
        self.calls: List[Tuple[str, RequestOptions]] = []

    async def __call__(self, url: str, options: RequestOptions) -> TransportResponse:
        self.calls.append((url, options))
        return self.response

    @property
    def payload(self) -> dict:
        return self.calls[-1][1].body.payload


def ok_response(content: Any = "你好") -> TransportResponse:
    return TransportResponse(
        ok=True,
        status=200,
        data={"choices": [{"message": {"role": "assistant", "content": content}}]},
    )


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport(ok_response())


@pytest.fixture
def config() -> QwenConfig:
    return QwenConfig(api_key="sk-test", model_name="qwen-mt-plus")


@pytest.mark.asyncio
async def test_returns_translated_content(config, transport):
    """The first choice's message content is returned verbatim."""
    result = await translate("Hello", "en", "zh", config, transport)
    assert result == "你好"
    assert len(transport.calls) == 1


@pytest.mark.asyncio
async def test_request_wire_shape(config, transport):
    """URL, method, headers and body descriptor match the DashScope contract."""
    await translate("Hello", "en", "zh", config, transport)

    url, options = transport.calls[0]
    assert url == QWEN_API_URL
    assert options.method == "POST"
    assert options.headers == {
        "Content-Type": "application/json",
        "Authorization": "Bearer sk-test",
    }
    assert options.body.type == "Json"
    assert options.body.payload == {
        "model": "qwen-mt-plus",
        "messages": [{"role": "user", "content": "Hello"}],
        "translation_options": {"source_lang": "en", "target_lang": "zh"},
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("api_key", [None, ""])
async def test_missing_api_key_sends_nothing(api_key, transport):
    """No request is attempted without an API key."""
    config = QwenConfig(api_key=api_key, model_name="qwen-mt-plus")

    with pytest.raises(ConfigurationError, match="API key missing"):
        await translate("Hello", "en", "zh", config, transport)

    assert transport.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("model_name", [None, ""])
async def test_default_model(model_name, transport):
    """A missing or empty model name falls back to qwen-mt-turbo."""
    config = QwenConfig(api_key="sk-test", model_name=model_name)

    await translate("Hello", "en", "zh", config, transport)

    assert transport.payload["model"] == DEFAULT_MODEL == "qwen-mt-turbo"
    assert "translation_options" in transport.payload


@pytest.mark.asyncio
@pytest.mark.parametrize("model_name", ["qwen-mt-turbo", "qwen-mt-plus", "qwen-mt-anything"])
async def test_translation_options_for_mt_models(model_name, transport):
    """Language codes are forwarded untouched to qwen-mt models."""
    config = QwenConfig(api_key="sk-test", model_name=model_name)

    await translate("Bonjour", "French", "zh_cn", config, transport)

    assert transport.payload["translation_options"] == {
        "source_lang": "French",
        "target_lang": "zh_cn",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("model_name", ["qwen-plus", "qwen-max", "qwen-mt", "Qwen-MT-turbo", "gpt-4o"])
async def test_no_translation_options_for_other_models(model_name, transport):
    """Plain chat models only get the text as a user message."""
    config = QwenConfig(api_key="sk-test", model_name=model_name)

    await translate("Hello", "en", "zh", config, transport)

    assert "translation_options" not in transport.payload
    assert transport.payload == {
        "model": model_name,
        "messages": [{"role": "user", "content": "Hello"}],
    }


@pytest.mark.asyncio
async def test_http_error_includes_status_and_body(config):
    transport = RecordingTransport(
        TransportResponse(ok=False, status=401, data={"error": "unauthorized"})
    )

    with pytest.raises(HttpError) as exc_info:
        await translate("Hello", "en", "zh", config, transport)

    error = exc_info.value
    assert "401" in str(error)
    assert '{"error":"unauthorized"}' in str(error)
    assert error.status == 401
    assert error.body == {"error": "unauthorized"}
    assert error.kind == "http"


@pytest.mark.asyncio
async def test_http_error_with_non_json_body(config):
    """Raw text bodies are still reported."""
    transport = RecordingTransport(
        TransportResponse(ok=False, status=502, data="Bad Gateway")
    )

    with pytest.raises(HttpError, match="Http Status: 502") as exc_info:
        await translate("Hello", "en", "zh", config, transport)

    assert '"Bad Gateway"' in str(exc_info.value)


@pytest.mark.asyncio
async def test_empty_response_body(config):
    """A body without choices is a shape error carrying the serialized body."""
    transport = RecordingTransport(TransportResponse(ok=True, status=200, data={}))

    with pytest.raises(UnexpectedResponseShapeError) as exc_info:
        await translate("Hello", "en", "zh", config, transport)

    assert "Response: {}" in str(exc_info.value)
    assert exc_info.value.body == {}
    assert exc_info.value.kind == "unexpected_response"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "data",
    [
        {"choices": []},
        {"choices": [{}]},
        {"choices": [{"message": None}]},
        {"choices": [{"message": {"content": ""}}]},
        {"choices": [{"message": {"content": None}}]},
        {"choices": [{"message": {"content": ["not", "text"]}}]},
        {"choices": "oops"},
        None,
        "plain text",
        [],
    ],
)
async def test_unexpected_shapes(config, data):
    """Malformed bodies never escape as TypeError, KeyError or IndexError."""
    transport = RecordingTransport(TransportResponse(ok=True, status=200, data=data))

    with pytest.raises(UnexpectedResponseShapeError, match="no translated content"):
        await translate("Hello", "en", "zh", config, transport)


@pytest.mark.asyncio
async def test_unicode_preserved_in_error_body(config):
    data = {"choices": [], "note": "翻译"}
    transport = RecordingTransport(TransportResponse(ok=True, status=200, data=data))

    with pytest.raises(UnexpectedResponseShapeError) as exc_info:
        await translate("Hello", "en", "zh", config, transport)

    assert '{"choices":[],"note":"翻译"}' in str(exc_info.value)


@pytest.mark.asyncio
async def test_repeated_calls_are_independent(config, transport):
    """Identical inputs give identical results and identical requests."""
    first = await translate("Hello", "en", "zh", config, transport)
    second = await translate("Hello", "en", "zh", config, transport)

    assert first == second == "你好"
    assert len(transport.calls) == 2
    assert transport.calls[0] == transport.calls[1]


@pytest.mark.asyncio
async def test_transport_exceptions_propagate(config):
    async def failing_transport(url: str, options: RequestOptions) -> TransportResponse:
        raise TimeoutError("timed out")

    with pytest.raises(TimeoutError):
        await translate("Hello", "en", "zh", config, failing_transport)


def test_errors_share_a_base_class():
    for error_type in (ConfigurationError, HttpError, UnexpectedResponseShapeError):
        assert issubclass(error_type, TranslationError)


def test_config_accepts_host_keys():
    """The host passes camelCase keys."""
    config = QwenConfig.model_validate({"apiKey": "sk-1", "modelName": "qwen-plus"})
    assert config.api_key == "sk-1"
    assert config.model_name == "qwen-plus"


def test_build_payload_is_pure():
    first = build_payload("Hi", "en", "de", "qwen-mt-turbo")
    second = build_payload("Hi", "en", "de", "qwen-mt-turbo")

    assert first == second
    assert first.to_json() == second.to_json()
    with pytest.raises(Exception):
        first.model = "qwen-plus"


def test_effective_model_name():
    assert effective_model_name(None) == "qwen-mt-turbo"
    assert effective_model_name("") == "qwen-mt-turbo"
    assert effective_model_name("qwen-max") == "qwen-max"


@pytest.mark.parametrize(
    "data,path,expected",
    [
        ({"a": [{"b": 1}]}, ("a", 0, "b"), 1),
        ({"a": [{"b": 1}]}, ("a", 1, "b"), None),
        ({"a": [{"b": 1}]}, ("a", "0"), None),
        ({"a": {"b": 1}}, ("a", 0), None),
        ({"a": None}, ("a",), None),
        ([1, 2], (-1,), 2),
        (None, ("a",), None),
    ],
)
def test_lookup_path(data, path, expected):
    assert lookup_path(data, path) == expected


def test_dump_body_handles_non_json_values():
    assert dump_body({}) == "{}"
    assert dump_body(b"raw") == '"b\'raw\'"'


@pytest.mark.asyncio
async def test_translator_wraps_adapter(config, transport):
    translator = QwenTranslator(config, transport)

    response = await translator.translate(
        TranslationRequest(text="Hello", source_lang="en", target_lang="zh")
    )

    assert response.text == "你好"
    assert response.model == "qwen-mt-plus"
    assert response.time_taken >= 0


def test_create_translator_defaults_to_httpx(config):
    translator = create_translator(config)
    assert isinstance(translator, QwenTranslator)
    assert isinstance(translator.transport, HttpxTransport)


def test_create_translator_uses_given_transport(config, transport):
    translator = create_translator(config, transport)
    assert translator.transport is transport
