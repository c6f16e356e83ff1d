"""Core data types for the Qwen translation adapter."""

from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

QWEN_API_URL = "https://dashscope.aliyuncs.com/compatible-mode/v1/chat/completions"
DEFAULT_MODEL = "qwen-mt-turbo"
TRANSLATION_MODEL_PREFIX = "qwen-mt-"


class QwenConfig(BaseModel):
    """Host-supplied configuration for the adapter.

    Both the host's camelCase keys (``apiKey``, ``modelName``) and the
    snake_case field names are accepted.
    """

    api_key: Optional[str] = Field(default=None, alias="apiKey")
    model_name: Optional[str] = Field(
        default=None,
        alias="modelName",
        description="Model to call (e.g. 'qwen-mt-plus', 'qwen-plus'). Defaults to qwen-mt-turbo.",
    )

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        protected_namespaces=(),  # Allow model_* field names
    )


class TranslationRequest(BaseModel):
    """A single text to translate between two language codes."""

    text: str
    source_lang: str
    target_lang: str

    model_config = ConfigDict(frozen=True)


class TranslationResponse(BaseModel):
    """Result of a translation request."""

    text: str
    model: str
    time_taken: float = Field(ge=0.0)

    model_config = ConfigDict(frozen=True)


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str

    model_config = ConfigDict(frozen=True)


class TranslationOptions(BaseModel):
    """Structured language hints understood by the qwen-mt model family."""

    source_lang: str
    target_lang: str

    model_config = ConfigDict(frozen=True)


class ChatPayload(BaseModel):
    """JSON body of a chat-completions request."""

    model: str
    messages: Tuple[ChatMessage, ...]
    translation_options: Optional[TranslationOptions] = None

    model_config = ConfigDict(frozen=True)

    def to_json(self) -> Dict[str, Any]:
        """Return the wire representation, omitting unset optional blocks."""
        return self.model_dump(mode="json", exclude_none=True)


class RequestBody(BaseModel):
    """Body descriptor handed to the transport, which does the serialization."""

    type: Literal["Json"] = "Json"
    payload: Dict[str, Any]

    model_config = ConfigDict(frozen=True)


class RequestOptions(BaseModel):
    """Everything the transport needs to perform the HTTP call."""

    method: str = "POST"
    headers: Dict[str, str] = Field(default_factory=dict)
    body: RequestBody

    model_config = ConfigDict(frozen=True)


class TransportResponse(BaseModel):
    """What a transport returns: success flag, status code and parsed body."""

    ok: bool
    status: int
    data: Any = None

    model_config = ConfigDict(frozen=True)
