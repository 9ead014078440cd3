"""
simple_openai
=============

Typed client for the OpenAI HTTP API: chat completions (plain and streamed),
audio speech/transcription/translation and realtime sessions, for OpenAI and
Azure OpenAI deployments.

Quick start::

    from simple_openai import ChatRequest, SimpleOpenAI, UserMessage

    with SimpleOpenAI() as client:  # key from OPENAI_API_KEY
        chat = client.chat_completions().create(
            ChatRequest(model="gpt-4o-mini", messages=[UserMessage.of("Hi")])
        )
        print(chat.first_content())
"""

from .azure.client import AzureOpenAIConfigurator, SimpleOpenAIAzure
from .base.client_config import ClientConfig
from .base.configurator import OpenAIConfigurator
from .base.errors import (
    ConfigurationError,
    ConstraintViolationError,
    ErrorCode,
    OpenAIResponseError,
    ProviderError,
    SchemaError,
    Violation,
)
from .base.provider import OpenAIProvider
from .base.realtime_config import RealtimeConfig
from .base.validation import Validator
from .domain.audio import (
    SpeechRequest,
    SpeechResponseFormat,
    TimestampGranularity,
    Transcription,
    TranscriptionRequest,
    TranscriptionResponseFormat,
    TranslationRequest,
)
from .domain.chat import (
    AssistantMessage,
    Chat,
    ChatRequest,
    DeveloperMessage,
    ResponseMessage,
    SystemMessage,
    ToolMessage,
    UserMessage,
)
from .domain.common import (
    ContentPartImageUrl,
    ContentPartText,
    FunctionDef,
    StreamOptions,
    Tool,
    ToolChoice,
)
from .domain.realtime import ClientEvent, ServerEvent
from .openai.client import SimpleOpenAI, SimpleOpenAIConfigurator
from .realtime.client import OpenAIRealtime
from .services import AudioServices, ChatCompletionServices

__version__ = "0.1.0"

__all__ = [
    "SimpleOpenAI",
    "SimpleOpenAIConfigurator",
    "SimpleOpenAIAzure",
    "AzureOpenAIConfigurator",
    "OpenAIProvider",
    "OpenAIConfigurator",
    "ClientConfig",
    "RealtimeConfig",
    "OpenAIRealtime",
    "ChatCompletionServices",
    "AudioServices",
    "Validator",
    "ErrorCode",
    "ProviderError",
    "OpenAIResponseError",
    "ConfigurationError",
    "ConstraintViolationError",
    "SchemaError",
    "Violation",
    "ChatRequest",
    "Chat",
    "DeveloperMessage",
    "SystemMessage",
    "UserMessage",
    "AssistantMessage",
    "ToolMessage",
    "ResponseMessage",
    "ContentPartText",
    "ContentPartImageUrl",
    "Tool",
    "FunctionDef",
    "ToolChoice",
    "StreamOptions",
    "SpeechRequest",
    "SpeechResponseFormat",
    "TranscriptionRequest",
    "TranslationRequest",
    "TranscriptionResponseFormat",
    "TimestampGranularity",
    "Transcription",
    "ClientEvent",
    "ServerEvent",
    "__version__",
]
