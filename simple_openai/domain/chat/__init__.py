"""Chat completion payloads."""

from .chat import Chat, Choice, CompletionTokensDetails, PromptTokensDetails, Usage
from .chat_message import (
    AssistantMessage,
    AudioRef,
    ChatMessage,
    ChatRole,
    DeveloperMessage,
    ResponseAudio,
    ResponseMessage,
    SystemMessage,
    ToolMessage,
    UserMessage,
    parse_chat_message,
)
from .chat_request import ChatAudio, ChatRequest, Modality, ReasoningEffort, ServiceTier, ToolChoiceOption

__all__ = [
    "ChatRole",
    "DeveloperMessage",
    "SystemMessage",
    "UserMessage",
    "AudioRef",
    "AssistantMessage",
    "ToolMessage",
    "ChatMessage",
    "parse_chat_message",
    "ResponseAudio",
    "ResponseMessage",
    "Modality",
    "ServiceTier",
    "ReasoningEffort",
    "ToolChoiceOption",
    "ChatAudio",
    "ChatRequest",
    "PromptTokensDetails",
    "CompletionTokensDetails",
    "Usage",
    "Choice",
    "Chat",
]
