"""Payload types shared across chat, audio and realtime requests."""

from .audio import AudioFormat, Voice
from .content import (
    AssistantContentPart,
    ChatContentPart,
    ContentPartFile,
    ContentPartImageUrl,
    ContentPartInputAudio,
    ContentPartRefusal,
    ContentPartText,
    FileData,
    ImageDetail,
    ImageUrl,
    InputAudio,
    InputAudioFormat,
)
from .response_format import (
    JsonSchema,
    ResponseFormat,
    ResponseFormatJsonObject,
    ResponseFormatJsonSchema,
    ResponseFormatText,
)
from .stream_options import StreamOptions
from .tool import FunctionCall, FunctionDef, FunctionName, Tool, ToolCall, ToolChoice
from .wire import RequestModel, WireModel

__all__ = [
    "WireModel",
    "RequestModel",
    "Voice",
    "AudioFormat",
    "ImageDetail",
    "InputAudioFormat",
    "ContentPartText",
    "ImageUrl",
    "ContentPartImageUrl",
    "InputAudio",
    "ContentPartInputAudio",
    "FileData",
    "ContentPartFile",
    "ContentPartRefusal",
    "ChatContentPart",
    "AssistantContentPart",
    "FunctionDef",
    "Tool",
    "FunctionCall",
    "ToolCall",
    "FunctionName",
    "ToolChoice",
    "ResponseFormat",
    "ResponseFormatText",
    "ResponseFormatJsonObject",
    "JsonSchema",
    "ResponseFormatJsonSchema",
    "StreamOptions",
]
