"""
Content parts carried by chat messages.

Parts are discriminated on ``type``. Two closed groups are exposed:

``ChatContentPart``
    text, image_url, input_audio and file parts; accepted in user content.
``AssistantContentPart``
    text and refusal parts; accepted in assistant content.
"""

from __future__ import annotations

import base64
import mimetypes
from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from .wire import RequestModel


class ImageDetail(str, Enum):
    AUTO = "auto"
    LOW = "low"
    HIGH = "high"


class InputAudioFormat(str, Enum):
    WAV = "wav"
    MP3 = "mp3"


class ContentPartText(RequestModel):
    type: Literal["text"] = "text"
    text: str


class ImageUrl(RequestModel):
    """Image reference; ``url`` is either an http(s) URL or a base64 data URL."""

    url: str = Field(..., min_length=1)
    detail: Optional[ImageDetail] = None


class ContentPartImageUrl(RequestModel):
    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl

    @classmethod
    def of(cls, url: str, detail: Optional[ImageDetail] = None) -> "ContentPartImageUrl":
        return cls(image_url=ImageUrl(url=url, detail=detail))

    @classmethod
    def from_path(cls, path: Union[str, Path], detail: Optional[ImageDetail] = None) -> "ContentPartImageUrl":
        """Embed a local image as a ``data:`` URL.

        The media type is guessed from the file extension and defaults to
        ``image/png`` when unknown.

        Raises:
            OSError: when the file cannot be read.
        """
        p = Path(path)
        media_type = mimetypes.guess_type(p.name)[0] or "image/png"
        encoded = base64.b64encode(p.read_bytes()).decode("ascii")
        return cls.of(f"data:{media_type};base64,{encoded}", detail)


class InputAudio(RequestModel):
    data: str = Field(..., min_length=1)
    format: InputAudioFormat


class ContentPartInputAudio(RequestModel):
    type: Literal["input_audio"] = "input_audio"
    input_audio: InputAudio


class FileData(RequestModel):
    """Inline file (``file_data`` base64) or a previously uploaded ``file_id``."""

    file_data: Optional[str] = None
    file_id: Optional[str] = None
    filename: Optional[str] = None


class ContentPartFile(RequestModel):
    type: Literal["file"] = "file"
    file: FileData


class ContentPartRefusal(RequestModel):
    type: Literal["refusal"] = "refusal"
    refusal: str


ChatContentPart = Annotated[
    Union[ContentPartText, ContentPartImageUrl, ContentPartInputAudio, ContentPartFile],
    Field(discriminator="type"),
]

AssistantContentPart = Annotated[
    Union[ContentPartText, ContentPartRefusal],
    Field(discriminator="type"),
]


__all__ = [
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
]
