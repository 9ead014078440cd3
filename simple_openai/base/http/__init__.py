"""HTTP transport layer: request data, serializer and the httpx-backed transport."""

from .request_data import HttpRequestData
from .serializer import PydanticSerializer, Serializer
from .transport import BodyInspector, HttpTransport, RequestInterceptor

__all__ = [
    "HttpRequestData",
    "Serializer",
    "PydanticSerializer",
    "HttpTransport",
    "RequestInterceptor",
    "BodyInspector",
]
