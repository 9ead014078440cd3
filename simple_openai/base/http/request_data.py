"""Mutable description of one outgoing HTTP request.

The transport builds an ``HttpRequestData`` from the service call and hands it
to the configured request interceptor, which may rewrite any field (Azure
strips the ``/v1`` prefix and adds ``api-version``) before the ``httpx``
request is built from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

JSON_CONTENT_TYPE = "application/json"
MULTIPART_CONTENT_TYPE = "multipart/form-data"


@dataclass
class HttpRequestData:
    """Request fields prior to transmission.

    Attributes:
        method: HTTP method (``"GET"``, ``"POST"``).
        path: Path relative to the client base URL (``"/v1/chat/completions"``).
        headers: Per-request headers merged over the transport defaults.
        params: Query parameters.
        body: JSON-ready body, or form fields for multipart requests.
        files: Multipart file parts keyed by form field name.
    """

    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None
    files: Dict[str, Path] = field(default_factory=dict)

    @property
    def is_multipart(self) -> bool:
        return bool(self.files)

    @property
    def content_type(self) -> Optional[str]:
        if self.files:
            return MULTIPART_CONTENT_TYPE
        return JSON_CONTENT_TYPE if self.body is not None else None


__all__ = ["HttpRequestData", "JSON_CONTENT_TYPE", "MULTIPART_CONTENT_TYPE"]
