"""Common base for service classes bound to a transport."""

from __future__ import annotations

from ..base.http.transport import HttpTransport


class ServiceBase:
    """A service groups the calls of one API area over a shared transport.

    Providers create exactly one instance per service class; services keep
    no per-call state.
    """

    def __init__(self, transport: HttpTransport) -> None:
        self.transport = transport


__all__ = ["ServiceBase"]
