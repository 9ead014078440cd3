"""Base shared constants for the transport, configurators and realtime client.

Central location to avoid scattering magic strings across modules.

Security
--------
This module contains only header names and sentinel strings; no credentials.
"""
from __future__ import annotations

# Reserved payload that terminates a server-sent-event stream.
END_OF_STREAM = "[DONE]"

# Provider key used in logs and errors.
PROVIDER_NAME = "openai"

AUTHORIZATION_HEADER = "Authorization"
BEARER_AUTHORIZATION = "Bearer "
ORGANIZATION_HEADER = "OpenAI-Organization"
PROJECT_HEADER = "OpenAI-Project"
AZURE_API_KEY_HEADER = "api-key"
AZURE_API_VERSION_PARAM = "api-version"

REALTIME_BETA_HEADER = "OpenAI-Beta"
REALTIME_BETA_VALUE = "realtime=v1"
REALTIME_MODEL_PARAM = "model"

__all__ = [
    "END_OF_STREAM",
    "PROVIDER_NAME",
    "AUTHORIZATION_HEADER",
    "BEARER_AUTHORIZATION",
    "ORGANIZATION_HEADER",
    "PROJECT_HEADER",
    "AZURE_API_KEY_HEADER",
    "AZURE_API_VERSION_PARAM",
    "REALTIME_BETA_HEADER",
    "REALTIME_BETA_VALUE",
    "REALTIME_MODEL_PARAM",
]
