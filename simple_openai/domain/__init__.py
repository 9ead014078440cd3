"""Typed request and response payloads for the OpenAI HTTP API."""
