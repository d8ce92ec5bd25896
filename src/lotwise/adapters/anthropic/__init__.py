"""Anthropic Messages API adapter."""

from __future__ import annotations

from .client import AnthropicAPIError, AnthropicCompletionService, build_http_completion_service
from .schema import ContentBlock, ErrorResponse, MessagesRequest, MessagesResponse

__all__ = [
    "AnthropicAPIError",
    "AnthropicCompletionService",
    "ContentBlock",
    "ErrorResponse",
    "MessagesRequest",
    "MessagesResponse",
    "build_http_completion_service",
]
