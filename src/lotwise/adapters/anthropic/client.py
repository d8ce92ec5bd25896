"""HTTP client for the Anthropic Messages API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from lotwise.adapters.http_resilience import ResilienceConfig, ResilientClient
from lotwise.config.anthropic import AnthropicConfig, get_anthropic_config
from lotwise.domain.ports.completion import CompletionError, CompletionRequest

from .schema import ErrorResponse, MessageParam, MessagesRequest, MessagesResponse

if TYPE_CHECKING:
    from collections.abc import Callable

log = getLogger(__name__)

MESSAGES_PATH = "messages"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class AnthropicAPIError(CompletionError):
    """Raised when the Messages API answers with an error payload."""

    def __init__(self, message: str, *, error_type: str | None = None) -> None:
        super().__init__(message)
        self.error_type = error_type


@dataclass(slots=True)
class AnthropicCompletionService:
    config: AnthropicConfig = field(default_factory=get_anthropic_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def complete(self, request: CompletionRequest) -> str:
        return asyncio.run(self._complete_async(request))

    async def _complete_async(self, request: CompletionRequest) -> str:
        body = MessagesRequest(
            model=self.config.model,
            max_tokens=request.max_tokens,
            temperature=request.temperature,
            system=request.system_prompt or None,
            messages=[MessageParam(role="user", content=request.prompt)],
        )
        headers = {"x-api-key": self.config.api_key}

        try:
            async with self.client_factory(self.config.resilience) as client:
                response = await client.post(
                    MESSAGES_PATH,
                    json=body.model_dump(exclude_none=True),
                    headers=headers,
                )
        except httpx.HTTPError as exc:
            raise CompletionError(f"Anthropic request failed: {exc}") from exc

        return self._parse_response(response)

    def _parse_response(self, response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError as exc:
            raise CompletionError("Anthropic response was not JSON") from exc

        if response.is_error:
            try:
                error = ErrorResponse.model_validate(payload)
            except ValidationError:
                raise CompletionError(
                    f"Anthropic request failed with HTTP {response.status_code}"
                ) from None
            raise AnthropicAPIError(error.error.message, error_type=error.error.type)

        try:
            message = MessagesResponse.model_validate(payload)
        except ValidationError as exc:
            raise CompletionError("Unexpected Anthropic response payload") from exc

        text = message.first_text
        if text is None:
            raise CompletionError("Anthropic response contained no text block")
        if message.usage is not None:
            log.debug(
                "Anthropic completion used %d input / %d output tokens",
                message.usage.input_tokens,
                message.usage.output_tokens,
            )
        return text.strip()


def build_http_completion_service() -> AnthropicCompletionService:
    """Create a completion service from environment configuration."""

    return AnthropicCompletionService(config=get_anthropic_config())


__all__ = [
    "AnthropicAPIError",
    "AnthropicCompletionService",
    "build_http_completion_service",
]
