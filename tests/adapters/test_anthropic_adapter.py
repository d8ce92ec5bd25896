from __future__ import annotations

import json
from collections.abc import Callable  # noqa: TC003

import httpx
import pytest

from lotwise.adapters.anthropic import AnthropicAPIError, AnthropicCompletionService
from lotwise.adapters.http_resilience import ResilienceConfig, ResilientClient
from lotwise.config import AnthropicConfig, MissingConfigurationError
from lotwise.domain.ports import CompletionError, CompletionRequest, TextCompletionService


def _make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(  # noqa: SLF001  # type: ignore[reportPrivateUsage]
            base_url=resilience.base_url or "",
            headers=resilience.default_headers,
            transport=httpx.MockTransport(async_handler),
        )
        return client

    return factory


def _config() -> AnthropicConfig:
    return AnthropicConfig(
        api_key="test-key",
        model="claude-test",
        resilience=ResilienceConfig(
            name="anthropic-test",
            base_url="https://api.test/v1/",
            cache=None,
            default_headers={"anthropic-version": "2023-06-01"},
        ),
    )


def _message(text: str) -> dict[str, object]:
    return {
        "id": "msg_1",
        "type": "message",
        "role": "assistant",
        "model": "claude-test",
        "content": [{"type": "text", "text": text}],
        "stop_reason": "end_turn",
        "usage": {"input_tokens": 12, "output_tokens": 8},
    }


def test_complete_posts_messages_request() -> None:
    captured: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["path"] = request.url.path
        captured["headers"] = request.headers
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json=_message('  {"issues": []}  '))

    service = AnthropicCompletionService(
        config=_config(), client_factory=_make_client_factory(handler)
    )

    text = service.complete(
        CompletionRequest(prompt="Check this", system_prompt="Answer in JSON", max_tokens=50)
    )

    assert text == '{"issues": []}'
    assert isinstance(service, TextCompletionService)
    assert captured["path"] == "/v1/messages"
    headers = captured["headers"]
    assert isinstance(headers, httpx.Headers)
    assert headers["x-api-key"] == "test-key"
    assert headers["anthropic-version"] == "2023-06-01"
    assert captured["body"] == {
        "model": "claude-test",
        "max_tokens": 50,
        "temperature": 0.0,
        "system": "Answer in JSON",
        "messages": [{"role": "user", "content": "Check this"}],
    }


def test_complete_omits_empty_system_prompt() -> None:
    bodies: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json=_message("ok"))

    service = AnthropicCompletionService(
        config=_config(), client_factory=_make_client_factory(handler)
    )
    service.complete(CompletionRequest(prompt="Hi"))

    assert "system" not in bodies[0]


def test_complete_raises_api_error_for_error_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        _ = request
        return httpx.Response(
            429,
            json={
                "type": "error",
                "error": {"type": "rate_limit_error", "message": "Too many requests"},
            },
        )

    service = AnthropicCompletionService(
        config=_config(), client_factory=_make_client_factory(handler)
    )

    with pytest.raises(AnthropicAPIError, match="Too many requests") as excinfo:
        service.complete(CompletionRequest(prompt="Hi"))

    assert excinfo.value.error_type == "rate_limit_error"


@pytest.mark.parametrize(
    "body",
    [
        {"status_code": 500, "text": "upstream failure"},
        {"status_code": 200, "text": "not json"},
        {"status_code": 200, "json": {"unexpected": True}},
        {"status_code": 200, "json": {"id": "msg_1", "content": [{"type": "tool_use"}]}},
    ],
)
def test_complete_raises_completion_error_for_bad_responses(body: dict[str, object]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        _ = request
        return httpx.Response(**body)  # type: ignore[arg-type]

    service = AnthropicCompletionService(
        config=_config(), client_factory=_make_client_factory(handler)
    )

    with pytest.raises(CompletionError):
        service.complete(CompletionRequest(prompt="Hi"))


def test_complete_wraps_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    service = AnthropicCompletionService(
        config=_config(), client_factory=_make_client_factory(handler)
    )

    with pytest.raises(CompletionError, match="connection refused"):
        service.complete(CompletionRequest(prompt="Hi"))


def test_service_requires_api_key() -> None:
    with pytest.raises(MissingConfigurationError, match="ANTHROPIC_API_KEY"):
        AnthropicCompletionService()
