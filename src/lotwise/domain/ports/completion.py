"""Port for the remote AI text completion service."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class CompletionError(RuntimeError):
    """Raised by completion services when no response text could be produced."""


@dataclass(slots=True, frozen=True)
class CompletionRequest:
    prompt: str
    system_prompt: str = ""
    max_tokens: int = 200
    temperature: float = 0.0


@runtime_checkable
class TextCompletionService(Protocol):
    """Send a prompt and return the raw response text."""

    def complete(self, request: CompletionRequest) -> str: ...


def extract_json_object(text: str) -> dict[str, object] | None:
    """Return the first JSON object embedded in ``text`` or ``None``."""

    decoder = json.JSONDecoder()
    start = text.find("{")
    while start != -1:
        try:
            value, _ = decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            start = text.find("{", start + 1)
            continue
        if isinstance(value, dict):
            return value
        start = text.find("{", start + 1)
    return None


__all__ = [
    "CompletionError",
    "CompletionRequest",
    "TextCompletionService",
    "extract_json_object",
]
