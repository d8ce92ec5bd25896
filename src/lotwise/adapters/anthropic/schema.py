"""Anthropic Messages API payload schemas."""

from __future__ import annotations

import logging
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)


class AnthropicBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow")
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.debug(
            "Anthropic %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class MessageParam(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class MessagesRequest(BaseModel):
    model: str
    max_tokens: int
    temperature: float = 0.0
    system: str | None = None
    messages: list[MessageParam]


class ContentBlock(AnthropicBaseModel):
    type: str
    text: str | None = None


class Usage(AnthropicBaseModel):
    input_tokens: int = 0
    output_tokens: int = 0


class MessagesResponse(AnthropicBaseModel):
    id: str
    type: Literal["message"] = "message"
    role: str = "assistant"
    model: str | None = None
    content: list[ContentBlock] = Field(default_factory=list["ContentBlock"])
    stop_reason: str | None = None
    usage: Usage | None = None

    @property
    def first_text(self) -> str | None:
        for block in self.content:
            if block.type == "text" and block.text:
                return block.text
        return None


class ErrorDetail(AnthropicBaseModel):
    type: str
    message: str


class ErrorResponse(AnthropicBaseModel):
    type: Literal["error"] = "error"
    error: ErrorDetail
