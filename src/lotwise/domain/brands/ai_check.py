"""AI-assisted brand spelling check over a text completion service."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from lotwise.domain.model import BrandIssue, BrandIssueSource
from lotwise.domain.ports.completion import CompletionError, CompletionRequest, extract_json_object

from .known_brands import infer_category

if TYPE_CHECKING:
    from lotwise.domain.ports import TextCompletionService

log = getLogger(__name__)

MIN_AI_CONFIDENCE = 0.85
DEFAULT_AI_CONFIDENCE = 0.8
BRAND_CHECK_MAX_TOKENS = 200

SYSTEM_PROMPT = (
    "You identify misspelled brand names in auction catalogue texts. "
    "Always answer with valid JSON."
)

PROMPT_TEMPLATE = """Analyse this auction text and identify misspelled brand or maker names.

TEXT: "{text}"

IMPORTANT:
- Include all kinds of brands: watches, glass, ceramics, furniture, design, art,
  electronics and luxury goods.
- IGNORE personal names and artist names; they must not be flagged as misspellings.
- IGNORE place and city names (for example Hälsingborg, Stockholm).
- Only flag a word if you are CERTAIN it is a misspelled brand, not a person or a place.
- Confidence must be at least 0.90 to be reported.

Answer ONLY with JSON:
{{"issues":[{{"original":"misspelled","suggested":"correct","confidence":0.95}}]}}

If nothing is misspelled: {{"issues":[]}}"""


class AIBrandSuggestion(BaseModel):
    model_config = ConfigDict(extra="ignore")

    original: str = Field(min_length=1)
    suggested: str = Field(min_length=1)
    confidence: float = DEFAULT_AI_CONFIDENCE


class AIBrandResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    issues: list[AIBrandSuggestion] = Field(default_factory=list)


def build_brand_prompt(title: str, description: str = "") -> str:
    text = f"{title} {description}".strip()
    return PROMPT_TEMPLATE.format(text=text)


def parse_brand_response(
    text: str, *, min_confidence: float = MIN_AI_CONFIDENCE
) -> list[BrandIssue]:
    """Turn raw completion text into brand issues; malformed text yields ``[]``."""

    payload = extract_json_object(text)
    if payload is None:
        log.debug("Brand check response contained no JSON object")
        return []
    try:
        response = AIBrandResponse.model_validate(payload)
    except ValidationError as exc:
        log.debug("Brand check response had an unexpected shape: %s", exc)
        return []

    return [
        BrandIssue(
            original_brand=suggestion.original,
            suggested_brand=suggestion.suggested,
            confidence=suggestion.confidence,
            category=infer_category(suggestion.suggested),
            source=BrandIssueSource.AI_DETECTION,
        )
        for suggestion in response.issues
        if suggestion.confidence >= min_confidence
    ]


class AIBrandChecker:
    def __init__(
        self,
        completion: TextCompletionService,
        *,
        min_confidence: float = MIN_AI_CONFIDENCE,
    ) -> None:
        self._completion = completion
        self._min_confidence = min_confidence

    def check(self, title: str, description: str = "") -> list[BrandIssue]:
        request = CompletionRequest(
            prompt=build_brand_prompt(title, description),
            system_prompt=SYSTEM_PROMPT,
            max_tokens=BRAND_CHECK_MAX_TOKENS,
            temperature=0.0,
        )
        try:
            text = self._completion.complete(request)
        except CompletionError as exc:
            log.warning("AI brand check failed, using fuzzy matching only: %s", exc)
            return []
        return parse_brand_response(text, min_confidence=self._min_confidence)


__all__ = [
    "AIBrandChecker",
    "AIBrandResponse",
    "AIBrandSuggestion",
    "build_brand_prompt",
    "parse_brand_response",
]
