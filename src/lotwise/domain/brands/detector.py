"""Combined fuzzy and AI brand spelling detection."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .fuzzy import FuzzyBrandMatcher

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lotwise.domain.model import BrandIssue

    from .ai_check import AIBrandChecker

log = getLogger(__name__)


def deduplicate_issues(issues: Iterable[BrandIssue]) -> list[BrandIssue]:
    """Collapse issues sharing an original OR a suggested brand (case-insensitive).

    On a collision the higher-confidence issue fully replaces the kept one. The
    result is sorted by confidence, highest first.
    """

    unique: list[BrandIssue] = []
    for issue in issues:
        original = issue.original_brand.casefold()
        suggested = issue.suggested_brand.casefold()
        for index, existing in enumerate(unique):
            if (
                existing.original_brand.casefold() == original
                or existing.suggested_brand.casefold() == suggested
            ):
                if issue.confidence > existing.confidence:
                    unique[index] = issue
                break
        else:
            unique.append(issue)
    return sorted(unique, key=lambda issue: issue.confidence, reverse=True)


class BrandSpellingDetector:
    def __init__(
        self,
        fuzzy: FuzzyBrandMatcher | None = None,
        ai: AIBrandChecker | None = None,
    ) -> None:
        self._fuzzy = fuzzy or FuzzyBrandMatcher()
        self._ai = ai

    @property
    def uses_ai(self) -> bool:
        return self._ai is not None

    def detect(self, title: str, description: str = "") -> list[BrandIssue]:
        issues = self._fuzzy.detect(title, description)
        if self._ai is not None:
            issues.extend(self._ai.check(title, description))
        unique = deduplicate_issues(issues)
        log.debug("Brand spelling detection: %d raw, %d unique issues", len(issues), len(unique))
        return unique


__all__ = ["BrandSpellingDetector", "deduplicate_issues"]
