"""Brand spelling detection."""

from __future__ import annotations

from .ai_check import AIBrandChecker, build_brand_prompt, parse_brand_response
from .detector import BrandSpellingDetector, deduplicate_issues
from .fuzzy import BrandMatchThresholds, FuzzyBrandMatcher, candidate_phrases
from .known_brands import KNOWN_BRANDS, infer_category
from .similarity import levenshtein, similarity

__all__ = [
    "KNOWN_BRANDS",
    "AIBrandChecker",
    "BrandMatchThresholds",
    "BrandSpellingDetector",
    "FuzzyBrandMatcher",
    "build_brand_prompt",
    "candidate_phrases",
    "deduplicate_issues",
    "infer_category",
    "levenshtein",
    "parse_brand_response",
    "similarity",
]
