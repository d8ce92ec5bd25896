"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class TermType(StrEnum):
    ARTIST = "artist"
    BRAND = "brand"
    OBJECT_TYPE = "object_type"
    PERIOD = "period"
    MATERIAL = "material"
    KEYWORD = "keyword"
    STYLE = "style"
    COLOR = "color"


class TermSource(StrEnum):
    """Provenance of a candidate term, strongest first."""

    AI_DETECTED = "ai_detected"
    AI_RULES = "ai_rules"
    ARTIST_FIELD = "artist_field"
    CANDIDATE_PROCESSING = "candidate_processing"
    TAXONOMY = "taxonomy"
    FALLBACK = "fallback"


class AnalysisType(StrEnum):
    ARTIST_FIELD = "artist_field"
    AI_ONLY = "ai_only"
    EXISTING_ARTIST_FIELD = "existing_artist_field"
    NON_ART_ITEM = "non_art_item"
    SYSTEM_WITH_EXTENSIONS = "system_with_extensions"


class LookupScope(StrEnum):
    ARTIST = "artist"
    BRAND = "brand"
    FREETEXT = "freetext"


class LookupState(StrEnum):
    PENDING = "pending"
    EXECUTING = "executing"
    DONE = "done"


class ValuationField(StrEnum):
    ESTIMATE = "estimate"
    UPPER_ESTIMATE = "upper_estimate"
    RESERVE = "reserve"


class Severity(StrEnum):
    POSITIVE = "positive"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Significance(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class BrandIssueSource(StrEnum):
    FUZZY_MATCHING = "fuzzy_matching"
    AI_DETECTION = "ai_detection"
