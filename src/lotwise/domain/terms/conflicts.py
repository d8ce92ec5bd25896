"""Conflict resolution between candidate search terms.

Responsibilities of this stage:
- group candidates that name the same thing (same uniqueness key)
- score every member of a multi-member group with independent rules
- keep exactly one survivor per key, first appearance order preserved

Scoring is a plain sum over an ordered tuple of pure rules. Ties go to the
earliest input.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from logging import getLogger

from lotwise.domain.model import CandidateTerm, TermSource, TermType

log = getLogger(__name__)

DEFAULT_MAX_DISPLAY_TERMS = 12


@dataclass(slots=True, frozen=True)
class ConflictWeights:
    precision_artist: float = 1000.0
    per_character: float = 10.0
    artist_type: float = 500.0
    brand_type: float = 400.0
    keyword_type: float = 100.0
    other_type: float = 200.0
    selected: float = 300.0
    ai_detected: float = 200.0
    ai_rules: float = 150.0
    other_source: float = 50.0


type ScoringRule = Callable[[CandidateTerm, ConflictWeights], float]


def precision_artist_score(term: CandidateTerm, weights: ConflictWeights) -> float:
    """AI-detected, artist-typed and quoted: the strongest precision signal."""

    if (
        term.source is TermSource.AI_DETECTED
        and term.type is TermType.ARTIST
        and term.is_precision_quoted
    ):
        return weights.precision_artist
    return 0.0


def specificity_score(term: CandidateTerm, weights: ConflictWeights) -> float:
    return len(term.term) * weights.per_character


def type_score(term: CandidateTerm, weights: ConflictWeights) -> float:
    match term.type:
        case TermType.ARTIST:
            return weights.artist_type
        case TermType.BRAND:
            return weights.brand_type
        case TermType.KEYWORD:
            return weights.keyword_type
        case _:
            return weights.other_type


def selection_score(term: CandidateTerm, weights: ConflictWeights) -> float:
    return weights.selected if term.is_selected else 0.0


def declared_priority_score(term: CandidateTerm, weights: ConflictWeights) -> float:  # noqa: ARG001
    return term.priority


def provenance_score(term: CandidateTerm, weights: ConflictWeights) -> float:
    match term.source:
        case TermSource.AI_DETECTED:
            return weights.ai_detected
        case TermSource.AI_RULES:
            return weights.ai_rules
        case _:
            return weights.other_source


DEFAULT_RULES: tuple[ScoringRule, ...] = (
    precision_artist_score,
    specificity_score,
    type_score,
    selection_score,
    declared_priority_score,
    provenance_score,
)


def score_term(
    term: CandidateTerm,
    *,
    rules: tuple[ScoringRule, ...] = DEFAULT_RULES,
    weights: ConflictWeights | None = None,
) -> float:
    effective_weights = weights or ConflictWeights()
    return sum(rule(term, effective_weights) for rule in rules)


def _is_displayable(term: object) -> bool:
    if not isinstance(term, CandidateTerm):
        return False
    return isinstance(term.term, str) and bool(term.term.strip())


class TermConflictResolver:
    """Deduplicate and rank candidate search terms."""

    def __init__(
        self,
        *,
        weights: ConflictWeights | None = None,
        rules: tuple[ScoringRule, ...] = DEFAULT_RULES,
    ) -> None:
        self._weights = weights or ConflictWeights()
        self._rules = rules

    def score(self, term: CandidateTerm) -> float:
        return score_term(term, rules=self._rules, weights=self._weights)

    def find_conflicts(self, terms: Iterable[CandidateTerm]) -> dict[str, list[CandidateTerm]]:
        """Return only the groups with more than one member, keyed by uniqueness key."""

        return {key: group for key, group in _group_by_key(terms).items() if len(group) > 1}

    def resolve(self, terms: Iterable[CandidateTerm]) -> list[CandidateTerm]:
        resolved: list[CandidateTerm] = []
        for key, group in _group_by_key(terms).items():
            if len(group) == 1:
                resolved.append(group[0])
                continue
            best = self._select_best(group)
            log.debug(
                "Resolved %d conflicting terms for %r to %r (%s, %s)",
                len(group),
                key,
                best.term,
                best.type,
                best.source,
            )
            resolved.append(best)
        return resolved

    def select_for_display(
        self,
        terms: Iterable[CandidateTerm],
        max_total: int = DEFAULT_MAX_DISPLAY_TERMS,
    ) -> list[CandidateTerm]:
        """Resolve conflicts and cap the list for display.

        Every selected term is kept, even when that exceeds ``max_total``. The remaining
        slots are filled with unselected terms in descending priority order.
        """

        valid = [term for term in terms if _is_displayable(term)]
        resolved = self.resolve(valid)
        selected = [term for term in resolved if term.is_selected]
        unselected = [term for term in resolved if not term.is_selected]
        free_slots = max(0, max_total - len(selected))
        ranked = sorted(unselected, key=lambda term: term.priority, reverse=True)
        return selected + ranked[:free_slots]

    def _select_best(self, group: list[CandidateTerm]) -> CandidateTerm:
        best = group[0]
        best_score = self.score(best)
        for candidate in group[1:]:
            candidate_score = self.score(candidate)
            if candidate_score > best_score:
                best, best_score = candidate, candidate_score
        return best


def _group_by_key(terms: Iterable[CandidateTerm]) -> dict[str, list[CandidateTerm]]:
    groups: dict[str, list[CandidateTerm]] = {}
    for term in terms:
        groups.setdefault(term.key, []).append(term)
    return groups


__all__ = [
    "DEFAULT_MAX_DISPLAY_TERMS",
    "DEFAULT_RULES",
    "ConflictWeights",
    "ScoringRule",
    "TermConflictResolver",
    "score_term",
]
