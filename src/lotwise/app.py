"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from lotwise.adapters.anthropic import build_http_completion_service
from lotwise.adapters.auctionet import AuctionetMarketDataService
from lotwise.adapters.taxonomy import StaticTermTaxonomy
from lotwise.adapters.visibility import FileDashboardVisibility
from lotwise.config import AnalysisConfig, MissingConfigurationError, get_analysis_config
from lotwise.domain.brands import AIBrandChecker, BrandSpellingDetector
from lotwise.domain.market import MarketQueryScheduler, summarize_market
from lotwise.domain.model import AnalysisType, TermSource, TermType
from lotwise.domain.search_state import SearchQueryState
from lotwise.domain.terms import (
    TermConflictResolver,
    build_candidate_terms,
    detect_term_type,
    emergency_fallback_query,
    format_artist_for_search,
    make_candidate,
)
from lotwise.domain.valuation import ValuationComparator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lotwise.domain.market import MarketNote, SnapshotSink
    from lotwise.domain.model import (
        BrandIssue,
        CandidateTerm,
        ItemRecord,
        MarketSnapshot,
        SearchContext,
        ValuationSuggestion,
    )
    from lotwise.domain.ports import (
        DashboardVisibility,
        MarketDataService,
        TermTaxonomy,
        TextCompletionService,
    )
    from lotwise.domain.terms import SearchUrls

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ItemAnalysis:
    """Everything the cataloger sees for one item after an analysis step."""

    item: ItemRecord
    query: str
    analysis_type: AnalysisType
    display_terms: tuple[CandidateTerm, ...]
    search_context: SearchContext
    snapshot: MarketSnapshot | None
    market_notes: tuple[MarketNote, ...]
    valuation: tuple[ValuationSuggestion, ...]
    brand_issues: tuple[BrandIssue, ...]
    urls: SearchUrls

    @property
    def is_deferred(self) -> bool:
        return self.snapshot is None


class AnalysisSession:
    """Runs the term, market, valuation and brand steps for one item at a time."""

    def __init__(
        self,
        *,
        taxonomy: TermTaxonomy,
        market: MarketDataService | None,
        visibility: DashboardVisibility,
        completion: TextCompletionService | None = None,
        sink: SnapshotSink | None = None,
        config: AnalysisConfig | None = None,
    ) -> None:
        self.config = config or AnalysisConfig()
        self._taxonomy = taxonomy
        self._resolver = TermConflictResolver()
        self._comparator = ValuationComparator()
        self.state = SearchQueryState()
        self.scheduler = MarketQueryScheduler(market, visibility, sink=sink)

        ai = (
            AIBrandChecker(completion)
            if completion is not None and self.config.ai_brand_check
            else None
        )
        self._brands = BrandSpellingDetector(ai=ai)
        self._item: ItemRecord | None = None
        self._brand_issues: tuple[BrandIssue, ...] = ()

    @property
    def uses_ai_brand_check(self) -> bool:
        return self._brands.uses_ai

    def analyze(self, item: ItemRecord, *, ai_artist: str | None = None) -> ItemAnalysis:
        log.info("Starting item analysis: title=%r, artist=%r", item.title, item.artist)
        self.scheduler.reset()
        self._item = item

        classification = self._taxonomy.classify(item.text)
        analysis_type = _analysis_type(item, ai_artist)
        if item.artist:
            candidates = build_candidate_terms(item, classification, resolver=self._resolver)
            ai_name = format_artist_for_search(ai_artist or "")
            if ai_name:
                ai_term = make_candidate(
                    ai_name, TermType.ARTIST, TermSource.AI_DETECTED, is_selected=True
                )
                candidates = self._resolver.resolve([*candidates, ai_term])
        elif ai_artist:
            candidates = build_candidate_terms(
                item,
                classification,
                artist=ai_artist,
                artist_source=TermSource.AI_DETECTED,
                resolver=self._resolver,
            )
        else:
            candidates = build_candidate_terms(item, classification, resolver=self._resolver)

        query = ""
        confidence = 0.8
        reasoning = f"{len(candidates)} candidate terms from {analysis_type}"
        if not any(term.is_selected for term in candidates):
            fallback = emergency_fallback_query(item.title, item.artist)
            log.info("No selected candidate terms, using fallback query %r", fallback.query)
            fallback_terms = [
                make_candidate(term, detect_term_type(term), TermSource.FALLBACK, is_selected=True)
                for term in fallback.terms
            ]
            candidates = self._resolver.resolve([*fallback_terms, *candidates])
            query, confidence, reasoning = fallback.query, fallback.confidence, fallback.reasoning

        initialized = self.state.initialize(
            query,
            candidates,
            analysis_type,
            confidence=confidence,
            reasoning=reasoning,
            original_title=item.title,
        )
        if not initialized:
            raise ValueError(f"No search terms could be derived from {item.title!r}")
        self._brand_issues = tuple(self._brands.detect(item.title, item.description))

        analysis = self._run_market_step(str(analysis_type))
        log.info(
            f"Finished item analysis: query={analysis.query!r}, "
            f"deferred={analysis.is_deferred}, valuation={len(analysis.valuation)}, "
            f"brand_issues={len(analysis.brand_issues)}"
        )
        return analysis

    def extend_candidates(self, terms: Iterable[CandidateTerm]) -> ItemAnalysis:
        """Merge extra candidate terms into the current state and look up again."""

        if self._item is None or self.state.snapshot is None:
            raise RuntimeError("No item has been analyzed yet")

        merged = self._resolver.resolve([*self.state.candidates, *terms])
        metadata = self.state.current_metadata
        self.state.initialize(
            "",
            merged,
            AnalysisType.SYSTEM_WITH_EXTENSIONS,
            confidence=metadata.confidence if metadata else 0.8,
            reasoning="Candidate terms extended",
            original_title=self._item.title,
        )
        return self._run_market_step(str(AnalysisType.SYSTEM_WITH_EXTENSIONS))

    def open_dashboard(self) -> ItemAnalysis | None:
        """Run the deferred lookup now that its result can be shown."""

        snapshot = self.scheduler.execute_deferred_analysis()
        if snapshot is None:
            return None
        return self._build_analysis(snapshot)

    def _run_market_step(self, source: str) -> ItemAnalysis:
        snapshot = self.scheduler.run_or_defer(
            self.state.build_search_context(), self.state.candidates, source
        )
        return self._build_analysis(snapshot)

    def _build_analysis(self, snapshot: MarketSnapshot | None) -> ItemAnalysis:
        item = self._item
        analysis_type = self.state.analysis_type
        if item is None or analysis_type is None:
            raise RuntimeError("No item has been analyzed yet")

        valuation = self._comparator.analyze(item, snapshot) if snapshot is not None else []
        notes = summarize_market(snapshot) if snapshot is not None else []
        display = self._resolver.select_for_display(
            self.state.candidates, max_total=self.config.max_display_terms
        )
        return ItemAnalysis(
            item=item,
            query=self.state.current_query,
            analysis_type=analysis_type,
            display_terms=tuple(display),
            search_context=self.state.build_search_context(),
            snapshot=snapshot,
            market_notes=tuple(notes),
            valuation=tuple(valuation),
            brand_issues=self._brand_issues,
            urls=self.state.search_urls(),
        )


def _analysis_type(item: ItemRecord, ai_artist: str | None) -> AnalysisType:
    if item.artist and ai_artist:
        return AnalysisType.EXISTING_ARTIST_FIELD
    if item.artist:
        return AnalysisType.ARTIST_FIELD
    if ai_artist:
        return AnalysisType.AI_ONLY
    return AnalysisType.NON_ART_ITEM


def build_session(
    *,
    visibility: DashboardVisibility | None = None,
    sink: SnapshotSink | None = None,
) -> AnalysisSession:
    """Wire an analysis session from environment configuration."""

    config = get_analysis_config()
    completion: TextCompletionService | None = None
    if config.ai_brand_check:
        try:
            completion = build_http_completion_service()
        except MissingConfigurationError as exc:
            log.info("AI brand check disabled: %s", exc)

    return AnalysisSession(
        taxonomy=StaticTermTaxonomy(),
        market=AuctionetMarketDataService(),
        visibility=visibility or FileDashboardVisibility(),
        completion=completion,
        sink=sink,
        config=config,
    )


__all__ = ["AnalysisSession", "ItemAnalysis", "build_session"]
