from __future__ import annotations

from lotwise.domain.model import TermSource, TermType
from lotwise.domain.terms import ConflictWeights, TermConflictResolver, score_term
from lotwise.domain.terms.conflicts import specificity_score
from tests.helpers.terms import term


def test_quoted_ai_artist_beats_same_key_artist_field() -> None:
    from_field = term("Lisa Larson", TermType.ARTIST, source=TermSource.ARTIST_FIELD, selected=True)
    from_ai = term('"Lisa Larson"', TermType.ARTIST, source=TermSource.AI_DETECTED, selected=True)

    resolved = TermConflictResolver().resolve([from_field, from_ai])

    assert resolved == [from_ai]


def test_brand_type_beats_keyword_type_for_same_key() -> None:
    keyword = term("omega", TermType.KEYWORD)
    brand = term("Omega", TermType.BRAND)

    resolved = TermConflictResolver().resolve([keyword, brand])

    assert resolved == [brand]


def test_selected_member_beats_unselected_member() -> None:
    unselected = term("vas", TermType.OBJECT_TYPE)
    selected = term("Vas", TermType.OBJECT_TYPE, selected=True)

    assert TermConflictResolver().resolve([unselected, selected]) == [selected]


def test_ties_keep_earliest_input() -> None:
    first = term("vas", TermType.OBJECT_TYPE)
    second = term("Vas", TermType.OBJECT_TYPE)

    assert TermConflictResolver().resolve([first, second]) == [first]
    assert TermConflictResolver().resolve([second, first]) == [second]


def test_resolve_keeps_order_of_first_appearance() -> None:
    glass = term("glas", TermType.MATERIAL)
    vase = term("vas", TermType.OBJECT_TYPE)
    brand = term("Orrefors", TermType.BRAND, selected=True)
    brand_keyword = term("orrefors", TermType.KEYWORD)

    resolved = TermConflictResolver().resolve([brand_keyword, glass, vase, brand])

    assert [t.key for t in resolved] == ["orrefors", "glas", "vas"]
    assert resolved[0] is brand


def test_resolve_is_deterministic() -> None:
    terms = [
        term("Kosta", TermType.BRAND, selected=True),
        term("kosta", TermType.KEYWORD, source=TermSource.AI_RULES),
        term("glas", TermType.MATERIAL),
        term("GLAS", TermType.MATERIAL, priority=80),
    ]
    resolver = TermConflictResolver()

    assert resolver.resolve(terms) == resolver.resolve(list(terms))


def test_resolve_without_conflicts_returns_input_unchanged() -> None:
    terms = [term("vas"), term("glas"), term("1960-tal", TermType.PERIOD)]

    assert TermConflictResolver().resolve(terms) == terms


def test_find_conflicts_only_reports_groups_with_several_members() -> None:
    terms = [term("vas"), term("Vas"), term("glas")]

    conflicts = TermConflictResolver().find_conflicts(terms)

    assert list(conflicts) == ["vas"]
    assert len(conflicts["vas"]) == 2


def test_score_term_sums_independent_rules() -> None:
    candidate = term("Omega", TermType.BRAND, priority=100, selected=True)

    # 5 characters, brand type, selected, declared priority, default provenance
    assert score_term(candidate) == 50 + 400 + 300 + 100 + 50


def test_custom_rules_and_weights_are_used() -> None:
    resolver = TermConflictResolver(
        weights=ConflictWeights(per_character=1.0),
        rules=(specificity_score,),
    )

    assert resolver.score(term("abcd")) == 4


def test_select_for_display_keeps_every_selected_term() -> None:
    selected = [term(f"vald{i}", selected=True) for i in range(14)]
    unselected = [term("extra", priority=500)]

    display = TermConflictResolver().select_for_display([*selected, *unselected], max_total=12)

    assert display == selected


def test_select_for_display_fills_free_slots_by_priority() -> None:
    selected = [term(f"vald{i}", selected=True) for i in range(3)]
    low = term("lag", priority=10)
    high = term("hog", priority=80)
    middle = term("mellan", priority=60)
    lowest = term("minst", priority=5)

    display = TermConflictResolver().select_for_display(
        [low, *selected, high, lowest, middle], max_total=5
    )

    assert display == [*selected, high, middle]


def test_select_for_display_drops_blank_terms_and_resolves_duplicates() -> None:
    blank = term("   ")
    keyword = term("omega", TermType.KEYWORD)
    brand = term("Omega", TermType.BRAND, selected=True)

    display = TermConflictResolver().select_for_display([blank, keyword, brand])

    assert display == [brand]
