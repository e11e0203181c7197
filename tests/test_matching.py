import pytest

from hardscape.config.models import RateTemplate
from hardscape.matching import (
    MatchStrategy,
    match_template,
    resolve_task_name,
    word_order_match,
)


def _templates(*names: str) -> tuple[RateTemplate, ...]:
    return tuple(RateTemplate(id=f"id{i}", name=name) for i, name in enumerate(names))


def test_exact_match_beats_earlier_word_order_candidate():
    catalog = _templates("Sand transport by barrow", "Sand transport")
    result = match_template("sand transport", catalog)
    assert result.strategy is MatchStrategy.EXACT
    assert result.template_id == "id1"


def test_word_order_beats_earlier_partial_candidate():
    catalog = _templates("Transport of sand", "Sand transport by barrow")
    result = match_template("sand transport", catalog)
    assert result.strategy is MatchStrategy.WORD_ORDER
    assert result.template_id == "id1"
    assert not result.low_confidence


def test_partial_match_is_low_confidence(catalog):
    result = match_template("hand excavation", catalog)
    assert result.strategy is MatchStrategy.PARTIAL
    assert result.template_id == "t6"
    assert result.low_confidence


def test_domain_specific_cutting_variant(catalog):
    resolved = resolve_task_name("cutting slabs", parent_name="Porcelain patio")
    assert resolved == "cutting porcelain"
    result = match_template(resolved, catalog)
    assert result.strategy is MatchStrategy.DOMAIN_SPECIFIC
    assert result.template_id == "t2"


def test_sandstone_variant_matches_exactly(catalog):
    resolved = resolve_task_name("Cutting slabs", parent_name="Indian sandstone steps")
    result = match_template(resolved, catalog)
    assert result.strategy is MatchStrategy.EXACT
    assert result.template_id == "t3"


def test_cutting_slabs_without_parent_is_unchanged():
    assert resolve_task_name("cutting slabs") == "cutting slabs"
    assert resolve_task_name("cutting slabs", parent_name="Block paving") == "cutting slabs"


@pytest.mark.parametrize(
    "method,expected",
    [
        (None, "Excavating foundation with shovel"),
        ("small", "Excavating foundation with small excavator"),
        ("large", "Excavating foundation with big excavator"),
        ("trowel", "Excavating foundation with shovel"),
    ],
)
def test_foundation_excavation_alias(method, expected):
    assert resolve_task_name("Foundation Excavation", digging_method=method) == expected


def test_word_order_consumes_template_words():
    (template,) = _templates("Excavation soil with digger")
    assert word_order_match("excavation soil", template)
    assert not word_order_match("soil excavation", template)


def test_no_match_and_blank_names(catalog):
    miss = match_template("Planting trees", catalog)
    assert miss.strategy is MatchStrategy.NONE
    assert miss.template is None
    assert not miss.matched
    assert match_template("   ", catalog).strategy is MatchStrategy.NONE


def test_short_words_never_match_partially():
    catalog = _templates("Lay the kerb")
    assert match_template("a of", catalog).strategy is MatchStrategy.NONE


def test_matching_is_deterministic(catalog):
    first = match_template("hand excavation", catalog)
    second = match_template("hand excavation", catalog)
    assert first == second
