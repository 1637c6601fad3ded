"""
Big Five (IPIP-NEO-120) scoring: ranges, facet sums, reverse keying and interpretation bands.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from app.services.psychometrics.items.bigfive import BIG_FIVE_FACETS, BIG_FIVE_ITEMS
from app.services.psychometrics.scoring.bigfive import (
    calculate_big_five_scores,
    interpret_domain,
    item_score,
    reverse_score,
)

ITEM_IDS = [item.id for item in BIG_FIVE_ITEMS]

sample_st = st.floats(min_value=1.0, max_value=5.0, allow_nan=False, allow_infinity=False)


@st.composite
def raw_score_sets(draw):
    """A random subset of Big Five items, each with 1-5 samples in [1, 5]."""
    ids = draw(st.lists(st.sampled_from(ITEM_IDS), unique=True, max_size=len(ITEM_IDS)))
    return {item_id: draw(st.lists(sample_st, min_size=1, max_size=5)) for item_id in ids}


class TestCatalog:
    def test_catalog_shape(self):
        assert len(BIG_FIVE_ITEMS) == 120
        assert len(BIG_FIVE_FACETS) == 30
        for facet in BIG_FIVE_FACETS:
            assert sum(1 for item in BIG_FIVE_ITEMS if item.facet == facet) == 4

    def test_first_six_items_cover_each_facet(self):
        first_six = [item for item in BIG_FIVE_ITEMS if item.id in {f"N{k}" for k in range(1, 7)}]
        assert [item.facet for item in first_six] == ["N1", "N2", "N3", "N4", "N5", "N6"]


class TestRanges:
    @settings(max_examples=200)
    @given(raw_scores=raw_score_sets())
    def test_scores_stay_in_range(self, raw_scores):
        result = calculate_big_five_scores(raw_scores)
        for score in result.facets.values():
            assert 4 <= score <= 20
        for score in result.domains.values():
            assert 24 <= score <= 120

    @settings(max_examples=200)
    @given(raw_scores=raw_score_sets())
    def test_domain_is_sum_of_its_facets(self, raw_scores):
        result = calculate_big_five_scores(raw_scores)
        for domain, score in result.domains.items():
            facet_sum = sum(value for facet, value in result.facets.items() if facet.startswith(domain))
            assert score == pytest.approx(facet_sum)

    def test_empty_input_is_all_neutral(self):
        result = calculate_big_five_scores({})
        assert set(result.domains.values()) == {72.0}
        assert set(result.interpretations.values()) == {"medium"}
        assert result.items_answered == 0


class TestReverseKeying:
    @given(score=sample_st)
    def test_reverse_is_an_involution(self, score):
        assert reverse_score(reverse_score(score)) == pytest.approx(score)

    def test_reverse_keyed_item_lowers_its_facet(self):
        item = next(item for item in BIG_FIVE_ITEMS if item.reverse_keyed)
        agree = calculate_big_five_scores({item.id: [5, 5, 5, 5, 5]})
        disagree = calculate_big_five_scores({item.id: [1, 1, 1, 1, 1]})
        assert agree.facets[item.facet] == disagree.facets[item.facet] - 4

    def test_item_score_is_the_mean(self):
        assert item_score([1, 2, 2, 5, 5]) == pytest.approx(3.0)
        assert item_score([4, 5]) == pytest.approx(4.5)
        assert item_score([]) == 3.0


class TestInterpretation:
    @pytest.mark.parametrize(
        "score, level",
        [(24, "low"), (55.9, "low"), (56, "medium"), (72, "medium"), (88, "medium"), (88.1, "high"), (120, "high")],
    )
    def test_bands(self, score, level):
        assert interpret_domain(score) == level

    def test_neuroticism_example(self):
        raw_scores = {f"N{k}": [4, 4, 5, 4, 4] for k in range(1, 7)}
        result = calculate_big_five_scores(raw_scores)
        assert 24 <= result.domains["N"] <= 120
        assert result.domains["N"] == pytest.approx(6 * 4.2 + 18 * 3)
        assert result.interpretations["N"] in ("medium", "high")
        assert result.items_answered == 6

    def test_all_agree_with_positive_keys_is_high(self):
        raw_scores = {item.id: [5] * 5 if not item.reverse_keyed else [1] * 5 for item in BIG_FIVE_ITEMS}
        result = calculate_big_five_scores(raw_scores)
        assert set(result.domains.values()) == {120.0}
        assert set(result.interpretations.values()) == {"high"}
        assert result.descriptions["E"].startswith("Sociable")

    def test_inventory_result_conversion(self):
        raw_scores = {"E1": [5, 5, 5, 5, 5]}
        result = calculate_big_five_scores(raw_scores).to_inventory_result(raw_scores)
        assert result.inventory_name == "Big Five (IPIP-NEO-120)"
        assert result.trait_scores["E"] == 74.0
        assert result.details["itemsAnswered"] == 1
