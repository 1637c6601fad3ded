from app.models.results import InventoryResult, MBTIScores, RawScoreSet
from app.services.psychometrics.constants import (
    DERIVED_MAX_DEVIATION,
    DERIVED_MIDPOINT,
    DERIVED_POLE_SUM,
    MBTI_MAX_DEVIATION,
    MBTI_MIDPOINT,
)
from app.services.psychometrics.definitions import MBTI_DEFINITIONS, MBTI_PREFERENCES
from app.services.psychometrics.items.mbti import MBTI_ITEMS, MBTI_POLES
from app.services.psychometrics.scoring.bigfive import item_score

# dimension -> Big Five domain it is derived from
DERIVED_SOURCE_DOMAINS = {"IE": "E", "SN": "O", "TF": "A", "JP": "C"}

# dimension -> (pole for a low domain score, pole for a high one). High Conscientiousness maps
# to J, the reverse of the direct JP item scale.
DERIVED_POLES = {"IE": ("I", "E"), "SN": ("S", "N"), "TF": ("T", "F"), "JP": ("P", "J")}


def _psi(score: float, midpoint: float, max_deviation: float) -> float:
    return min(1.0, max(0.0, abs(score - midpoint) / max_deviation))


def calculate_mbti_scores(raw_scores: RawScoreSet) -> MBTIScores:
    """
    Score the direct MBTI items.

    Items are rated 1 (left, low pole) to 5 (right, high pole), so a dimension
    sums to 8..40. Above the midpoint of 24 picks the high pole letter; a tie
    picks the low pole.
    """
    dimensions = {dimension: 0.0 for dimension in MBTI_POLES}
    for item in MBTI_ITEMS:
        dimensions[item.dimension] += item_score(raw_scores.get(item.id))

    letters = []
    psi = {}
    preferences = {}
    for dimension, score in dimensions.items():
        low, high = MBTI_POLES[dimension]
        letter = high if score > MBTI_MIDPOINT else low
        letters.append(letter)
        psi[dimension] = _psi(score, MBTI_MIDPOINT, MBTI_MAX_DEVIATION)
        preferences[dimension] = MBTI_PREFERENCES[letter]

    mbti_type = "".join(letters)
    return MBTIScores(
        type=mbti_type,
        dimensions=dimensions,
        psi=psi,
        preferences=preferences,
        description=MBTI_DEFINITIONS.get(mbti_type, ""),
    )


def derive_mbti_from_big_five(big_five: InventoryResult) -> InventoryResult:
    """
    Map Big Five domains onto MBTI letters (McCrae & Costa, 1989).

    E -> E/I, O -> N/S, A -> F/T, C -> J/P; Neuroticism is unused. A domain at
    or above 72 picks the high pole, so a tie goes the opposite way to the
    direct inventory.
    """
    scores = big_five.trait_scores

    letters = []
    psi = {}
    trait_scores = {}
    for dimension, domain in DERIVED_SOURCE_DOMAINS.items():
        score = scores.get(domain) or float(DERIVED_MIDPOINT)
        low, high = DERIVED_POLES[dimension]
        letters.append(high if score >= DERIVED_MIDPOINT else low)
        psi[dimension] = _psi(score, DERIVED_MIDPOINT, DERIVED_MAX_DEVIATION)
        trait_scores[high] = score
        trait_scores[low] = DERIVED_POLE_SUM - score

    return InventoryResult(
        inventory_name="MBTI (Derived from Big Five)",
        raw_scores={},
        trait_scores=trait_scores,
        type="".join(letters),
        psi=psi,
        details={"derived": True, "source": "IPIP-NEO-120"},
    )
