from statistics import fmean

from app.models.results import BigFiveScores, RawScoreSet
from app.services.psychometrics.constants import (
    BIG_FIVE_HIGH_ABOVE,
    BIG_FIVE_LOW_BELOW,
    LIKERT_FALLBACK,
    REVERSE_KEY_BASE,
)
from app.services.psychometrics.definitions import BIG_FIVE_DEFINITIONS
from app.services.psychometrics.items.bigfive import BIG_FIVE_FACETS, BIG_FIVE_ITEMS, DOMAIN_ORDER


def item_score(samples: list[float] | None) -> float:
    """Mean of an item's samples; an unanswered item counts as neutral."""
    if not samples:
        return float(LIKERT_FALLBACK)
    return fmean(samples)


def reverse_score(score: float) -> float:
    return REVERSE_KEY_BASE - score


def interpret_domain(score: float) -> str:
    if score < BIG_FIVE_LOW_BELOW:
        return "low"
    if score > BIG_FIVE_HIGH_ABOVE:
        return "high"
    return "medium"


def calculate_big_five_scores(raw_scores: RawScoreSet) -> BigFiveScores:
    """
    Score the IPIP-NEO-120.

    Each item is the mean of its samples (reverse-keyed items become 6 - mean).
    A facet sums its 4 items (4..20), a domain sums its 6 facets (24..120).
    """
    facets = dict.fromkeys(BIG_FIVE_FACETS, 0.0)
    answered = 0

    for item in BIG_FIVE_ITEMS:
        samples = raw_scores.get(item.id)
        if samples:
            answered += 1
        score = item_score(samples)
        if item.reverse_keyed:
            score = reverse_score(score)
        facets[item.facet] += score

    domains = {domain: 0.0 for domain in DOMAIN_ORDER}
    for facet, score in facets.items():
        domains[facet[0]] += score

    interpretations = {domain: interpret_domain(score) for domain, score in domains.items()}
    descriptions = {
        domain: BIG_FIVE_DEFINITIONS[domain][level] for domain, level in interpretations.items()
    }

    return BigFiveScores(
        domains=domains,
        facets=facets,
        interpretations=interpretations,
        descriptions=descriptions,
        items_answered=answered,
    )
