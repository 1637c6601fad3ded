from app.models.results import DISCScores, RawScoreSet
from app.services.psychometrics.constants import DISC_HIGH_PERCENTAGE
from app.services.psychometrics.definitions import DISC_DEFINITIONS
from app.services.psychometrics.items.disc import DISC_ITEMS, QUADRANT_ORDER
from app.services.psychometrics.parser import decode_choice


def _item_nets(words, samples: list[float]) -> dict[str, float]:
    """Average most(+1)/least(-1) tally of one item over its samples."""
    nets = dict.fromkeys(QUADRANT_ORDER, 0.0)
    for sample in samples:
        most, least = decode_choice(sample)
        nets[words[most].quadrant] += 1
        nets[words[least].quadrant] -= 1
    return {quadrant: net / len(samples) for quadrant, net in nets.items()}


def calculate_disc_scores(raw_scores: RawScoreSet) -> DISCScores:
    """
    Score the DISC forced-choice items.

    A quadrant's score is its summed net selections shifted by the number of
    scored items, so every score is non-negative and all four sum to 4 * items.
    """
    totals = dict.fromkeys(QUADRANT_ORDER, 0.0)
    scored = 0
    for item in DISC_ITEMS:
        samples = raw_scores.get(item.id)
        if not samples:
            continue
        scored += 1
        for quadrant, net in _item_nets(item.words, samples).items():
            totals[quadrant] += net

    scores = {quadrant: net + scored for quadrant, net in totals.items()}
    total = sum(scores.values())
    if total > 0:
        percentages = {quadrant: round(score / total * 100, 1) for quadrant, score in scores.items()}
    else:
        percentages = dict.fromkeys(QUADRANT_ORDER, DISC_HIGH_PERCENTAGE)

    # max() keeps the first of equal scores, so ties resolve D > I > S > C
    profile = max(QUADRANT_ORDER, key=lambda quadrant: scores[quadrant])
    interpretations = {
        quadrant: DISC_DEFINITIONS[quadrant]["high" if percentages[quadrant] >= DISC_HIGH_PERCENTAGE else "low"]
        for quadrant in QUADRANT_ORDER
    }

    return DISCScores(
        scores=scores,
        percentages=percentages,
        profile=profile,
        profile_name=DISC_DEFINITIONS[profile]["title"],
        interpretations=interpretations,
    )
