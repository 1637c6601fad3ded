"""
Scoring engine: turns raw samples into inventory scores.

Every function here is pure and expects a validated RawScoreSet.
"""

from app.services.psychometrics.scoring.bigfive import calculate_big_five_scores
from app.services.psychometrics.scoring.disc import calculate_disc_scores
from app.services.psychometrics.scoring.mbti import calculate_mbti_scores, derive_mbti_from_big_five

__all__ = [
    "calculate_big_five_scores",
    "calculate_mbti_scores",
    "derive_mbti_from_big_five",
    "calculate_disc_scores",
]
