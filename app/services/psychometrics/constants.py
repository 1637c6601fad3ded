from typing import Final

# Sampling
DEFAULT_SAMPLE_COUNT: Final[int] = 5
DEFAULT_CONCURRENCY: Final[int] = 5

# Fallback samples (parse miss or failed query)
LIKERT_FALLBACK: Final[int] = 3  # neutral
CHOICE_FALLBACK: Final[int] = 0  # most=0, least=0 -> no selection

# Likert scale
LIKERT_MIN: Final[int] = 1
LIKERT_MAX: Final[int] = 5
REVERSE_KEY_BASE: Final[int] = LIKERT_MIN + LIKERT_MAX  # adjusted = 6 - score

# Big Five
BIG_FIVE_DOMAIN_MIN: Final[int] = 24
BIG_FIVE_DOMAIN_MAX: Final[int] = 120
BIG_FIVE_LOW_BELOW: Final[int] = 56  # score < 56 -> low
BIG_FIVE_HIGH_ABOVE: Final[int] = 88  # score > 88 -> high

# MBTI (direct)
MBTI_MIDPOINT: Final[int] = 24  # (8 + 40) / 2
MBTI_MAX_DEVIATION: Final[int] = 16

# MBTI (derived from Big Five domains)
DERIVED_MIDPOINT: Final[int] = 72  # (24 + 120) / 2
DERIVED_MAX_DEVIATION: Final[int] = 48
DERIVED_POLE_SUM: Final[int] = BIG_FIVE_DOMAIN_MIN + BIG_FIVE_DOMAIN_MAX  # 144

# DISC
DISC_CHOICES_PER_ITEM: Final[int] = 4
DISC_HIGH_PERCENTAGE: Final[float] = 25.0  # even share of four quadrants
