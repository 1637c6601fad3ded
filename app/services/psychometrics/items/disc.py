from typing import Final

from app.models.inventory import DiscWord, ForcedChoiceItem

QUADRANT_ORDER: Final[tuple[str, ...]] = ("D", "I", "S", "C")

# Word groups listed in D, I, S, C order; presentation order is rotated per item
# so the quadrant is never implied by position.
_WORD_GROUPS: Final[tuple[tuple[str, str, str, str], ...]] = (
    ("Forceful", "Lively", "Modest", "Tactful"),
    ("Aggressive", "Emotional", "Accommodating", "Consistent"),
    ("Direct", "Animated", "Agreeable", "Accurate"),
    ("Tough-minded", "Playful", "Patient", "Precise"),
    ("Competitive", "Convincing", "Loyal", "Careful"),
    ("Daring", "Sociable", "Calm", "Systematic"),
    ("Determined", "Persuasive", "Good-natured", "Cautious"),
    ("Bold", "Inspiring", "Gentle", "Analytical"),
    ("Decisive", "Talkative", "Steady", "Disciplined"),
    ("Assertive", "Optimistic", "Supportive", "Logical"),
    ("Independent", "Enthusiastic", "Dependable", "Orderly"),
    ("Outspoken", "Charming", "Even-tempered", "Diplomatic"),
    ("Strong-willed", "Expressive", "Cooperative", "Conscientious"),
    ("Pioneering", "Spontaneous", "Considerate", "Thorough"),
    ("Adventurous", "Outgoing", "Relaxed", "Perfectionist"),
    ("Demanding", "Popular", "Sincere", "Reserved"),
    ("Driven", "Cheerful", "Kind", "Exacting"),
    ("Results-oriented", "People-oriented", "Team-oriented", "Detail-oriented"),
    ("Confident", "Friendly", "Tolerant", "Restrained"),
    ("Self-reliant", "Fun-loving", "Easygoing", "Methodical"),
    ("Firm", "Trusting", "Predictable", "Factual"),
    ("Ambitious", "Impulsive", "Peaceful", "Meticulous"),
    ("Restless", "Charismatic", "Deliberate", "Correct"),
    ("Controlling", "Magnetic", "Content", "Compliant"),
)


def _build_items() -> tuple[ForcedChoiceItem, ...]:
    items = []
    for index, group in enumerate(_WORD_GROUPS):
        words = [DiscWord(text=text, quadrant=quadrant) for text, quadrant in zip(group, QUADRANT_ORDER)]
        shift = index % len(words)
        words = words[shift:] + words[:shift]
        items.append(ForcedChoiceItem(id=f"disc_{index + 1}", words=tuple(words)))
    return tuple(items)


DISC_ITEMS: Final[tuple[ForcedChoiceItem, ...]] = _build_items()
