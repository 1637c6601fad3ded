from typing import Final

from app.models.inventory import BipolarItem

# dimension -> (low pole letter, high pole letter). Low pole is the left description (rated 1).
MBTI_POLES: Final[dict[str, tuple[str, str]]] = {
    "IE": ("I", "E"),
    "SN": ("S", "N"),
    "TF": ("T", "F"),
    "JP": ("J", "P"),
}

_PAIRS: Final[dict[str, tuple[tuple[str, str], ...]]] = {
    "IE": (
        ("I recharge by spending time alone.", "I recharge by spending time with other people."),
        ("I prefer to think things through before speaking.", "I think out loud and work ideas out while talking."),
        ("I prefer one-on-one conversations.", "I enjoy being part of a lively group."),
        ("I keep my thoughts and feelings mostly to myself.", "I readily share my thoughts and feelings with others."),
        ("I prefer a few deep friendships.", "I prefer a wide circle of acquaintances."),
        ("I find long social events draining.", "I find long social events energizing."),
        ("I wait for others to start a conversation.", "I usually start conversations with new people."),
        ("I focus on my inner world of ideas.", "I focus on the outer world of people and activity."),
    ),
    "SN": (
        ("I trust concrete facts and direct experience.", "I trust hunches and patterns I sense."),
        ("I focus on what is happening right now.", "I focus on what could happen in the future."),
        ("I prefer clear, step-by-step instructions.", "I prefer to figure things out from the big picture."),
        ("I value practical, proven solutions.", "I value novel, imaginative solutions."),
        ("I notice specific details.", "I notice overall meanings and connections."),
        ("I describe things literally and precisely.", "I describe things with metaphors and analogies."),
        ("I like improving existing methods.", "I like inventing new ways of doing things."),
        ("I am grounded in reality.", "I am drawn to theories and possibilities."),
    ),
    "TF": (
        (
            "I make decisions based on logic and objective analysis.",
            "I make decisions based on values and how people will be affected.",
        ),
        ("I value fairness and consistency above all.", "I value harmony and compassion above all."),
        ("I give direct, candid feedback.", "I give tactful, encouraging feedback."),
        ("I am persuaded by a well-reasoned argument.", "I am persuaded by a heartfelt appeal."),
        ("I focus on the task when solving problems.", "I focus on the people involved when solving problems."),
        ("I question other people's conclusions.", "I look for points of agreement with other people."),
        ("I would rather be right than liked.", "I would rather be liked than right."),
        ("I see emotions as something to manage.", "I see emotions as important information."),
    ),
    "JP": (
        ("I like to have things decided and settled.", "I like to keep my options open."),
        ("I plan my work well in advance.", "I work in bursts of energy as deadlines approach."),
        ("I prefer a structured schedule.", "I prefer a flexible, spontaneous schedule."),
        ("I finish one project before starting another.", "I juggle several projects at once."),
        ("I make lists and follow them.", "I adapt as I go without a list."),
        ("I feel uneasy when plans change at the last minute.", "I enjoy it when plans change unexpectedly."),
        ("I like clear rules and expectations.", "I like freedom to improvise."),
        ("I prefer to reach closure quickly.", "I prefer to keep gathering information before deciding."),
    ),
}

MBTI_ITEMS: Final[tuple[BipolarItem, ...]] = tuple(
    BipolarItem(id=f"mbti_{dimension.lower()}_{n}", dimension=dimension, left_text=left, right_text=right)
    for dimension, pairs in _PAIRS.items()
    for n, (left, right) in enumerate(pairs, start=1)
)
