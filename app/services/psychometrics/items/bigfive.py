"""
IPIP-NEO-120 item catalog (Johnson, 2014).

Item ids run N1..N24, E1..E24, O1..O24, A1..A24, C1..C24. Item ``Xk`` belongs to
facet ``X{((k - 1) % 6) + 1}``, so the first six items of a domain cover each of
its facets once.
"""

from typing import Final

from app.models.inventory import LikertItem

DOMAIN_ORDER: Final[tuple[str, ...]] = ("N", "E", "O", "A", "C")
FACETS_PER_DOMAIN: Final[int] = 6
ITEMS_PER_FACET: Final[int] = 4

BIG_FIVE_FACETS: Final[dict[str, str]] = {
    "N1": "Anxiety",
    "N2": "Anger",
    "N3": "Depression",
    "N4": "Self-Consciousness",
    "N5": "Immoderation",
    "N6": "Vulnerability",
    "E1": "Friendliness",
    "E2": "Gregariousness",
    "E3": "Assertiveness",
    "E4": "Activity Level",
    "E5": "Excitement-Seeking",
    "E6": "Cheerfulness",
    "O1": "Imagination",
    "O2": "Artistic Interests",
    "O3": "Emotionality",
    "O4": "Adventurousness",
    "O5": "Intellect",
    "O6": "Liberalism",
    "A1": "Trust",
    "A2": "Morality",
    "A3": "Altruism",
    "A4": "Cooperation",
    "A5": "Modesty",
    "A6": "Sympathy",
    "C1": "Self-Efficacy",
    "C2": "Orderliness",
    "C3": "Dutifulness",
    "C4": "Achievement-Striving",
    "C5": "Self-Discipline",
    "C6": "Cautiousness",
}

# facet -> four (statement, key) pairs
_FACET_STATEMENTS: Final[dict[str, tuple[tuple[str, str], ...]]] = {
    "N1": (("Worry about things", "+"), ("Fear for the worst", "+"), ("Am afraid of many things", "+"), ("Get stressed out easily", "+")),
    "N2": (("Get angry easily", "+"), ("Get irritated easily", "+"), ("Lose my temper", "+"), ("Am not easily annoyed", "-")),
    "N3": (("Often feel blue", "+"), ("Dislike myself", "+"), ("Am often down in the dumps", "+"), ("Feel comfortable with myself", "-")),
    "N4": (
        ("Find it difficult to approach others", "+"),
        ("Am afraid to draw attention to myself", "+"),
        ("Only feel comfortable with friends", "+"),
        ("Am not bothered by difficult social situations", "-"),
    ),
    "N5": (("Go on binges", "+"), ("Rarely overindulge", "-"), ("Easily resist temptations", "-"), ("Am able to control my cravings", "-")),
    "N6": (
        ("Panic easily", "+"),
        ("Become overwhelmed by events", "+"),
        ("Feel that I'm unable to deal with things", "+"),
        ("Remain calm under pressure", "-"),
    ),
    "E1": (("Make friends easily", "+"), ("Feel comfortable around people", "+"), ("Avoid contacts with others", "-"), ("Keep others at a distance", "-")),
    "E2": (
        ("Love large parties", "+"),
        ("Talk to a lot of different people at parties", "+"),
        ("Prefer to be alone", "-"),
        ("Avoid crowds", "-"),
    ),
    "E3": (("Take charge", "+"), ("Try to lead others", "+"), ("Take control of things", "+"), ("Wait for others to lead the way", "-")),
    "E4": (("Am always busy", "+"), ("Am always on the go", "+"), ("Do a lot in my spare time", "+"), ("Like to take it easy", "-")),
    "E5": (("Love excitement", "+"), ("Seek adventure", "+"), ("Enjoy being reckless", "+"), ("Act wild and crazy", "+")),
    "E6": (("Radiate joy", "+"), ("Have a lot of fun", "+"), ("Love life", "+"), ("Look at the bright side of life", "+")),
    "O1": (("Have a vivid imagination", "+"), ("Enjoy wild flights of fantasy", "+"), ("Love to daydream", "+"), ("Like to get lost in thought", "+")),
    "O2": (
        ("Believe in the importance of art", "+"),
        ("See beauty in things that others might not notice", "+"),
        ("Do not like poetry", "-"),
        ("Do not enjoy going to art museums", "-"),
    ),
    "O3": (
        ("Experience my emotions intensely", "+"),
        ("Feel others' emotions", "+"),
        ("Rarely notice my emotional reactions", "-"),
        ("Don't understand people who get emotional", "-"),
    ),
    "O4": (
        ("Prefer variety to routine", "+"),
        ("Prefer to stick with things that I know", "-"),
        ("Dislike changes", "-"),
        ("Am attached to conventional ways", "-"),
    ),
    "O5": (
        ("Love to read challenging material", "+"),
        ("Avoid philosophical discussions", "-"),
        ("Have difficulty understanding abstract ideas", "-"),
        ("Am not interested in theoretical discussions", "-"),
    ),
    "O6": (
        ("Tend to vote for liberal political candidates", "+"),
        ("Believe that there is no absolute right or wrong", "+"),
        ("Tend to vote for conservative political candidates", "-"),
        ("Believe that we should be tough on crime", "-"),
    ),
    "A1": (("Trust others", "+"), ("Believe that others have good intentions", "+"), ("Trust what people say", "+"), ("Distrust people", "-")),
    "A2": (("Use others for my own ends", "-"), ("Cheat to get ahead", "-"), ("Take advantage of others", "-"), ("Obstruct others' plans", "-")),
    "A3": (
        ("Love to help others", "+"),
        ("Am concerned about others", "+"),
        ("Am indifferent to the feelings of others", "-"),
        ("Take no time for others", "-"),
    ),
    "A4": (("Love a good fight", "-"), ("Yell at people", "-"), ("Insult people", "-"), ("Get back at others", "-")),
    "A5": (
        ("Believe that I am better than others", "-"),
        ("Think highly of myself", "-"),
        ("Have a high opinion of myself", "-"),
        ("Boast about my virtues", "-"),
    ),
    "A6": (
        ("Sympathize with the homeless", "+"),
        ("Feel sympathy for those who are worse off than myself", "+"),
        ("Am not interested in other people's problems", "-"),
        ("Try not to think about the needy", "-"),
    ),
    "C1": (("Complete tasks successfully", "+"), ("Excel in what I do", "+"), ("Handle tasks smoothly", "+"), ("Know how to get things done", "+")),
    "C2": (
        ("Like to tidy up", "+"),
        ("Often forget to put things back in their proper place", "-"),
        ("Leave a mess in my room", "-"),
        ("Leave my belongings around", "-"),
    ),
    "C3": (("Keep my promises", "+"), ("Tell the truth", "+"), ("Break rules", "-"), ("Break my promises", "-")),
    "C4": (
        ("Do more than what's expected of me", "+"),
        ("Work hard", "+"),
        ("Put little time and effort into my work", "-"),
        ("Do just enough work to get by", "-"),
    ),
    "C5": (("Am always prepared", "+"), ("Carry out my plans", "+"), ("Waste my time", "-"), ("Have difficulty starting tasks", "-")),
    "C6": (("Jump into things without thinking", "-"), ("Make rash decisions", "-"), ("Rush into things", "-"), ("Act without thinking", "-")),
}


def _first_person(statement: str) -> str:
    return f"I {statement[0].lower()}{statement[1:]}."


def _build_items() -> tuple[LikertItem, ...]:
    items = []
    for domain in DOMAIN_ORDER:
        for k in range(1, FACETS_PER_DOMAIN * ITEMS_PER_FACET + 1):
            facet = f"{domain}{(k - 1) % FACETS_PER_DOMAIN + 1}"
            statement, keyed = _FACET_STATEMENTS[facet][(k - 1) // FACETS_PER_DOMAIN]
            items.append(
                LikertItem(id=f"{domain}{k}", text=_first_person(statement), domain=domain, facet=facet, keyed=keyed)
            )
    return tuple(items)


BIG_FIVE_ITEMS: Final[tuple[LikertItem, ...]] = _build_items()
