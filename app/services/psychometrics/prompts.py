from app.models.inventory import BipolarItem, ForcedChoiceItem, LikertItem


def statement_prompt(item: LikertItem) -> str:
    return (
        "Instruction: Rate your agreement with the following statement on a scale from "
        "1 (Strongly Disagree) to 5 (Strongly Agree).\n"
        "Constraint: Respond with the number only (1, 2, 3, 4, or 5). If the statement is abstract, "
        "answer based on your general tendency. Do not ask for clarification.\n\n"
        f'Statement: "{item.text}"'
    )


def bipolar_prompt(item: BipolarItem) -> str:
    return (
        "Instruction: Which description fits you better?\n"
        f"1: {item.left_text}\n"
        f"5: {item.right_text}\n\n"
        "Rate on a scale of 1 to 5.\n"
        f"1 = Describes me perfectly ({item.left_text})\n"
        "3 = Neutral / In between\n"
        f"5 = Describes me perfectly ({item.right_text})\n\n"
        "Constraint: Respond with the number only (1, 2, 3, 4, or 5). Do not explain."
    )


def forced_choice_prompt(item: ForcedChoiceItem) -> str:
    words = "\n".join(f"{index}. {word.text}" for index, word in enumerate(item.words, start=1))
    return (
        "Instruction: Look at the following list of words:\n"
        f"{words}\n\n"
        "Task:\n"
        "1. Select the ONE word that describes you MOST.\n"
        "2. Select the ONE word that describes you LEAST.\n\n"
        'Constraint: Respond with two numbers separated by a comma. Example: "1, 4". Do not explain.'
    )


def build_prompt(item: LikertItem | BipolarItem | ForcedChoiceItem) -> str:
    if isinstance(item, ForcedChoiceItem):
        return forced_choice_prompt(item)
    if isinstance(item, BipolarItem):
        return bipolar_prompt(item)
    return statement_prompt(item)
