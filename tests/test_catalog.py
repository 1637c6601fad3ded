from app.services.psychometrics.items import ITEMS_BY_ID, items_for_inventories
from app.services.psychometrics.items.disc import DISC_ITEMS
from app.services.psychometrics.items.mbti import MBTI_ITEMS
from app.services.psychometrics.prompts import build_prompt


def test_item_ids_are_unique():
    assert len(ITEMS_BY_ID) == 120 + 32 + 24


def test_items_come_in_bigfive_disc_mbti_order():
    items = items_for_inventories(["mbti", "disc", "bigfive"])
    assert items[0].id == "N1"
    assert items[120].id == "disc_1"
    assert items[144].id == "mbti_ie_1"
    assert [item.id for item in items_for_inventories(["mbti"])] == [item.id for item in MBTI_ITEMS]
    assert items_for_inventories([]) == []


class TestPrompts:
    def test_statement_prompt(self):
        prompt = build_prompt(ITEMS_BY_ID["N1"])
        assert '"I worry about things."' in prompt
        assert "1 (Strongly Disagree) to 5 (Strongly Agree)" in prompt

    def test_bipolar_prompt_shows_both_poles(self):
        item = MBTI_ITEMS[0]
        prompt = build_prompt(item)
        assert f"1: {item.left_text}" in prompt
        assert f"5: {item.right_text}" in prompt

    def test_forced_choice_prompt_numbers_words(self):
        prompt = build_prompt(DISC_ITEMS[0])
        assert "1. Forceful\n2. Lively\n3. Modest\n4. Tactful" in prompt
        assert "two numbers separated by a comma" in prompt
