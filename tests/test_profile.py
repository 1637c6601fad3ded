from unittest.mock import patch

from app.models.run import RunRecord
from app.services.psychometrics.profile import assemble_profile, score_inventories

RAW_SCORES = {
    "E1": [5.0, 5.0, 5.0, 5.0, 5.0],
    "mbti_ie_1": [5.0, 4.0, 5.0, 5.0, 5.0],
    "disc_1": [3.0, 3.0, 3.0, 3.0, 3.0],
}


class TestAssembleProfile:
    def test_bigfive_yields_derived_mbti(self):
        profile = assemble_profile("openai/gpt-4o", RAW_SCORES, ["bigfive"], timestamp=1_700_000_000_000)
        assert set(profile.results) == {"bigfive", "mbti_derived"}
        assert profile.results["bigfive"].raw_scores == {"E1": [5.0] * 5}
        assert profile.results["mbti_derived"].trait_scores["E"] == profile.results["bigfive"].trait_scores["E"]
        assert profile.timestamp == 1_700_000_000_000
        assert profile.persona == "Base Model"

    def test_all_inventories(self):
        profile = assemble_profile("m", RAW_SCORES, ["bigfive", "disc", "mbti"], persona="Pirate", system_prompt="Arr")
        assert set(profile.results) == {"bigfive", "mbti_derived", "disc", "mbti"}
        assert profile.results["disc"].raw_scores == {"disc_1": [3.0] * 5}
        assert profile.results["mbti"].raw_scores == {"mbti_ie_1": [5.0, 4.0, 5.0, 5.0, 5.0]}
        assert profile.system_prompt == "Arr"

    def test_one_failing_inventory_does_not_block_the_others(self):
        logs: list[str] = []
        with patch("app.services.psychometrics.profile.calculate_disc_scores", side_effect=RuntimeError("boom")):
            results, errors = score_inventories(RAW_SCORES, ["bigfive", "disc", "mbti"], logs)
        assert set(results) == {"bigfive", "mbti_derived", "mbti"}
        assert errors == {"disc": "boom"}
        assert logs == ["Scoring failed for disc: boom"]

    def test_run_record_from_profile(self):
        profile = assemble_profile("m", RAW_SCORES, ["disc"], persona="Pirate", system_prompt="Arr", timestamp=0)
        record = RunRecord.from_profile(profile, ["line"])
        assert record.created_at == "1970-01-01T00:00:00+00:00"
        assert record.config == {"systemPrompt": "Arr"}
        assert record.results["disc"]["inventoryName"] == "DISC"
        assert record.logs == ["line"]
