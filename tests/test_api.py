"""
HTTP API tests with the run store and the analysis runner swapped for test doubles.
"""

import pytest
from fastapi import status

from app.core.config import settings
from app.models.run import AnalysisJob, JobStatus, RunRecord
from tests.fakes import InMemoryRunStore


class StubRunner:
    def __init__(self):
        self.jobs: dict[str, AnalysisJob] = {}
        self.started: list[dict] = []

    def start(self, model, inventories, persona="Base Model", system_prompt=""):
        self.started.append(
            {"model": model, "inventories": inventories, "persona": persona, "system_prompt": system_prompt}
        )
        job = AnalysisJob(job_id=f"job-{len(self.jobs) + 1}", model=model, persona=persona, inventories=inventories)
        self.jobs[job.job_id] = job
        return job

    def get_job(self, job_id):
        return self.jobs.get(job_id)

    def cancel(self, job_id):
        return self.jobs.get(job_id)


@pytest.fixture
def store(monkeypatch):
    memory = InMemoryRunStore()
    monkeypatch.setattr("app.api.endpoints.runs.run_store", memory)
    monkeypatch.setattr("app.api.endpoints.stats.run_store", memory)
    return memory


@pytest.fixture
def runner(monkeypatch):
    stub = StubRunner()
    monkeypatch.setattr("app.api.endpoints.analyze.analysis_runner", stub)
    return stub


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(settings, "OPENROUTER_API_KEY", "sk-or-test")


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "ok"


class TestAnalyzeEndpoint:
    def test_launches_job_with_defaults(self, client, runner, api_key):
        response = client.post("/api/analyze", json={"model": "openai/gpt-4o"})
        assert response.status_code == status.HTTP_202_ACCEPTED
        body = response.json()
        assert body["success"] is True
        assert body["data"]["job_id"] == "job-1"
        assert body["data"]["status"] == "queued"
        assert "profile" not in body["data"]
        assert runner.started == [
            {"model": "openai/gpt-4o", "inventories": ["bigfive"], "persona": "Base Model", "system_prompt": ""}
        ]

    def test_passes_persona_and_system_prompt(self, client, runner, api_key):
        client.post(
            "/api/analyze",
            json={"model": "m", "inventories": ["disc", "mbti"], "persona": "Pirate", "systemPrompt": "Arr"},
        )
        assert runner.started[0]["inventories"] == ["disc", "mbti"]
        assert runner.started[0]["system_prompt"] == "Arr"

    def test_unknown_inventory_is_400(self, client, runner, api_key):
        response = client.post("/api/analyze", json={"model": "m", "inventories": ["enneagram"]})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["success"] is False
        assert response.json()["error"] == "Invalid inventory name"
        assert runner.started == []

    def test_missing_model_is_422(self, client, runner, api_key):
        response = client.post("/api/analyze", json={})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_missing_api_key_is_503(self, client, runner, monkeypatch):
        monkeypatch.setattr(settings, "OPENROUTER_API_KEY", None)
        response = client.post("/api/analyze", json={"model": "m"})
        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert runner.started == []

    def test_job_status_and_cancel(self, client, runner, api_key):
        job_id = client.post("/api/analyze", json={"model": "m"}).json()["data"]["job_id"]
        runner.jobs[job_id].status = JobStatus.RUNNING

        response = client.get(f"/api/analyze/{job_id}")
        assert response.json()["data"]["status"] == "running"
        assert client.delete(f"/api/analyze/{job_id}").status_code == status.HTTP_200_OK

    def test_unknown_job_is_404(self, client, runner):
        assert client.get("/api/analyze/nope").status_code == status.HTTP_404_NOT_FOUND
        assert client.delete("/api/analyze/nope").status_code == status.HTTP_404_NOT_FOUND


class TestScoringEndpoints:
    def test_bigfive(self, client):
        response = client.post("/api/bigfive", json={"rawScores": {"N1": [4, 4, 5, 4, 4]}})
        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert set(data) >= {"domains", "facets", "interpretations"}
        assert len(data["facets"]) == 30
        assert response.json()["timestamp"]

    def test_bigfive_rejects_out_of_range(self, client):
        response = client.post("/api/bigfive", json={"rawScores": {"N1": [7]}})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "success": False,
            "error": "Invalid score value",
            "message": 'Item "N1" score 7 is outside 1-5',
        }

    def test_missing_raw_scores_is_400(self, client):
        response = client.post("/api/mbti", json={})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Invalid request format"

    def test_mbti(self, client):
        raw_scores = {f"mbti_ie_{n}": [5, 5, 5, 5, 5] for n in range(1, 9)}
        data = client.post("/api/mbti", json={"rawScores": raw_scores}).json()["data"]
        assert data["type"] == "ESTJ"
        assert data["psi"]["IE"] == 1.0
        assert set(data) >= {"type", "dimensions", "psi", "preferences"}

    def test_disc(self, client):
        data = client.post("/api/disc", json={"rawScores": {"disc_1": [3, 3, 3]}}).json()["data"]
        assert data["profile"] == "D"
        assert data["profileName"] == "Dominance"
        assert sum(data["percentages"].values()) == pytest.approx(100)

    def test_disc_rejects_bad_encoding(self, client):
        response = client.post("/api/disc", json={"rawScores": {"disc_1": [44]}})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_psychometrics_defaults_to_all_inventories(self, client):
        raw_scores = {"E1": [5, 5], "mbti_tf_1": [1, 1], "disc_2": [3, 3]}
        body = client.post("/api/psychometrics", json={"rawScores": raw_scores}).json()
        assert set(body["data"]) == {"bigfive", "mbti_derived", "mbti", "disc"}
        assert body["data"]["bigfive"]["inventoryName"] == "Big Five (IPIP-NEO-120)"
        assert "warnings" not in body

    def test_psychometrics_validates_each_inventory(self, client):
        response = client.post("/api/psychometrics", json={"rawScores": {"disc_1": [9]}, "inventories": ["disc"]})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_psychometrics_non_list_inventories_is_400(self, client):
        response = client.post("/api/psychometrics", json={"rawScores": {"E1": [4]}, "inventories": "bigfive"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["success"] is False
        assert response.json()["error"] == "Invalid inventory name"

    def test_psychometrics_reports_partial_failures(self, client, monkeypatch):
        def explode(raw_scores):
            raise RuntimeError("disc exploded")

        monkeypatch.setattr("app.services.psychometrics.profile.calculate_disc_scores", explode)
        payload = {"rawScores": {"E1": [4]}, "inventories": ["bigfive", "disc"]}
        body = client.post("/api/psychometrics", json=payload).json()
        assert body["success"] is True
        assert set(body["data"]) == {"bigfive", "mbti_derived"}
        assert body["warnings"] == ["disc: disc exploded"]


class TestRunsEndpoints:
    PROFILE = {
        "modelName": "openai/gpt-4o",
        "persona": "Pirate",
        "systemPrompt": "Arr",
        "timestamp": 1_735_689_600_000,
        "results": {
            "disc": {
                "inventoryName": "DISC",
                "rawScores": {"disc_1": [3.0]},
                "traitScores": {"D": 2.0, "I": 1.0, "S": 1.0, "C": 0.0},
                "type": "D",
            }
        },
    }

    def test_save_list_get_delete(self, client, store):
        response = client.post("/api/runs", json=self.PROFILE)
        assert response.status_code == status.HTTP_201_CREATED
        run_id = response.json()["data"]["id"]

        listed = client.get("/api/runs", params={"model": "GPT", "persona": "Pirate"}).json()
        assert [run["id"] for run in listed["data"]] == [run_id]
        assert listed["count"] == 1

        run = client.get(f"/api/runs/{run_id}").json()["data"]
        assert run["model_name"] == "openai/gpt-4o"
        assert run["config"] == {"systemPrompt": "Arr"}
        assert run["created_at"] == "2025-01-01T00:00:00+00:00"

        assert client.delete(f"/api/runs/{run_id}").status_code == status.HTTP_200_OK
        assert client.get(f"/api/runs/{run_id}").status_code == status.HTTP_404_NOT_FOUND
        assert client.get("/api/stats").json()["data"] == {"runs": 0}

    def test_list_filters(self, client, store):
        store.runs["a"] = RunRecord(id="a", model_name="anthropic/claude", created_at="2025-01-02T00:00:00+00:00")
        store.runs["b"] = RunRecord(id="b", model_name="openai/gpt-4o", created_at="2025-01-03T00:00:00+00:00")
        data = client.get("/api/runs").json()["data"]
        assert [run["id"] for run in data] == ["b", "a"]
        assert [run["id"] for run in client.get("/api/runs", params={"model": "claude"}).json()["data"]] == ["a"]

    def test_save_failure_is_503(self, client, store):
        store.available = False
        response = client.post("/api/runs", json=self.PROFILE)
        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE

    def test_missing_run_is_404(self, client, store):
        assert client.get("/api/runs/missing").status_code == status.HTTP_404_NOT_FOUND
        assert client.delete("/api/runs/missing").status_code == status.HTTP_404_NOT_FOUND
