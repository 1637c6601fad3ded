from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from app.models.results import ModelProfile


class RunRecord(BaseModel):
    """Persisted shape of one finished run."""

    id: str | None = None
    model_name: str
    persona: str = "Base Model"
    config: dict[str, Any] = Field(default_factory=dict)
    results: dict[str, Any] = Field(default_factory=dict)
    logs: list[str] = Field(default_factory=list)
    created_at: str

    @classmethod
    def from_profile(cls, profile: ModelProfile, logs: list[str] | None = None) -> "RunRecord":
        created_at = datetime.fromtimestamp(profile.timestamp / 1000, tz=timezone.utc)
        return cls(
            model_name=profile.model_name,
            persona=profile.persona or "Base Model",
            config={"systemPrompt": profile.system_prompt},
            results={key: result.model_dump(by_alias=True) for key, result in profile.results.items()},
            logs=list(logs or []),
            created_at=created_at.isoformat(),
        )


class JobStatus(str, Enum):
    QUEUED = "queued"
    RUNNING = "running"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
    FAILED = "failed"


class AnalysisJob(BaseModel):
    """Handle for a background analysis run."""

    job_id: str
    model: str
    persona: str
    inventories: list[str]
    status: JobStatus = JobStatus.QUEUED
    progress: int = 0
    total_items: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: datetime | None = None
    run_id: str | None = None
    error: str | None = None
    profile: ModelProfile | None = Field(default=None, exclude=True)

    @property
    def is_finished(self) -> bool:
        return self.status in (JobStatus.CANCELLED, JobStatus.COMPLETED, JobStatus.FAILED)
