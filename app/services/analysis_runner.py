import asyncio
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from cachetools import TTLCache
from loguru import logger

from app.core.config import settings
from app.models.run import AnalysisJob, JobStatus, RunRecord
from app.services.openrouter import ModelQueryClient, OpenRouterClient
from app.services.psychometrics import SamplingOrchestrator, assemble_profile, items_for_inventories
from app.services.run_store import RunStore, run_store

ClientFactory = Callable[[str], ModelQueryClient]


def _openrouter_factory(model: str) -> OpenRouterClient:
    return OpenRouterClient(api_key=settings.OPENROUTER_API_KEY, model=model)


class AnalysisRunner:
    """
    Runs analyses as background tasks and tracks them by job id.

    A job samples every item of the requested inventories, scores them and
    persists the run once at the end. Cancelled jobs stop at the next batch
    boundary and persist nothing.
    """

    def __init__(
        self,
        store: RunStore = run_store,
        client_factory: ClientFactory = _openrouter_factory,
        sample_count: int = settings.SAMPLE_COUNT,
        concurrency: int = settings.SAMPLING_CONCURRENCY,
        temperature: float = settings.DEFAULT_TEMPERATURE,
    ):
        self.store = store
        self.client_factory = client_factory
        self.sample_count = sample_count
        self.concurrency = concurrency
        self.temperature = temperature
        self._jobs: TTLCache = TTLCache(maxsize=settings.MAX_TRACKED_JOBS, ttl=settings.JOB_TTL_SECONDS)
        # strong references so running tasks are not garbage collected
        self._tasks: dict[str, asyncio.Task] = {}
        self._cancel_events: dict[str, asyncio.Event] = {}

    def get_job(self, job_id: str) -> AnalysisJob | None:
        return self._jobs.get(job_id)

    def start(
        self, model: str, inventories: list[str], persona: str = "Base Model", system_prompt: str = ""
    ) -> AnalysisJob:
        job = AnalysisJob(
            job_id=str(uuid.uuid4()),
            model=model,
            persona=persona,
            inventories=inventories,
            total_items=len(items_for_inventories(inventories)),
        )
        self._jobs[job.job_id] = job
        self._cancel_events[job.job_id] = asyncio.Event()

        task = asyncio.create_task(self._run(job, system_prompt))
        self._tasks[job.job_id] = task
        task.add_done_callback(lambda _: self._forget(job.job_id))
        logger.info(f"[{job.job_id}] Queued analysis of {model} ({persona}) for {', '.join(inventories)}")
        return job

    def cancel(self, job_id: str) -> AnalysisJob | None:
        job = self._jobs.get(job_id)
        if job is None:
            return None
        event = self._cancel_events.get(job_id)
        if event is not None and not job.is_finished:
            event.set()
            logger.info(f"[{job_id}] Cancellation requested")
        return job

    def _forget(self, job_id: str) -> None:
        self._tasks.pop(job_id, None)
        self._cancel_events.pop(job_id, None)

    async def _run(self, job: AnalysisJob, system_prompt: str) -> None:
        job.status = JobStatus.RUNNING
        client = self.client_factory(job.model)

        def on_progress(done: int, total: int) -> None:
            job.progress = done

        orchestrator = SamplingOrchestrator(
            client,
            temperature=self.temperature,
            system_prompt=system_prompt,
            cancel_event=self._cancel_events[job.job_id],
            on_progress=on_progress,
        )
        orchestrator.logs.append(f"Starting analysis for {job.model} ({job.persona})")

        try:
            items = items_for_inventories(job.inventories)
            raw_scores = await orchestrator.run(items, self.sample_count, self.concurrency)

            if orchestrator.cancelled:
                job.status = JobStatus.CANCELLED
                logger.info(f"[{job.job_id}] Cancelled after {job.progress}/{job.total_items} items")
                return

            profile = assemble_profile(
                job.model,
                raw_scores,
                job.inventories,
                persona=job.persona,
                system_prompt=system_prompt,
                logs=orchestrator.logs,
            )
            job.profile = profile
            try:
                job.run_id = await self.store.save_run(RunRecord.from_profile(profile, orchestrator.logs))
            except Exception as e:
                logger.error(f"[{job.job_id}] Failed to persist run: {e}")
                job.run_id = None
            if job.run_id is None:
                logger.warning(f"[{job.job_id}] Run finished but could not be persisted")
            job.status = JobStatus.COMPLETED
            logger.info(f"[{job.job_id}] Completed analysis of {job.model} (run {job.run_id})")
        except asyncio.CancelledError:
            job.status = JobStatus.CANCELLED
            raise
        except Exception as e:
            logger.exception(f"[{job.job_id}] Analysis failed: {e}")
            job.status = JobStatus.FAILED
            job.error = str(e)
        finally:
            job.finished_at = datetime.now(timezone.utc)
            close = getattr(client, "close", None)
            if close is not None:
                await close()

    async def shutdown(self) -> None:
        """Cancel outstanding jobs and wait for them to unwind."""
        pending = dict(self._tasks)
        for task in pending.values():
            task.cancel()
        if not pending:
            return
        await asyncio.gather(*pending.values(), return_exceptions=True)
        # a task cancelled before its first step never reaches _run's handlers
        for job_id in pending:
            job = self._jobs.get(job_id)
            if job is not None and not job.is_finished:
                job.status = JobStatus.CANCELLED
                job.finished_at = datetime.now(timezone.utc)
        logger.info(f"Cancelled {len(pending)} outstanding analysis job(s)")


analysis_runner = AnalysisRunner()
