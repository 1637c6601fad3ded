import uuid
from datetime import datetime
from typing import Any

import redis.asyncio as redis
from async_lru import alru_cache
from loguru import logger
from pydantic import ValidationError

from app.core.config import settings
from app.models.run import RunRecord


def _created_at_score(created_at: str) -> float:
    try:
        return datetime.fromisoformat(created_at.replace("Z", "+00:00")).timestamp()
    except ValueError:
        return 0.0


class RunStore:
    """
    Redis-backed store for finished analysis runs.

    Each run is a JSON document under ``REDIS_RUN_KEY + id``; a sorted set keyed by
    creation time indexes them newest first. Failures are logged and reported as
    None/False, never raised.
    """

    KEY_PREFIX = settings.REDIS_RUN_KEY
    INDEX_KEY = settings.REDIS_RUN_INDEX_KEY

    def __init__(self) -> None:
        self._client: redis.Redis | None = None
        if not settings.REDIS_URL:
            logger.warning("REDIS_URL is not set. Runs will not be persisted until Redis is configured.")

    async def _get_client(self) -> redis.Redis:
        if not settings.REDIS_URL:
            raise redis.ConnectionError("REDIS_URL is not configured")
        if self._client is None:
            logger.info("Creating Redis client for RunStore")
            self._client = redis.from_url(
                settings.REDIS_URL,
                decode_responses=True,
                encoding="utf-8",
                socket_connect_timeout=5,
                socket_timeout=5,
                max_connections=settings.REDIS_MAX_CONNECTIONS,
                health_check_interval=30,
                socket_keepalive=True,
            )
        return self._client

    async def close(self) -> None:
        if self._client is None:
            return
        try:
            await self._client.close()
            logger.info("RunStore Redis client closed")
        except Exception as e:
            logger.warning(f"Failed to close RunStore Redis client: {e}")
        finally:
            self._client = None

    def _format_key(self, run_id: str) -> str:
        return f"{self.KEY_PREFIX}{run_id}"

    def _invalidate(self, run_id: str) -> None:
        try:
            self._fetch_run.cache_invalidate(run_id)
        except KeyError:
            pass

    async def save_run(self, record: RunRecord) -> str | None:
        """Persist a run and return its id, or None if Redis is unavailable."""
        run_id = record.id or str(uuid.uuid4())
        document = record.model_copy(update={"id": run_id}).model_dump_json()
        try:
            client = await self._get_client()
            await client.set(self._format_key(run_id), document)
            await client.zadd(self.INDEX_KEY, {run_id: _created_at_score(record.created_at)})
        except (redis.RedisError, OSError) as exc:
            logger.error(f"Failed to save run for {record.model_name}: {exc}")
            return None

        self._invalidate(run_id)
        logger.info(f"Saved run {run_id} ({record.model_name}, {record.persona})")
        return run_id

    @alru_cache(maxsize=500, ttl=3600)
    async def _fetch_run(self, run_id: str) -> RunRecord | None:
        # Redis errors propagate so a failed read is never cached
        client = await self._get_client()
        raw = await client.get(self._format_key(run_id))
        if not raw:
            return None
        return self._decode(run_id, raw)

    async def get_run(self, run_id: str) -> RunRecord | None:
        try:
            return await self._fetch_run(run_id)
        except (redis.RedisError, OSError) as exc:
            logger.error(f"Failed to fetch run {run_id}: {exc}")
            return None

    def _decode(self, run_id: str, raw: str) -> RunRecord | None:
        try:
            return RunRecord.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning(f"Skipping malformed run document {run_id}: {exc}")
            return None

    async def list_runs(
        self,
        model: str | None = None,
        persona: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[RunRecord]:
        """
        Runs ordered newest first.

        ``model`` matches as a case-insensitive substring, ``persona`` exactly.
        """
        try:
            client = await self._get_client()
            if model is None and persona is None:
                run_ids = await client.zrevrange(self.INDEX_KEY, offset, offset + limit - 1)
            else:
                run_ids = await client.zrevrange(self.INDEX_KEY, 0, -1)
            if not run_ids:
                return []
            documents = await client.mget([self._format_key(run_id) for run_id in run_ids])
        except (redis.RedisError, OSError) as exc:
            logger.error(f"Failed to list runs: {exc}")
            return []

        runs = []
        for run_id, raw in zip(run_ids, documents):
            if not raw:
                continue
            record = self._decode(run_id, raw)
            if record is not None:
                runs.append(record)

        if model is None and persona is None:
            return runs

        needle = model.lower() if model else None
        matches = [
            run
            for run in runs
            if (needle is None or needle in run.model_name.lower()) and (persona is None or run.persona == persona)
        ]
        return matches[offset : offset + limit]

    async def delete_run(self, run_id: str) -> bool:
        try:
            client = await self._get_client()
            deleted = await client.delete(self._format_key(run_id))
            await client.zrem(self.INDEX_KEY, run_id)
        except (redis.RedisError, OSError) as exc:
            logger.error(f"Failed to delete run {run_id}: {exc}")
            return False
        self._invalidate(run_id)
        return bool(deleted)

    async def stats(self) -> dict[str, Any]:
        try:
            client = await self._get_client()
            total = await client.zcard(self.INDEX_KEY)
        except (redis.RedisError, OSError) as exc:
            logger.error(f"Failed to count runs: {exc}")
            return {"runs": None}
        return {"runs": total}


run_store = RunStore()
