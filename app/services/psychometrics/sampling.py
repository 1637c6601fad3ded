import asyncio
from collections.abc import Callable, Sequence

from loguru import logger

from app.models.inventory import InventoryItem
from app.models.results import RawScoreSet
from app.services.openrouter import ModelQueryClient
from app.services.psychometrics.constants import DEFAULT_CONCURRENCY, DEFAULT_SAMPLE_COUNT
from app.services.psychometrics.parser import fallback_for, parse_response
from app.services.psychometrics.prompts import build_prompt

Item = InventoryItem
ProgressCallback = Callable[[int, int], None]


class SamplingOrchestrator:
    """
    Administers inventory items to a model and collects repeated samples.

    Items run in contiguous batches of ``concurrency``: batches are sequential,
    items inside a batch are concurrent, and the samples of one item are
    sequential. A failed query records the fallback value for that sample and
    never aborts the run.
    """

    def __init__(
        self,
        client: ModelQueryClient,
        temperature: float = 0.7,
        system_prompt: str = "",
        cancel_event: asyncio.Event | None = None,
        on_progress: ProgressCallback | None = None,
    ):
        self.client = client
        self.temperature = temperature
        self.system_prompt = system_prompt
        self.cancel_event = cancel_event
        self.on_progress = on_progress
        self.logs: list[str] = []
        self.cancelled = False

    def _log(self, message: str) -> None:
        self.logs.append(message)

    async def _sample_once(self, item: Item, prompt: str, index: int) -> float:
        try:
            raw_text = await self.client.query(prompt, self.temperature, self.system_prompt)
        except Exception as e:
            fallback = fallback_for(item.type)
            logger.warning(f"Query failed for {item.id} sample {index}: {e}")
            self._log(f"Item {item.id} sample {index}: query failed ({e}); using fallback {fallback}")
            return float(fallback)

        value = parse_response(raw_text, item.type)
        self._log(f"Item {item.id} sample {index}: {value} (raw: {str(raw_text).strip()[:50]!r})")
        return float(value)

    async def _sample_item(self, item: Item, sample_count: int) -> list[float]:
        prompt = build_prompt(item)
        samples = []
        for index in range(1, sample_count + 1):
            samples.append(await self._sample_once(item, prompt, index))
        return samples

    async def run(
        self,
        items: Sequence[Item],
        sample_count: int = DEFAULT_SAMPLE_COUNT,
        concurrency: int = DEFAULT_CONCURRENCY,
    ) -> RawScoreSet:
        """
        Sample every item ``sample_count`` times.

        Cancellation is only observed between batches; the result then holds the
        fully sampled items of the batches that completed.
        """
        if sample_count < 1 or concurrency < 1:
            raise ValueError("sample_count and concurrency must be positive")

        raw_scores: RawScoreSet = {}
        total = len(items)
        done = 0

        for start in range(0, total, concurrency):
            if self.cancel_event is not None and self.cancel_event.is_set():
                self.cancelled = True
                logger.info(f"Sampling cancelled after {done}/{total} items")
                self._log(f"Run cancelled after {done}/{total} items")
                break

            batch = items[start : start + concurrency]
            results = await asyncio.gather(*(self._sample_item(item, sample_count) for item in batch))
            for item, samples in zip(batch, results):
                raw_scores[item.id] = samples
                done += 1
                logger.debug(f"Completed {item.id} ({done}/{total}): {samples}")

            logger.info(f"Sampling progress: {done}/{total} items")
            if self.on_progress is not None:
                self.on_progress(done, total)

        return raw_scores
