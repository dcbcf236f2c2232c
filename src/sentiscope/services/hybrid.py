"""Simulated multi-model ensemble pass over the whole dataset."""

import asyncio
import logging
from typing import Optional

from ..core.config import settings
from ..core.models import HybridRunResult
from ..core.scoring import HeuristicScorer
from .dataset import DatasetStore

logger = logging.getLogger(__name__)


class AnalysisInProgressError(RuntimeError):
    """Raised when a hybrid pass is requested while another is running."""


class HybridAnalysisService:
    """Runs at most one rescoring pass at a time.

    The pass snapshots the store, waits out the simulated latency, rescores
    the snapshot and swaps the result in as a whole. Cancelling the awaiting
    caller does not stop a pass that has started.
    """

    def __init__(self, scorer: Optional[HeuristicScorer] = None, latency: Optional[float] = None):
        self.scorer = scorer or HeuristicScorer(change_threshold=settings.change_threshold)
        self.latency = settings.hybrid_latency_seconds if latency is None else latency
        self._task: Optional[asyncio.Future] = None
        self.last_result: Optional[HybridRunResult] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _run(self, store: DatasetStore) -> HybridRunResult:
        snapshot = store.snapshot()
        logger.info(f"Hybrid analysis started on {len(snapshot)} aspect-rows")
        await asyncio.sleep(self.latency)
        updated, changed = self.scorer.score_rows(snapshot)
        store.replace(updated)
        result = HybridRunResult(rows_scored=len(updated), rows_changed=changed)
        self.last_result = result
        logger.info(result.message)
        return result

    async def run(self, store: DatasetStore) -> HybridRunResult:
        """Rescore every row in ``store`` and report how many changed."""
        if self.is_running:
            logger.warning("Hybrid analysis already running; request rejected")
            raise AnalysisInProgressError("A hybrid analysis pass is already running")
        self._task = asyncio.ensure_future(self._run(store))
        return await asyncio.shield(self._task)

    def run_sync(self, store: DatasetStore) -> HybridRunResult:
        """Blocking wrapper for callers without an event loop."""
        return asyncio.run(self.run(store))
