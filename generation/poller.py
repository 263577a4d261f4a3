"""
Prediction Poller - waits for a provider job to reach a terminal state.

starting -> processing -> succeeded | failed | canceled

Polls on a fixed interval for at most max_attempts polls. The wait
between polls is an awaited sleep, so cancelling the caller's task
stops polling and releases the timer.
"""
import asyncio
from typing import Awaitable, Callable, Optional

from loguru import logger

from config import settings
from .base import ImageProvider, PredictionFailedError, PredictionTimeoutError
from .models import PredictionStatus


class PredictionPoller:
    """Bounded poll loop over ImageProvider.status()."""

    def __init__(
        self,
        provider: ImageProvider,
        interval: Optional[float] = None,
        max_attempts: Optional[int] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Args:
            provider: Provider exposing status(job_id)
            interval: Seconds between polls (default settings.POLL_INTERVAL_SECONDS)
            max_attempts: Poll budget (default settings.POLL_MAX_ATTEMPTS)
            sleep: Awaitable sleep; tests pass a no-op
        """
        self.provider = provider
        self.interval = settings.POLL_INTERVAL_SECONDS if interval is None else interval
        self.max_attempts = settings.POLL_MAX_ATTEMPTS if max_attempts is None else max_attempts
        self._sleep = sleep

        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    async def wait(self, job_id: str) -> list[str]:
        """
        Poll until the job finishes.

        Returns:
            Output list of a succeeded job (possibly empty)

        Raises:
            PredictionFailedError: job failed or was canceled
            PredictionTimeoutError: no terminal state within max_attempts polls
            ProviderRequestError: a status request failed
        """
        for attempt in range(1, self.max_attempts + 1):
            job = await self.provider.status(job_id)
            logger.debug(f"Poll {attempt}/{self.max_attempts} for {job_id}: {job.status.value}")

            if job.status == PredictionStatus.SUCCEEDED:
                return job.output or []
            if job.status.is_terminal:
                raise PredictionFailedError(job_id, job.status, job.error)

            if attempt < self.max_attempts:
                await self._sleep(self.interval)

        raise PredictionTimeoutError(job_id, self.max_attempts)
