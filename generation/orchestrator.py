"""
Generation Orchestrator - primary provider with deterministic fallback.

Flow:
1. Effective blueprint = seeded blueprint merged with caller overrides
2. No primary provider configured -> DiceBear URLs, tagged dicebear-fallback
3. Primary: submit prompt, poll until terminal, require non-empty output
4. Any primary failure -> DiceBear URLs, tagged dicebear-degraded

The fallback is pure URL construction and cannot fail, so generation
errors never reach the caller.
"""
import asyncio
from typing import Awaitable, Callable, Optional

from loguru import logger

from .base import EmptyOutputError, GenerationError, ImageProvider
from .blueprint import (
    IMAGE_DIMENSIONS,
    NEGATIVE_PROMPT,
    build_prompt,
    make_player_blueprint,
    merge_blueprint,
)
from .dicebear import build_fallback_urls
from .models import Blueprint, GenerationRequest, GenerationResult, ProviderTag
from .poller import PredictionPoller


class GenerationOrchestrator:
    """Fulfils GenerationRequests, always returning a tagged result."""

    def __init__(
        self,
        primary: Optional[ImageProvider] = None,
        poll_interval: Optional[float] = None,
        max_poll_attempts: Optional[int] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Args:
            primary: Primary provider; None means fallback only
            poll_interval: Seconds between status polls
            max_poll_attempts: Poll budget before timing out
            sleep: Awaitable sleep used by the poller
        """
        self.primary = primary
        self.poller = None
        if primary is not None:
            self.poller = PredictionPoller(
                primary,
                interval=poll_interval,
                max_attempts=max_poll_attempts,
                sleep=sleep,
            )

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Produce images for a request.

        Returns:
            GenerationResult tagged with the provider path taken
        """
        blueprint = merge_blueprint(make_player_blueprint(request.seed), request.attribute_overrides)

        if self.primary is None:
            logger.info(f"No primary provider configured, using fallback (seed={request.seed})")
            return self._fallback(blueprint, request, ProviderTag.FALLBACK_DEFAULT)

        try:
            images, job_id = await self._generate_primary(blueprint, request.image_count)
        except GenerationError as e:
            logger.warning(f"Primary generation failed, falling back: {e}")
            return self._fallback(blueprint, request, ProviderTag.FALLBACK_DEGRADED)
        except Exception as e:
            logger.exception(f"Unexpected error in primary generation: {e}")
            return self._fallback(blueprint, request, ProviderTag.FALLBACK_DEGRADED)

        logger.info(f"Generated {len(images)} images via {self.primary.name} ({job_id})")
        return GenerationResult(
            blueprint=blueprint,
            images=images,
            provider=ProviderTag.PRIMARY,
            seed=request.seed,
            prediction_id=job_id,
        )

    async def _generate_primary(self, blueprint: Blueprint, count: int) -> tuple[list[str], str]:
        """Submit and wait; raises GenerationError on any failure."""
        job_id = await self.primary.submit(
            prompt=build_prompt(blueprint),
            negative_prompt=NEGATIVE_PROMPT,
            count=count,
            dimensions=IMAGE_DIMENSIONS,
        )
        images = await self.poller.wait(job_id)
        if not images:
            raise EmptyOutputError(f"{self.primary.name} did not return images for {job_id}")
        return images, job_id

    def _fallback(
        self,
        blueprint: Blueprint,
        request: GenerationRequest,
        tag: ProviderTag,
    ) -> GenerationResult:
        images = build_fallback_urls(blueprint, request.image_count, request.seed)
        return GenerationResult(
            blueprint=blueprint,
            images=images,
            provider=tag,
            seed=request.seed,
        )

    async def aclose(self) -> None:
        if self.primary is not None:
            await self.primary.aclose()
