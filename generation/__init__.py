"""
Generation Module - player imagery with provider fallback.

Usage:
    from generation import get_orchestrator, GenerationRequest

    orchestrator = get_orchestrator()  # Uses config settings
    result = await orchestrator.generate(GenerationRequest(seed=100, image_count=3))
    print(result.provider, result.images)

Providers:
- replicate: Stable Diffusion XL predictions (needs REPLICATE_API_TOKEN)
- dicebear: deterministic avatar URLs, always available
"""
from typing import Optional

from config import settings
from .base import (
    EmptyOutputError,
    GenerationError,
    ImageProvider,
    PredictionFailedError,
    PredictionTimeoutError,
    ProviderRequestError,
)
from .blueprint import build_prompt, make_player_blueprint, merge_blueprint
from .dicebear import build_fallback_urls
from .models import (
    Blueprint,
    GenerationRequest,
    GenerationResult,
    PredictionJob,
    PredictionStatus,
    ProviderTag,
)
from .orchestrator import GenerationOrchestrator
from .poller import PredictionPoller
from .replicate import ReplicateClient


def get_orchestrator(
    api_token: Optional[str] = None,
    model_version: Optional[str] = None,
) -> GenerationOrchestrator:
    """
    Get a generation orchestrator.

    Args:
        api_token: Replicate token. Defaults to settings.REPLICATE_API_TOKEN;
                   empty means fallback only
        model_version: Model version. Defaults to settings.REPLICATE_MODEL_VERSION

    Returns:
        Configured GenerationOrchestrator
    """
    token = settings.REPLICATE_API_TOKEN if api_token is None else api_token

    primary = None
    if token:
        primary = ReplicateClient(
            api_token=token,
            model_version=model_version or settings.REPLICATE_MODEL_VERSION,
            api_base=settings.REPLICATE_API_BASE,
            timeout=settings.PROVIDER_TIMEOUT,
        )

    return GenerationOrchestrator(
        primary=primary,
        poll_interval=settings.POLL_INTERVAL_SECONDS,
        max_poll_attempts=settings.POLL_MAX_ATTEMPTS,
    )


__all__ = [
    "get_orchestrator",
    "GenerationOrchestrator",
    "PredictionPoller",
    "ImageProvider",
    "ReplicateClient",
    "Blueprint",
    "GenerationRequest",
    "GenerationResult",
    "PredictionJob",
    "PredictionStatus",
    "ProviderTag",
    "GenerationError",
    "ProviderRequestError",
    "PredictionFailedError",
    "PredictionTimeoutError",
    "EmptyOutputError",
    "build_prompt",
    "build_fallback_urls",
    "make_player_blueprint",
    "merge_blueprint",
]
