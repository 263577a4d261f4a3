"""
API Routes - endpoint definitions for the Forex Alert Feed

Endpoints organized by:
- Health Check
- News (personalized ranking)
- Feedback (signals and adaptive threshold)
- Players (image generation)
"""
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Request
from loguru import logger

from crawlers import NewsSourceError
from feedback import FeedbackSignal
from generation import GenerationOrchestrator, GenerationRequest
from processor.pipeline import FeedPipeline
from .schemas import FeedbackRequest, NewsRequest, PlayerRequest

router = APIRouter()


def get_pipeline(request: Request) -> FeedPipeline:
    return request.app.state.pipeline


def get_generation_orchestrator(request: Request) -> GenerationOrchestrator:
    return request.app.state.orchestrator


# ============================================================
# Health Check
# ============================================================
@router.get("/health")
async def health_check(pipeline: FeedPipeline = Depends(get_pipeline)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "signals": len(pipeline.store),
    }


# ============================================================
# News
# ============================================================
@router.post("/news")
async def rank_news(body: NewsRequest, pipeline: FeedPipeline = Depends(get_pipeline)):
    """
    Personalized, filtered and ordered articles.

    An empty list means nothing crossed the adaptive threshold.
    Upstream news failures answer 502.
    """
    try:
        result = await pipeline.rank(pairs=body.pairs, topics=body.topics, limit=body.limit)
    except NewsSourceError as e:
        logger.error(f"News ranking failed: {e}")
        raise HTTPException(status_code=502, detail=f"Failed to load forex alerts: {e}")

    return result.to_dict()


@router.get("/news/latest")
async def latest_news(request: Request):
    """Latest snapshot from the background refresh, if it is enabled."""
    refresher = getattr(request.app.state, "refresher", None)
    if refresher is None:
        raise HTTPException(status_code=404, detail="Background refresh is disabled")
    if refresher.latest is None:
        raise HTTPException(status_code=503, detail=refresher.last_error or "No refresh completed yet")

    return {
        **refresher.latest.to_dict(),
        "digestFrequency": refresher.digest_frequency,
        "lastError": refresher.last_error,
    }


# ============================================================
# Feedback
# ============================================================
@router.post("/feedback")
async def record_feedback(body: FeedbackRequest, pipeline: FeedPipeline = Depends(get_pipeline)):
    """Record a helpful/skip reaction to an article."""
    signal = FeedbackSignal.create(
        article_id=body.article_id,
        helpful=body.helpful,
        pairs=body.pairs,
        topics=body.topics,
        timestamp=body.timestamp,
    )
    threshold = pipeline.record_feedback(signal)
    return {
        "signal": signal.to_dict(),
        "threshold": threshold,
        "signals": len(pipeline.store),
    }


@router.get("/threshold")
async def get_threshold(pipeline: FeedPipeline = Depends(get_pipeline)):
    """Current adaptive relevance threshold."""
    return {
        "threshold": pipeline.current_threshold(),
        "signals": len(pipeline.store),
    }


# ============================================================
# Players
# ============================================================
@router.post("/players")
async def generate_player(
    body: PlayerRequest,
    orchestrator: GenerationOrchestrator = Depends(get_generation_orchestrator),
):
    """Generate player imagery; provider failures degrade to the fallback."""
    request = GenerationRequest(
        seed=body.seed,
        attribute_overrides=body.attributes.to_overrides() if body.attributes else {},
        image_count=body.image_count,
    )
    result = await orchestrator.generate(request)
    return result.to_dict()
