"""
FastAPI Application - Forex Alert Feed API
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from generation import GenerationOrchestrator, get_orchestrator
from processor.pipeline import FeedPipeline
from utils import logger, init_logging
from .routes import router


def create_app(
    pipeline: Optional[FeedPipeline] = None,
    orchestrator: Optional[GenerationOrchestrator] = None,
    auto_refresh: Optional[bool] = None,
) -> FastAPI:
    """
    Build the application.

    The pipeline (and with it the signal store) and the orchestrator live
    as long as the app; tests pass their own.
    """
    auto_refresh = settings.FEED_AUTO_REFRESH if auto_refresh is None else auto_refresh

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        init_logging(app_name="api")
        logger.info("Starting API server")

        if auto_refresh:
            from scheduler import FeedRefreshScheduler

            app.state.refresher = FeedRefreshScheduler(app.state.pipeline)
            app.state.refresher.start()
        yield

        logger.info("Shutting down API server")
        if app.state.refresher is not None:
            app.state.refresher.stop()
        await app.state.orchestrator.aclose()

    app = FastAPI(
        title="Forex Alert Feed",
        description="Adaptive forex news alerts and player image generation",
        version="1.0.0",
        lifespan=lifespan
    )

    if pipeline is None:
        from scheduler import build_default_pipeline
        pipeline = build_default_pipeline()

    app.state.pipeline = pipeline
    app.state.orchestrator = orchestrator or get_orchestrator()
    app.state.refresher = None

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, specify actual origins
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "Forex Alert Feed",
            "version": "1.0.0",
            "status": "running"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=settings.API_HOST, port=settings.API_PORT)
