"""
Scheduler - periodic feed refresh

Re-runs the ranking operation on the cadence chosen by DIGEST_FREQUENCY:
- realtime: every 15 seconds
- hourly:   every hour
- daily:    every 24 hours
- anything else: every 60 seconds

The latest successful ranking is kept; a failed refresh keeps the
previous one.

Usage:
    python scheduler.py              # Run scheduler daemon
    python scheduler.py --once       # Run one ranking pass and exit
"""
import asyncio
import signal
import sys
from datetime import datetime
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from config import settings
from crawlers import NewsSourceError
from processor.pipeline import FeedPipeline
from processor.ranker import RankingResult, get_refresh_interval
from utils import logger, init_logging


class FeedRefreshScheduler:
    """
    Recurring re-rank of the feed for a fixed set of interests.

    Owned by whoever owns the pipeline (the API lifespan or the daemon
    below); stop() removes the job along with the timer.
    """

    def __init__(
        self,
        pipeline: FeedPipeline,
        digest_frequency: Optional[str] = None,
        pairs: Optional[list[str]] = None,
        topics: Optional[list[str]] = None,
        limit: Optional[int] = None,
    ):
        self.pipeline = pipeline
        self.digest_frequency = digest_frequency or settings.DIGEST_FREQUENCY
        self.pairs = settings.FEED_PAIRS if pairs is None else pairs
        self.topics = settings.FEED_TOPICS if topics is None else topics
        self.limit = settings.FEED_LIMIT if limit is None else limit
        self.scheduler = AsyncIOScheduler()
        self.latest: Optional[RankingResult] = None
        self.last_error: Optional[str] = None

    @property
    def interval_seconds(self) -> int:
        return get_refresh_interval(self.digest_frequency)

    def setup(self):
        """Register the refresh job; first run is immediate."""
        self.scheduler.add_job(
            self.refresh,
            IntervalTrigger(seconds=self.interval_seconds),
            id="feed_refresh",
            name=f"Feed refresh ({self.digest_frequency})",
            replace_existing=True,
            next_run_time=datetime.now(),
            max_instances=1,
            coalesce=True,
        )
        logger.info(f"Feed refresh scheduled every {self.interval_seconds}s ({self.digest_frequency})")

    async def refresh(self) -> bool:
        """
        Job: one ranking pass.

        Returns:
            True if the snapshot was updated
        """
        try:
            result = await self.pipeline.rank(pairs=self.pairs, topics=self.topics, limit=self.limit)
        except NewsSourceError as e:
            self.last_error = str(e)
            logger.warning(f"Feed refresh failed, keeping previous snapshot: {e}")
            return False

        self.latest = result
        self.last_error = None
        logger.info(f"Feed refreshed: {len(result.articles)} articles above threshold {result.threshold}")
        return True

    def start(self):
        """Start the scheduler. Must be called from inside a running event loop."""
        self.setup()
        self.scheduler.start()
        logger.info("Feed refresh scheduler started")

    def stop(self):
        """Stop the scheduler and drop its timer."""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("Feed refresh scheduler stopped")


def build_default_pipeline() -> FeedPipeline:
    """Pipeline wired from settings, with its own in-process signal store."""
    from crawlers import ForexNewsSource
    from feedback import SignalStore

    return FeedPipeline(
        source=ForexNewsSource(),
        store=SignalStore(retention_hours=settings.FEEDBACK_RETENTION_HOURS),
    )


async def run_daemon(refresher: FeedRefreshScheduler):
    """Run the refresh loop until SIGINT/SIGTERM."""
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop_event.set)
        except NotImplementedError:
            # add_signal_handler is unavailable on Windows
            pass

    refresher.start()
    logger.info("Scheduler running - Press Ctrl+C to stop")
    try:
        await stop_event.wait()
    finally:
        logger.info("Received shutdown signal")
        refresher.stop()


def main():
    """Main entry point with CLI arguments."""
    import argparse

    parser = argparse.ArgumentParser(description="Forex Alert Feed Scheduler")
    parser.add_argument("--once", action="store_true", help="Run one ranking pass and exit")
    parser.add_argument("--frequency", help="Override DIGEST_FREQUENCY (realtime, hourly, daily)")

    args = parser.parse_args()

    init_logging(app_name="scheduler")

    refresher = FeedRefreshScheduler(build_default_pipeline(), digest_frequency=args.frequency)

    if args.once:
        ok = asyncio.run(refresher.refresh())
        if ok:
            for ranked in refresher.latest.articles:
                logger.info(f"  {ranked.boosted_relevance:6.2f}  {ranked.article.title}")
        sys.exit(0 if ok else 1)

    asyncio.run(run_daemon(refresher))


if __name__ == "__main__":
    main()
