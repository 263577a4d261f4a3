import asyncio

from crawlers import NewsSourceError
from feedback import SignalStore
from processor import FeedPipeline
from processor.ranker import get_refresh_interval
from scheduler import FeedRefreshScheduler

from conftest import FakeNewsSource


def test_refresh_intervals_per_cadence():
    assert get_refresh_interval("realtime") == 15
    assert get_refresh_interval("hourly") == 3600
    assert get_refresh_interval("daily") == 86400
    assert get_refresh_interval("weekly") == 60
    assert get_refresh_interval(None) == 60


def test_refresh_stores_latest_snapshot(make_article):
    source = FakeNewsSource([make_article("a", relevance=90)])
    refresher = FeedRefreshScheduler(
        FeedPipeline(source, SignalStore()), digest_frequency="hourly",
        pairs=["EUR/USD"], topics=[], limit=5,
    )

    assert asyncio.run(refresher.refresh()) is True
    assert [r.id for r in refresher.latest.articles] == ["a"]
    assert source.calls == [{"pairs": ["EUR/USD"], "topics": [], "limit": 5}]


def test_failed_refresh_keeps_previous_snapshot(make_article):
    source = FakeNewsSource([make_article("a", relevance=90)])
    refresher = FeedRefreshScheduler(FeedPipeline(source, SignalStore()), pairs=[], topics=[], limit=5)
    asyncio.run(refresher.refresh())
    previous = refresher.latest

    source.error = NewsSourceError("timeout")

    assert asyncio.run(refresher.refresh()) is False
    assert refresher.latest is previous
    assert "timeout" in refresher.last_error


def test_start_and_stop_inside_loop():
    refresher = FeedRefreshScheduler(
        FeedPipeline(FakeNewsSource([]), SignalStore()), digest_frequency="daily",
        pairs=[], topics=[], limit=5,
    )

    async def scenario():
        refresher.start()
        job = refresher.scheduler.get_job("feed_refresh")
        assert job is not None
        assert job.trigger.interval.total_seconds() == 86400
        refresher.stop()

    asyncio.run(scenario())

    assert not refresher.scheduler.running
