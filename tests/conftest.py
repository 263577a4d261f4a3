from datetime import datetime, timedelta, timezone

import pytest

from crawlers.base_crawler import BaseNewsSource, CandidateArticle, NewsSourceError
from feedback import FeedbackSignal
from generation.base import ImageProvider
from generation.models import PredictionJob, PredictionStatus

NOW_MS = 1_760_000_000_000
HOUR_MS = 60 * 60 * 1000
NOW_DT = datetime.fromtimestamp(NOW_MS / 1000, tz=timezone.utc)


@pytest.fixture
def now_ms() -> int:
    return NOW_MS


@pytest.fixture
def make_article():
    def _make(
        article_id: str = "a1",
        relevance: float = 50,
        pairs=("EUR/USD",),
        topics=("Monetary Policy",),
        hours_ago: float = 1,
    ) -> CandidateArticle:
        return CandidateArticle(
            id=article_id,
            title=f"Headline {article_id}",
            published_at=NOW_DT - timedelta(hours=hours_ago),
            source="Reuters",
            relevance_score=relevance,
            url=f"https://news.example.com/{article_id}",
            summary="ECB holds rates",
            sentiment="neutral",
            pairs=frozenset(pairs),
            topics=frozenset(topics),
        )

    return _make


@pytest.fixture
def make_signal():
    def _make(
        helpful: bool = True,
        pairs=("EUR/USD",),
        topics=("Monetary Policy",),
        hours_ago: float = 0,
        article_id: str = "seen",
    ) -> FeedbackSignal:
        return FeedbackSignal.create(
            article_id=article_id,
            helpful=helpful,
            pairs=pairs,
            topics=topics,
            timestamp=int(NOW_MS - hours_ago * HOUR_MS),
        )

    return _make


class FakeNewsSource(BaseNewsSource):
    """Returns canned articles, or raises when told to."""

    def __init__(self, articles=None, error: Exception = None):
        super().__init__("fake_news")
        self.articles = list(articles or [])
        self.error = error
        self.calls = []

    async def fetch(self, pairs=None, topics=None, limit=None):
        self.calls.append({"pairs": pairs, "topics": topics, "limit": limit})
        if self.error is not None:
            raise self.error
        return list(self.articles)


class FakeProvider(ImageProvider):
    """Scripted provider: each status() call pops the next payload."""

    name = "fake"

    def __init__(self, statuses=(), submit_error: Exception = None, job_id: str = "job-1"):
        self.statuses = list(statuses)
        self.submit_error = submit_error
        self.job_id = job_id
        self.submitted = []
        self.status_calls = 0
        self.closed = False

    async def submit(self, prompt, negative_prompt, count, dimensions):
        if self.submit_error is not None:
            raise self.submit_error
        self.submitted.append({
            "prompt": prompt,
            "negative_prompt": negative_prompt,
            "count": count,
            "dimensions": dimensions,
        })
        return self.job_id

    async def status(self, job_id):
        self.status_calls += 1
        status, output = self.statuses.pop(0) if self.statuses else ("processing", None)
        return PredictionJob(id=job_id, status=PredictionStatus(status), output=output)

    async def aclose(self):
        self.closed = True


class RecordingSleep:
    """Stand-in for asyncio.sleep that returns immediately."""

    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def fake_news_source():
    return FakeNewsSource


@pytest.fixture
def fake_provider():
    return FakeProvider


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def news_error():
    return NewsSourceError("upstream down")
