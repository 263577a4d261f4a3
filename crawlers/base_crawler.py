"""
Base News Source - Abstract base class for candidate article providers
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from dateutil import parser as date_parser
from loguru import logger


class NewsSourceError(Exception):
    """Raised when the upstream news source cannot deliver articles."""


@dataclass(frozen=True)
class CandidateArticle:
    """One news item as delivered by the news source. Read-only in the core."""
    id: str
    title: str
    published_at: datetime
    source: str
    relevance_score: float  # 0-100, supplied upstream
    url: str = ""
    summary: Optional[str] = None
    content: str = ""
    sentiment: str = "neutral"  # 'bullish', 'bearish', 'neutral'
    pairs: frozenset = field(default_factory=frozenset)
    topics: frozenset = field(default_factory=frozenset)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CandidateArticle":
        """
        Build an article from an upstream payload item.

        Accepts both the camelCase keys used by the feed API and
        snake_case keys. Raises KeyError/ValueError on malformed items.
        """
        published = data.get("publishedAt") or data.get("published_at")
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            published_at=parse_datetime(published),
            source=data.get("source", ""),
            relevance_score=float(data.get("relevanceScore", data.get("relevance_score")) or 0),
            url=data.get("url", ""),
            summary=data.get("summary"),
            content=data.get("content", ""),
            sentiment=data.get("sentiment", "neutral"),
            pairs=frozenset(data.get("currencyPairs", data.get("pairs")) or ()),
            topics=frozenset(data.get("topics") or ()),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "summary": self.summary,
            "content": self.content,
            "publishedAt": self.published_at.isoformat(),
            "source": self.source,
            "relevanceScore": self.relevance_score,
            "sentiment": self.sentiment,
            "currencyPairs": sorted(self.pairs),
            "topics": sorted(self.topics),
            "url": self.url,
        }


def parse_datetime(value: Any) -> datetime:
    """Parse an ISO string or epoch milliseconds into an aware UTC datetime."""
    if value is None or value == "":
        raise ValueError("missing publication date")
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, (int, float)):
        dt = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    else:
        dt = date_parser.isoparse(str(value))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class BaseNewsSource(ABC):
    """Abstract base class for all news sources."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    async def fetch(
        self,
        pairs: Optional[Iterable[str]] = None,
        topics: Optional[Iterable[str]] = None,
        limit: Optional[int] = None,
    ) -> list[CandidateArticle]:
        """
        Fetch candidate articles matching the given interests.
        Must be implemented by subclasses. May return any number of items.
        """
        pass

    async def run(
        self,
        pairs: Optional[Iterable[str]] = None,
        topics: Optional[Iterable[str]] = None,
        limit: Optional[int] = None,
    ) -> list[CandidateArticle]:
        """
        Fetch with logging; any failure surfaces as NewsSourceError.
        """
        logger.info(f"[{self.name}] Fetching news (limit={limit})...")

        try:
            articles = await self.fetch(pairs=pairs, topics=topics, limit=limit)
        except NewsSourceError:
            logger.error(f"[{self.name}] News source unavailable")
            raise
        except Exception as e:
            logger.exception(f"[{self.name}] Unexpected error during fetch")
            raise NewsSourceError(str(e)) from e

        logger.info(f"[{self.name}] Received {len(articles)} candidate articles")
        return articles
