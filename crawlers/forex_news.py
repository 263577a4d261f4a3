"""
Forex News Source - candidate articles from the upstream news feed API

The upstream endpoint accepts a JSON body {pairs, topics, limit} and
answers with {"articles": [...]}. Items that cannot be parsed are
skipped; the remaining items are returned as-is, without assuming
anything about how many there are.
"""
from typing import Iterable, Optional

import httpx
from loguru import logger

from config import settings
from .base_crawler import BaseNewsSource, CandidateArticle, NewsSourceError


class ForexNewsSource(BaseNewsSource):
    """HTTP client for the forex news feed."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        verify_ssl: Optional[bool] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            url: Feed endpoint. Defaults to settings.NEWS_API_URL
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
            http_client: Pre-built client (tests inject a MockTransport here)
        """
        super().__init__("forex_news")
        self.url = url or settings.NEWS_API_URL
        self.timeout = timeout if timeout is not None else settings.NEWS_TIMEOUT
        self.verify_ssl = settings.NEWS_VERIFY_SSL if verify_ssl is None else verify_ssl
        self._http_client = http_client

        if not self.verify_ssl:
            logger.warning("SSL verification disabled for news source")

    async def fetch(
        self,
        pairs: Optional[Iterable[str]] = None,
        topics: Optional[Iterable[str]] = None,
        limit: Optional[int] = None,
    ) -> list[CandidateArticle]:
        body = {}
        if pairs:
            body["pairs"] = list(pairs)
        if topics:
            body["topics"] = list(topics)
        if limit is not None:
            body["limit"] = limit

        payload = await self._post(body)

        items = payload.get("articles") if isinstance(payload, dict) else None
        if not isinstance(items, list):
            raise NewsSourceError("News payload has no 'articles' list")

        articles = []
        for item in items:
            try:
                articles.append(CandidateArticle.from_dict(item))
            except (KeyError, ValueError, TypeError) as e:
                logger.warning(f"[{self.name}] Skipping malformed article: {e}")
        return articles

    async def _post(self, body: dict) -> dict:
        """POST the filter to the feed and return the decoded JSON."""
        try:
            if self._http_client is not None:
                response = await self._http_client.post(self.url, json=body, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout, verify=self.verify_ssl) as client:
                    response = await client.post(self.url, json=body)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise NewsSourceError(f"News feed returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise NewsSourceError(f"News feed request failed: {e}") from e
        except ValueError as e:
            raise NewsSourceError(f"News feed returned invalid JSON: {e}") from e
