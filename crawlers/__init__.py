"""News source package for the Forex Alert Feed."""

from .base_crawler import BaseNewsSource, CandidateArticle, NewsSourceError, parse_datetime
from .forex_news import ForexNewsSource

__all__ = [
    "BaseNewsSource",
    "CandidateArticle",
    "ForexNewsSource",
    "NewsSourceError",
    "parse_datetime",
]
