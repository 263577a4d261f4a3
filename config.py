"""
Forex Alert Feed - Configuration
"""
from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Paths
    BASE_DIR: Path = Path(__file__).parent
    DATA_DIR: Path = Field(default_factory=lambda: Path(__file__).parent / "data")
    LOG_DIR: Path = Field(default_factory=lambda: Path(__file__).parent / "logs")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # News source
    NEWS_API_URL: str = Field(default="http://localhost:3000/api/news", description="Upstream forex news endpoint")
    NEWS_TIMEOUT: float = Field(default=15.0)
    NEWS_VERIFY_SSL: bool = Field(default=True)

    # Feedback
    FEEDBACK_RETENTION_HOURS: int = Field(default=72, description="Signals older than this are pruned")
    DIGEST_FREQUENCY: str = Field(default="realtime", description="realtime, hourly or daily")

    # Periodic feed refresh
    FEED_AUTO_REFRESH: bool = Field(default=False, description="Re-rank in the background while the API runs")
    FEED_PAIRS: list[str] = Field(default_factory=lambda: ["EUR/USD", "GBP/USD", "USD/JPY"])
    FEED_TOPICS: list[str] = Field(default_factory=lambda: ["Monetary Policy", "Economic Data"])
    FEED_LIMIT: int = Field(default=30)

    # Image generation (primary provider)
    REPLICATE_API_TOKEN: str = Field(default="", description="Replicate API token; empty means fallback only")
    REPLICATE_API_BASE: str = Field(default="https://api.replicate.com/v1")
    REPLICATE_MODEL_VERSION: str = Field(
        default="d1d6037ebcf74b5698ce2b52e08d6c9b8d196327582f5ea18284d888fffbe148",
        description="stable-diffusion-xl"
    )
    PROVIDER_TIMEOUT: float = Field(default=30.0)
    POLL_INTERVAL_SECONDS: float = Field(default=3.0)
    POLL_MAX_ATTEMPTS: int = Field(default=21)

    # API
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def ensure_directories():
    """Ensure all required directories exist."""
    dirs = [
        settings.DATA_DIR,
        settings.LOG_DIR,
    ]
    for dir_path in dirs:
        dir_path.mkdir(parents=True, exist_ok=True)
