"""Minimal settings + logging for the TranscriptTrim service."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

from transcript_trim.transcript.models import PricingModel

# Load .env file from the project root
PROJECT_DIR = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=PROJECT_DIR / ".env")


class Settings(BaseSettings):
    """Essential settings for transcript services, the API and logging."""

    # Environment + logging
    log_level: str = "INFO"

    # Parsing and analysis
    default_pricing_model: PricingModel = PricingModel.GPT4
    # Longest prefix accepted as a speaker in "Speaker - Text" lines
    speaker_label_max_length: int = 30

    # Uploads
    max_file_size_mb: int = 100
    allowed_extensions: tuple[str, ...] = (".vtt", ".txt")

    # API
    api_title: str = "TranscriptTrim API"
    api_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    @property
    def max_file_size_bytes(self) -> int:
        """Calculate max size in bytes."""
        return self.max_file_size_mb * 1024 * 1024


settings = Settings()


def configure_structlog() -> None:
    """Simple logging setup."""
    import logging
    import sys

    import structlog

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        stream=sys.stdout,
        format="%(message)s",
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(colors=True),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
