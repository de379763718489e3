"""
FastAPI backend for TranscriptTrim.

Exposes transcript parsing, export compaction and token analysis over HTTP.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
import structlog

from transcript_trim.api.v1.routers import health, transcript
from transcript_trim.config import configure_structlog, settings

configure_structlog()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown."""
    logger.info(
        "TranscriptTrim API starting up",
        version=settings.api_version,
        default_pricing_model=settings.default_pricing_model.value,
    )
    logger.info("API routes registered", endpoints=len(app.routes))

    yield

    logger.info("TranscriptTrim API shutting down")


app = FastAPI(
    title=settings.api_title,
    description="""
    **Transcript compaction and token estimation**

    * **Parsing**: WebVTT `<v Speaker>` cues or plain `Speaker: Text` lines
    * **Export**: speaker labels collapsed for consecutive lines
    * **Token analysis**: approximate token counts and cost savings per pricing tier
    """,
    version=settings.api_version,
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(transcript.router)


@app.get("/", tags=["Root"])
def root():
    """
    Root endpoint providing basic API information.

    Use `/api/v1/health` for detailed health checks.
    """
    return {
        "service": settings.api_title,
        "version": settings.api_version,
        "status": "operational",
        "docs": "/docs",
        "health": "/api/v1/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "transcript_trim.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_config=None,  # Use our structured logging
    )
