"""Pydantic schemas for API v1 - Simple DTOs only."""

from datetime import datetime

from pydantic import BaseModel, Field

from transcript_trim.transcript.models import (
    ParseStatus,
    PricingModel,
    TokenAnalysisResult,
    TranscriptFormat,
)


class EntrySchema(BaseModel):
    """Parsed transcript entry."""

    speaker: str
    dialogue: str


class AnalysisResponse(BaseModel):
    """Token analysis with display values and cost savings."""

    original_token_count: int
    processed_token_count: int
    tokens_reduced: int
    percentage_reduction: float
    formatted_percentage_reduction: str
    pricing_model: PricingModel
    price_per_thousand_tokens: float
    cost_savings: float

    @classmethod
    def from_result(
        cls, result: TokenAnalysisResult, cost_savings: float
    ) -> "AnalysisResponse":
        return cls(
            original_token_count=result.original_token_count,
            processed_token_count=result.processed_token_count,
            tokens_reduced=result.tokens_reduced,
            percentage_reduction=result.percentage_reduction,
            formatted_percentage_reduction=result.formatted_percentage_reduction,
            pricing_model=result.pricing_model,
            price_per_thousand_tokens=result.pricing_model.price_per_thousand_tokens,
            cost_savings=cost_savings,
        )


class TranscriptResponse(BaseModel):
    """Transcript processing response."""

    filename: str
    status: str
    level: ParseStatus
    format: TranscriptFormat | None = None
    entries: list[EntrySchema] = []
    speakers: list[str] = []
    export_text: str = ""
    suggested_filename: str
    analysis: AnalysisResponse | None = None


class AnalyzeRequest(BaseModel):
    """Compare two texts directly."""

    original_text: str
    processed_text: str
    pricing_model: PricingModel | None = None


class PricingModelInfo(BaseModel):
    """Pricing tier listing."""

    name: PricingModel
    price_per_thousand_tokens: float
    description: str
    default: bool = False


class HealthStatus(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str
    timestamp: datetime = Field(default_factory=datetime.now)
    settings: dict[str, str] = {}
