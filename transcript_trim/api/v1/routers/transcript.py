"""Transcript processing endpoints."""

from fastapi import APIRouter, File, HTTPException, Query, UploadFile, status
import structlog

from transcript_trim.api.v1.schemas import (
    AnalysisResponse,
    AnalyzeRequest,
    EntrySchema,
    PricingModelInfo,
    TranscriptResponse,
)
from transcript_trim.config import settings
from transcript_trim.errors import UnsupportedEncodingError
from transcript_trim.transcript.models import PricingModel
from transcript_trim.transcript.services.token_analyzer import (
    analyze_token_reduction,
    calculate_cost_savings,
)
from transcript_trim.transcript.services.transcript_service import TranscriptService
from transcript_trim.utils.files import (
    decode_transcript_bytes,
    suggested_output_filename,
    validate_file_metadata,
)

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/api/v1", tags=["transcript"])


@router.get("/pricing-models", response_model=list[PricingModelInfo])
def list_pricing_models() -> list[PricingModelInfo]:
    """List pricing tiers used for cost estimates."""
    return [
        PricingModelInfo(
            name=model,
            price_per_thousand_tokens=model.price_per_thousand_tokens,
            description=model.description,
            default=model == settings.default_pricing_model,
        )
        for model in PricingModel
    ]


@router.post("/transcript/process", response_model=TranscriptResponse)
def process_transcript(
    file: UploadFile = File(..., description="VTT or plain text transcript"),
    pricing_model: PricingModel | None = Query(None, description="Pricing tier"),
) -> TranscriptResponse:
    """Upload a transcript and return its entries, export text and token analysis.

    Logic:
    1. Validate file name, extension and size
    2. Decode with encoding fallback
    3. Parse, compact and analyze
    """
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="File name is required"
        )

    content = file.file.read()

    is_valid, error_message = validate_file_metadata(file.filename, len(content))
    if not is_valid:
        too_large = len(content) > settings.max_file_size_bytes
        logger.warning(
            "Rejected transcript upload", filename=file.filename, reason=error_message
        )
        raise HTTPException(
            status_code=(
                status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
                if too_large
                else status.HTTP_400_BAD_REQUEST
            ),
            detail=error_message,
        )

    try:
        content_str = decode_transcript_bytes(content)
    except UnsupportedEncodingError as err:
        logger.error("File encoding error", filename=file.filename, error=str(err))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{err}. {err.recovery_suggestion}",
        ) from err

    result = TranscriptService().process(content_str, file.filename, pricing_model)
    outcome = result.outcome

    analysis = None
    if result.analysis is not None and result.cost_savings is not None:
        analysis = AnalysisResponse.from_result(result.analysis, result.cost_savings)

    return TranscriptResponse(
        filename=file.filename,
        status=outcome.status,
        level=outcome.level,
        format=outcome.format,
        entries=[EntrySchema(**entry.to_dict()) for entry in outcome.entries],
        speakers=outcome.speakers,
        export_text=result.export_text,
        suggested_filename=suggested_output_filename(file.filename),
        analysis=analysis,
    )


@router.post("/transcript/analyze", response_model=AnalysisResponse)
def analyze_transcript(request: AnalyzeRequest) -> AnalysisResponse:
    """Estimate token reduction between an original and a processed text."""
    pricing_model = request.pricing_model or settings.default_pricing_model
    result = analyze_token_reduction(
        request.original_text, request.processed_text, pricing_model
    )
    return AnalysisResponse.from_result(result, calculate_cost_savings(result))
