"""Transcript processing services."""

from transcript_trim.transcript.services.export_compactor import compact, prepare_for_export
from transcript_trim.transcript.services.token_analyzer import (
    analyze_token_reduction,
    calculate_cost_savings,
    estimate_token_count,
)
from transcript_trim.transcript.services.transcript_parser import detect_format, parse
from transcript_trim.transcript.services.transcript_service import (
    TranscriptProcessingResult,
    TranscriptService,
)

__all__ = [
    "TranscriptProcessingResult",
    "TranscriptService",
    "analyze_token_reduction",
    "calculate_cost_savings",
    "compact",
    "detect_format",
    "estimate_token_count",
    "parse",
    "prepare_for_export",
]
