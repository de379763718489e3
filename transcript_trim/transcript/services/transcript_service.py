"""Transcript service: parse, compact and analyze a single document."""

from dataclasses import dataclass
import os
from pathlib import Path
import time

import structlog

from transcript_trim.config import settings
from transcript_trim.transcript.models import (
    ParseOutcome,
    PricingModel,
    TokenAnalysisResult,
)
from transcript_trim.transcript.services.export_compactor import compact
from transcript_trim.transcript.services.token_analyzer import (
    analyze_token_reduction,
    calculate_cost_savings,
)
from transcript_trim.transcript.services.transcript_parser import parse
from transcript_trim.utils.files import read_transcript_file

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class TranscriptProcessingResult:
    """Everything produced for one transcript."""

    outcome: ParseOutcome
    export_text: str = ""
    analysis: TokenAnalysisResult | None = None
    cost_savings: float | None = None


class TranscriptService:
    """Run the parse -> compact -> analyze pipeline."""

    def __init__(
        self,
        pricing_model: PricingModel | None = None,
        max_speaker_length: int | None = None,
    ):
        self.pricing_model = pricing_model or settings.default_pricing_model
        self.max_speaker_length = (
            max_speaker_length
            if max_speaker_length is not None
            else settings.speaker_label_max_length
        )

    def process(
        self,
        content: str,
        filename: str | None = None,
        pricing_model: PricingModel | None = None,
    ) -> TranscriptProcessingResult:
        """
        Parse content and, when entries were found, compact and analyze it.

        Returns:
        TranscriptProcessingResult
        """
        start_time = time.time()
        pricing_model = pricing_model or self.pricing_model
        logger.info("Starting transcript processing", filename=filename)

        outcome = parse(content, filename, max_speaker_length=self.max_speaker_length)
        if not outcome.entries:
            logger.warning(
                "No transcript entries to export",
                filename=filename,
                status=outcome.level.value,
            )
            return TranscriptProcessingResult(outcome=outcome)

        export_text = compact(outcome.entries)
        analysis = analyze_token_reduction(content, export_text, pricing_model)
        cost_savings = calculate_cost_savings(analysis)

        processing_time = time.time() - start_time
        logger.info(
            "Transcript processing completed",
            filename=filename,
            processing_time_ms=int(processing_time * 1000),
            total_entries=len(outcome.entries),
            unique_speakers=len(outcome.speakers),
            original_tokens=analysis.original_token_count,
            processed_tokens=analysis.processed_token_count,
            percentage_reduction=analysis.formatted_percentage_reduction,
        )

        return TranscriptProcessingResult(
            outcome=outcome,
            export_text=export_text,
            analysis=analysis,
            cost_savings=cost_savings,
        )

    def process_file(
        self, path: str | os.PathLike, pricing_model: PricingModel | None = None
    ) -> TranscriptProcessingResult:
        """Read a transcript file and process it, using its name for display."""
        content = read_transcript_file(path)
        return self.process(content, Path(path).name, pricing_model)
