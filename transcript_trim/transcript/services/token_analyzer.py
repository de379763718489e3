"""
Approximate token counting and cost estimates for transcript compaction.

The estimate is a heuristic, not a tokenizer: ordinary prose is counted at
roughly four characters per token, while UUID-shaped cue identifiers (common
in Teams/Stream VTT exports) tokenize far worse and are counted at roughly two
characters per token.
"""

import re

import structlog

from transcript_trim.transcript.models import PricingModel, TokenAnalysisResult

logger = structlog.get_logger(__name__)

CHARS_PER_TOKEN = 4
IDENTIFIER_CHARS_PER_TOKEN = 2

# Hex ids such as "3cf19358-ed0f-42d3-a2ac-c5f5c5de4be0/68-0"
HEX_ID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}(?:/\d+-\d+)?"
)


def is_vtt_like(text: str) -> bool:
    return "<v " in text and "</v>" in text


def estimate_token_count(text: str) -> int:
    """
    Estimate the number of tokens in text, with special handling for VTT ids.

    Returns 0 for an empty string and at least 1 for anything else.
    """
    if not text:
        return 0

    if not is_vtt_like(text):
        return max(1, len(text) // CHARS_PER_TOKEN)

    identifier_tokens = 0
    for match in HEX_ID_PATTERN.finditer(text):
        identifier_tokens += max(1, len(match.group(0)) // IDENTIFIER_CHARS_PER_TOKEN)

    # Drop the ids so they are not counted again as prose
    remaining_text = HEX_ID_PATTERN.sub("", text)
    return max(1, identifier_tokens + len(remaining_text) // CHARS_PER_TOKEN)


def analyze_token_reduction(
    original_text: str,
    processed_text: str,
    pricing_model: PricingModel = PricingModel.GPT4,
) -> TokenAnalysisResult:
    """
    Compare token estimates for the original and processed text.

    Args:
        original_text: The original VTT or transcript text
        processed_text: The compacted export text
        pricing_model: Tier used later for the cost figure

    Returns:
        TokenAnalysisResult with counts and reduction metrics
    """
    original_tokens = estimate_token_count(original_text)
    processed_tokens = estimate_token_count(processed_text)
    tokens_reduced = original_tokens - processed_tokens

    # Empty originals count as 0 tokens; report no reduction rather than dividing
    if original_tokens > 0:
        percentage_reduction = tokens_reduced / original_tokens * 100
    else:
        percentage_reduction = 0.0

    logger.debug(
        "Token reduction analyzed",
        original_tokens=original_tokens,
        processed_tokens=processed_tokens,
        percentage_reduction=round(percentage_reduction, 1),
        pricing_model=pricing_model.value,
    )

    return TokenAnalysisResult(
        original_token_count=original_tokens,
        processed_token_count=processed_tokens,
        tokens_reduced=tokens_reduced,
        percentage_reduction=percentage_reduction,
        pricing_model=pricing_model,
    )


def calculate_cost_savings(result: TokenAnalysisResult) -> float:
    """Estimated USD saved; negative when compaction increased the token count."""
    return result.tokens_reduced / 1000 * result.pricing_model.price_per_thousand_tokens
