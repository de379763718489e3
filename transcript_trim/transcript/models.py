"""Transcript models - parsed entries, parse outcomes and token analysis."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


@dataclass(frozen=True)
class TranscriptEntry:
    """Single line of dialogue attributed to a speaker."""

    speaker: str  # e.g., "Joon Kang"
    dialogue: str  # e.g., "OK. Yeah."

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {"speaker": self.speaker, "dialogue": self.dialogue}


class TranscriptFormat(str, Enum):
    VTT = "vtt"
    PLAIN_TEXT = "plain_text"


class ParseStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    NO_ENTRIES = "no_entries"


@dataclass(frozen=True)
class ParseOutcome:
    """Result of parsing one document: entries plus a displayable status."""

    entries: tuple[TranscriptEntry, ...]
    status: str
    level: ParseStatus
    format: TranscriptFormat | None = None  # None only for empty input

    @property
    def speakers(self) -> list[str]:
        """Unique speakers in order of first appearance."""
        return list(dict.fromkeys(entry.speaker for entry in self.entries))


class PricingModel(str, Enum):
    """Tokenizer pricing tiers used for the illustrative cost figure."""

    GPT4 = "GPT-4"
    GPT35 = "GPT-3.5"
    CLAUDE = "Claude"
    STANDARD = "Standard"

    @property
    def price_per_thousand_tokens(self) -> float:
        """Price per 1000 input tokens in USD."""
        return _PRICE_PER_THOUSAND_TOKENS[self]

    @property
    def description(self) -> str:
        """Description for display."""
        return _DESCRIPTIONS[self]


_PRICE_PER_THOUSAND_TOKENS: dict[PricingModel, float] = {
    PricingModel.GPT4: 0.03,
    PricingModel.GPT35: 0.0015,
    PricingModel.CLAUDE: 0.008,
    PricingModel.STANDARD: 0.02,  # Average price
}

_DESCRIPTIONS: dict[PricingModel, str] = {
    PricingModel.GPT4: "OpenAI GPT-4 ($0.03 per 1K tokens)",
    PricingModel.GPT35: "OpenAI GPT-3.5 ($0.0015 per 1K tokens)",
    PricingModel.CLAUDE: "Anthropic Claude ($0.008 per 1K tokens)",
    PricingModel.STANDARD: "Standard Estimate ($0.02 per 1K tokens)",
}


class TokenAnalysisResult(BaseModel):
    """Token counts before and after compaction."""

    model_config = ConfigDict(frozen=True)

    original_token_count: int = Field(ge=0)
    processed_token_count: int = Field(ge=0)
    tokens_reduced: int  # negative when compaction grew the text
    percentage_reduction: float
    pricing_model: PricingModel

    @model_validator(mode="after")
    def check_reduction(self) -> "TokenAnalysisResult":
        expected = self.original_token_count - self.processed_token_count
        if self.tokens_reduced != expected:
            raise ValueError(
                f"tokens_reduced must equal original - processed ({expected})"
            )
        if self.original_token_count == 0 and self.percentage_reduction != 0.0:
            raise ValueError("percentage_reduction must be 0 when nothing was counted")
        return self

    @property
    def formatted_percentage_reduction(self) -> str:
        """Percentage reduction for display, e.g. "85.2%"."""
        return f"{self.percentage_reduction:.1f}%"

    @property
    def formatted_original_token_count(self) -> str:
        return f"{self.original_token_count:,}"

    @property
    def formatted_processed_token_count(self) -> str:
        return f"{self.processed_token_count:,}"

    @property
    def formatted_tokens_reduced(self) -> str:
        return f"{self.tokens_reduced:,}"
