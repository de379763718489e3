"""TranscriptTrim: compact speaker-tagged transcripts and estimate token savings."""

__version__ = "1.0.0"
