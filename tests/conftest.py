"""Shared test configuration and fixtures for all tests."""

from collections.abc import Generator
from pathlib import Path
import tempfile

import pytest

from transcript_trim.transcript.models import TranscriptEntry


@pytest.fixture
def sample_vtt_content() -> str:
    """Sample Teams-style VTT content with cue ids."""
    return """WEBVTT

3cf19358-ed0f-42d3-a2ac-c5f5c5de4be0/68-0
00:00:00.000 --> 00:00:05.000
<v John>Hello everyone, let's start the meeting.</v>

3cf19358-ed0f-42d3-a2ac-c5f5c5de4be0/69-0
00:00:05.000 --> 00:00:10.000
<v John>First item is the budget.</v>

d700e97e-1c7f-4753-9597-54e5e43b4642/18-0
00:00:10.000 --> 00:00:15.000
<v Sarah>Thanks John. I have the budget proposal ready.</v>
"""


@pytest.fixture
def sample_text_content() -> str:
    """Sample plain "Speaker: Text" transcript."""
    return """John: Hello everyone, let's start the meeting.

Sarah: Thanks John. I have the budget proposal ready.

Mike: Great, I reviewed the technical requirements.
"""


@pytest.fixture
def sample_entries() -> list[TranscriptEntry]:
    return [
        TranscriptEntry("Alice", "Hello there."),
        TranscriptEntry("Alice", "How are you?"),
        TranscriptEntry("Bob", "I'm fine."),
    ]


@pytest.fixture
def sample_vtt_file(sample_vtt_content: str) -> Generator[Path, None, None]:
    """Create a temporary VTT file for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = Path(tmp_dir) / "meeting.vtt"
        path.write_text(sample_vtt_content, encoding="utf-8")
        yield path
