"""Parse WebVTT voice-tagged cues and plain "Speaker: Text" transcripts."""

from collections.abc import Callable, Iterator
import os

import structlog

from transcript_trim.transcript.models import (
    ParseOutcome,
    ParseStatus,
    TranscriptEntry,
    TranscriptFormat,
)
from transcript_trim.utils.files import read_transcript_file

logger = structlog.get_logger(__name__)

# Longest prefix (exclusive) accepted as a speaker name in "Speaker - Text" lines
SPEAKER_LABEL_MAX_LENGTH = 30

VOICE_TAG_OPEN = "<v "
VOICE_TAG_CLOSE = "</v>"

EMPTY_INPUT_MESSAGE = "Empty input: the file does not contain any text."
NO_ENTRIES_MESSAGE = (
    "Warning: No transcript entries found. The file may not be in a supported "
    "format (WebVTT with <v Speaker>Text</v> tags, or 'Speaker: Text' lines)."
)


def detect_format(content: str) -> TranscriptFormat:
    """Classify the whole document by the presence of an open voice tag."""
    if VOICE_TAG_OPEN in content:
        return TranscriptFormat.VTT
    return TranscriptFormat.PLAIN_TEXT


def _clean_dialogue(text: str) -> str:
    return text.replace("\n", " ").strip()


def _extract_voice_tag_manually(line: str) -> TranscriptEntry | None:
    """Cut a <v Speaker>Text</v> span by hand when the scan rejects it."""
    open_index = line.find(VOICE_TAG_OPEN)
    if open_index == -1:
        return None
    speaker_start = open_index + len(VOICE_TAG_OPEN)
    speaker_end = line.find(">", speaker_start)
    if speaker_end == -1:
        return None
    dialogue_start = speaker_end + 1
    dialogue_end = line.find(VOICE_TAG_CLOSE, dialogue_start)
    if dialogue_end == -1:
        return None

    dialogue = _clean_dialogue(line[dialogue_start:dialogue_end])
    if not dialogue:
        return None
    return TranscriptEntry(speaker=line[speaker_start:speaker_end].strip(), dialogue=dialogue)


def iter_voice_tags(line: str) -> Iterator[tuple[str, str]]:
    """
    Yield raw (speaker, dialogue) spans of <v Speaker>Dialogue</v> tags.

    Matches what the pattern r"<v ([^>]+)>(.*?)</v>" would find, in a single
    forward pass: the speaker runs to the first ">" and must not be empty,
    the dialogue runs to the first "</v>" after it.
    """
    start = line.find(VOICE_TAG_OPEN)
    while start != -1:
        speaker_start = start + len(VOICE_TAG_OPEN)
        speaker_end = line.find(">", speaker_start)
        if speaker_end == -1:
            # No later open tag can find a ">" either
            return
        if speaker_end == speaker_start:
            start = line.find(VOICE_TAG_OPEN, start + 1)
            continue
        dialogue_end = line.find(VOICE_TAG_CLOSE, speaker_end + 1)
        if dialogue_end == -1:
            return
        yield line[speaker_start:speaker_end], line[speaker_end + 1 : dialogue_end]
        start = line.find(VOICE_TAG_OPEN, dialogue_end + len(VOICE_TAG_CLOSE))


def parse_vtt_line(line: str) -> list[TranscriptEntry]:
    """Extract every voice-tagged span on a single line.

    The manual fallback only runs when the scan found nothing and the
    line still carries both an open and a close tag.
    """
    if VOICE_TAG_CLOSE not in line:
        return []

    spans = list(iter_voice_tags(line))
    if not spans:
        if VOICE_TAG_OPEN not in line:
            return []
        entry = _extract_voice_tag_manually(line)
        if entry is not None:
            logger.debug("Recovered malformed voice tag", speaker=entry.speaker)
            return [entry]
        return []

    entries: list[TranscriptEntry] = []
    for speaker, dialogue in spans:
        dialogue = _clean_dialogue(dialogue)
        if dialogue:
            entries.append(TranscriptEntry(speaker=speaker.strip(), dialogue=dialogue))
    return entries


def parse_vtt_format(content: str) -> list[TranscriptEntry]:
    """Process VTT content line by line, ignoring cue ids and timings."""
    entries: list[TranscriptEntry] = []
    for line in content.split("\n"):
        entries.extend(parse_vtt_line(line))
    return entries


def _split_speaker_line(
    paragraph: str, max_speaker_length: int
) -> TranscriptEntry | None:
    speaker, colon, dialogue = paragraph.partition(":")
    if colon:
        speaker, dialogue = speaker.strip(), dialogue.strip()
        if speaker and dialogue:
            return TranscriptEntry(speaker=speaker, dialogue=dialogue)
        return None

    # "Speaker - Text": only trust short prefixes as names
    speaker, hyphen, dialogue = paragraph.partition("-")
    if not hyphen:
        return None
    speaker, dialogue = speaker.strip(), dialogue.strip()
    if speaker and len(speaker) < max_speaker_length and dialogue:
        return TranscriptEntry(speaker=speaker, dialogue=dialogue)
    return None


def parse_text_format(
    content: str, max_speaker_length: int = SPEAKER_LABEL_MAX_LENGTH
) -> list[TranscriptEntry]:
    """Process plain text with "Speaker: Text" paragraphs.

    Paragraphs are separated by blank lines when the document has any,
    otherwise every line is its own paragraph.
    """
    separator = "\n\n" if "\n\n" in content else "\n"
    entries: list[TranscriptEntry] = []
    for paragraph in content.split(separator):
        paragraph = paragraph.strip()
        if not paragraph:
            continue
        entry = _split_speaker_line(paragraph, max_speaker_length)
        if entry is not None:
            entries.append(entry)
    return entries


def _parse_vtt(content: str, max_speaker_length: int) -> list[TranscriptEntry]:
    return parse_vtt_format(content)


FORMAT_PARSERS: dict[TranscriptFormat, Callable[[str, int], list[TranscriptEntry]]] = {
    TranscriptFormat.VTT: _parse_vtt,
    TranscriptFormat.PLAIN_TEXT: parse_text_format,
}


def normalize_line_endings(content: str) -> str:
    """Normalize Windows (\\r\\n) and old Mac (\\r) line endings to \\n."""
    return content.replace("\r\n", "\n").replace("\r", "\n")


def parse(
    source: str | os.PathLike,
    filename: str | None = None,
    *,
    max_speaker_length: int = SPEAKER_LABEL_MAX_LENGTH,
) -> ParseOutcome:
    """
    Parse a transcript into speaker/dialogue entries.

    Args:
        source: Decoded transcript text, or a path to read it from
        filename: Optional name shown in the status message
        max_speaker_length: Prefix length limit for "Speaker - Text" lines

    Returns:
        ParseOutcome with the entries and a status message. Malformed lines
        are skipped; nothing here raises for bad content.
    """
    if isinstance(source, os.PathLike):
        if filename is None:
            filename = os.path.basename(os.fspath(source))
        content = read_transcript_file(source)
    else:
        content = source

    if not content.strip():
        logger.info("Empty transcript input", filename=filename)
        return ParseOutcome(entries=(), status=EMPTY_INPUT_MESSAGE, level=ParseStatus.EMPTY)

    content = normalize_line_endings(content)
    transcript_format = detect_format(content)
    entries = tuple(FORMAT_PARSERS[transcript_format](content, max_speaker_length))

    logger.info(
        "Transcript parsing completed",
        filename=filename,
        format=transcript_format.value,
        total_entries=len(entries),
    )

    if not entries:
        return ParseOutcome(
            entries=(),
            status=NO_ENTRIES_MESSAGE,
            level=ParseStatus.NO_ENTRIES,
            format=transcript_format,
        )

    if filename:
        status = f"Previewing file: {filename} - {len(entries)} entries found"
    else:
        status = f"{len(entries)} entries found"
    return ParseOutcome(
        entries=entries,
        status=status,
        level=ParseStatus.OK,
        format=transcript_format,
    )
