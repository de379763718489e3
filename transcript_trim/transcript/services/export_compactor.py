"""Compact parsed entries into export text."""

from collections.abc import Iterable
from itertools import groupby
from operator import attrgetter

from transcript_trim.transcript.models import TranscriptEntry


def compact(entries: Iterable[TranscriptEntry]) -> str:
    """
    Format entries for export, labelling each speaker run once.

    Example:
        Alice: Hello there.
        How are you?

        Bob: I'm fine.
    """
    blocks: list[str] = []
    for speaker, run in groupby(entries, key=attrgetter("speaker")):
        dialogues = [entry.dialogue.strip() for entry in run]
        lines = [f"{speaker}: {dialogues[0]}", *dialogues[1:]]
        blocks.append("".join(f"{line}\n" for line in lines))
    # Blank line between speaker turns
    return "\n".join(blocks)


prepare_for_export = compact
