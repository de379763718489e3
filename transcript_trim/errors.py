"""Errors raised while getting transcript files into memory.

Parsing and token analysis never raise for bad content; only the file-access
layer does.
"""

from __future__ import annotations


class TranscriptTrimError(Exception):
    """Base error for TranscriptTrim."""

    recovery_suggestion = "Please try again."


class TranscriptFileError(TranscriptTrimError):
    """Raised when a transcript file cannot be turned into text."""

    prefix = "Error reading file"
    recovery_suggestion = (
        "Try selecting the file again, or check if it's being used by another application."
    )

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"{self.prefix}: {details}")


class FilePermissionDeniedError(TranscriptFileError):
    """Raised when the process is not allowed to read the file."""

    prefix = "Permission denied"
    recovery_suggestion = (
        "Try moving the file to your Documents or Downloads folder, or select a different file."
    )


class TranscriptFileNotFoundError(TranscriptFileError):
    """Raised when the transcript path does not exist."""

    prefix = "File not found"
    recovery_suggestion = "Check the path and select the file again."


class FileReadError(TranscriptFileError):
    """Raised for any other I/O failure while reading."""


class UnsupportedEncodingError(TranscriptFileError):
    """Raised when none of the supported text encodings can decode the file."""

    prefix = "Invalid file format"
    recovery_suggestion = (
        "Please ensure the file contains either VTT format with <v> tags "
        "or text with Speaker: Dialogue format, saved as UTF-8."
    )
