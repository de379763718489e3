"""File handling utilities."""

from __future__ import annotations

import codecs
import os
from pathlib import Path
import re

import structlog

from transcript_trim.config import settings
from transcript_trim.errors import (
    FilePermissionDeniedError,
    FileReadError,
    TranscriptFileNotFoundError,
    UnsupportedEncodingError,
)

logger = structlog.get_logger(__name__)

# Tried in order; latin-1 maps every byte so it is the last resort
FALLBACK_ENCODINGS = ("utf-8-sig", "cp1252", "latin-1")
DEFAULT_OUTPUT_FILENAME = "transcript.txt"


def decode_transcript_bytes(data: bytes) -> str:
    """Decode file bytes, falling back through common caption encodings."""

    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        candidates: tuple[str, ...] = ("utf-16",)
    else:
        candidates = FALLBACK_ENCODINGS

    for encoding in candidates:
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError:
            continue
        if encoding != candidates[0]:
            logger.info("Decoded transcript with fallback encoding", encoding=encoding)
        return text

    raise UnsupportedEncodingError(f"could not decode content as {', '.join(candidates)}")


def read_transcript_file(path: str | os.PathLike) -> str:
    """Read and decode a transcript file."""

    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError as err:
        raise TranscriptFileNotFoundError(str(path)) from err
    except PermissionError as err:
        logger.error("Transcript file permission denied", path=str(path))
        raise FilePermissionDeniedError(str(path)) from err
    except OSError as err:
        logger.error("Transcript file read failed", path=str(path), error=str(err))
        raise FileReadError(f"{path}: {err}") from err

    return decode_transcript_bytes(data)


def validate_file_metadata(filename: str, size_bytes: int) -> tuple[bool, str]:
    """Validate filename and size against allowed constraints."""

    if not filename:
        return False, "No file selected."

    extension = Path(filename).suffix.lower()
    if extension not in settings.allowed_extensions:
        allowed = ", ".join(settings.allowed_extensions)
        return False, f"Invalid file type. Supported types: {allowed}."

    if size_bytes > settings.max_file_size_bytes:
        return False, f"File too large. Maximum size is {settings.max_file_size_mb}MB."

    return True, ""


def sanitize_filename(filename: str) -> str:
    """Remove invalid characters from filenames."""

    sanitized = re.sub(r'[<>:"/\\|?*]', "", filename)
    sanitized = sanitized.replace(" ", "_")
    if len(sanitized) > 64:
        name, ext = sanitized.rsplit(".", 1) if "." in sanitized else (sanitized, "")
        name = name[:60]
        sanitized = f"{name}.{ext}" if ext else name
    return sanitized


def suggested_output_filename(input_filename: str | None) -> str:
    """Suggest a .txt export name based on the input filename."""

    if not input_filename:
        return DEFAULT_OUTPUT_FILENAME
    stem = Path(input_filename).stem
    if not stem:
        return DEFAULT_OUTPUT_FILENAME
    return sanitize_filename(f"{stem}.txt")
