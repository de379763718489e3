"""Tests for file decoding, validation and output naming."""

import codecs
from pathlib import Path

import pytest

from transcript_trim.errors import (
    FilePermissionDeniedError,
    FileReadError,
    TranscriptFileError,
    TranscriptFileNotFoundError,
    UnsupportedEncodingError,
)
from transcript_trim.utils.files import (
    decode_transcript_bytes,
    read_transcript_file,
    sanitize_filename,
    suggested_output_filename,
    validate_file_metadata,
)


class TestDecodeTranscriptBytes:
    """Encoding fallback."""

    def test_utf8(self):
        assert decode_transcript_bytes("<v Zoë>Hi</v>".encode("utf-8")) == "<v Zoë>Hi</v>"

    def test_utf8_bom_is_stripped(self):
        data = codecs.BOM_UTF8 + "Alice: Hi".encode("utf-8")

        assert decode_transcript_bytes(data) == "Alice: Hi"

    def test_utf16_with_bom(self):
        assert decode_transcript_bytes("Alice: Hi".encode("utf-16")) == "Alice: Hi"

    def test_cp1252_fallback(self):
        data = "Renée: “quoted”".encode("cp1252")

        assert decode_transcript_bytes(data) == "Renée: “quoted”"

    def test_latin1_last_resort(self):
        # 0x81 is undefined in cp1252
        assert decode_transcript_bytes(b"A: \x81") == "A: \x81"

    def test_truncated_utf16_raises(self):
        with pytest.raises(UnsupportedEncodingError) as exc_info:
            decode_transcript_bytes(codecs.BOM_UTF16_LE + b"A")

        assert "utf-16" in str(exc_info.value)
        assert exc_info.value.recovery_suggestion


class TestReadTranscriptFile:
    """Reading paths and mapping OS errors."""

    def test_reads_file(self, sample_vtt_file: Path):
        assert read_transcript_file(sample_vtt_file).startswith("WEBVTT")

    def test_accepts_str_path(self, sample_vtt_file: Path):
        assert read_transcript_file(str(sample_vtt_file)).startswith("WEBVTT")

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(TranscriptFileNotFoundError, match="File not found"):
            read_transcript_file(tmp_path / "missing.vtt")

    def test_directory_is_read_error(self, tmp_path: Path):
        with pytest.raises(TranscriptFileError) as exc_info:
            read_transcript_file(tmp_path)

        assert isinstance(exc_info.value, (FileReadError, FilePermissionDeniedError))

    def test_permission_denied(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "locked.vtt"
        path.write_text("<v A>x</v>")

        def deny(self):
            raise PermissionError("denied")

        monkeypatch.setattr(Path, "read_bytes", deny)

        with pytest.raises(FilePermissionDeniedError, match="Permission denied"):
            read_transcript_file(path)


class TestValidateFileMetadata:
    def test_valid_files(self):
        assert validate_file_metadata("meeting.vtt", 100) == (True, "")
        assert validate_file_metadata("notes.TXT", 100) == (True, "")

    def test_missing_name(self):
        assert validate_file_metadata("", 100) == (False, "No file selected.")

    def test_bad_extension(self):
        is_valid, message = validate_file_metadata("slides.pdf", 100)

        assert not is_valid
        assert "Invalid file type" in message

    def test_empty_file_is_accepted(self):
        assert validate_file_metadata("meeting.vtt", 0) == (True, "")

    def test_too_large(self):
        is_valid, message = validate_file_metadata("meeting.vtt", 101 * 1024 * 1024)

        assert not is_valid
        assert "File too large" in message


class TestOutputFilename:
    def test_replaces_extension(self):
        assert suggested_output_filename("meeting.vtt") == "meeting.txt"

    def test_default_name(self):
        assert suggested_output_filename("") == "transcript.txt"
        assert suggested_output_filename(None) == "transcript.txt"

    def test_sanitized(self):
        assert suggested_output_filename("team sync: q3.vtt") == "team_sync_q3.txt"

    def test_sanitize_truncates_long_names(self):
        sanitized = sanitize_filename("a" * 100 + ".txt")

        assert sanitized == "a" * 60 + ".txt"
