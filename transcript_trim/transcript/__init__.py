"""Transcript parsing, export compaction and token analysis."""
