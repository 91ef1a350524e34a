"""I/O utilities."""

from transcriptkit.io.export import to_json, write_json
from transcriptkit.io.transcript import (
    TranscriptFileError,
    read_segments,
    segments_from_captions,
)

__all__ = [
    "TranscriptFileError",
    "read_segments",
    "segments_from_captions",
    "to_json",
    "write_json",
]
