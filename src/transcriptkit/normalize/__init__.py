"""Rule-based sentence normalization of transcript segments."""

from transcriptkit.normalize.boundary import (
    DEFAULT_PAUSE_THRESHOLD_MS,
    ends_sentence,
    ends_with_terminal_punctuation,
)
from transcriptkit.normalize.integrity import same_word_stream, verify_word_integrity
from transcriptkit.normalize.segment import normalize_segment_text, normalize_segments

__all__ = [
    "DEFAULT_PAUSE_THRESHOLD_MS",
    "ends_sentence",
    "ends_with_terminal_punctuation",
    "normalize_segment_text",
    "normalize_segments",
    "same_word_stream",
    "verify_word_integrity",
]
