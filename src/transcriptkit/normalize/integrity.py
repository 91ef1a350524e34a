"""Word-stream integrity check between original and normalized segments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from transcriptkit.models import TranscriptSegment
from transcriptkit.text import word_tokens


def word_stream(texts: Iterable[str]) -> list[str]:
    """Lower-cased word tokens of all texts, in order.

    Each text is tokenized on its own so that adjacent segments never fuse
    into a single token.
    """
    return [token.lower() for text in texts for token in word_tokens(text)]


def same_word_stream(original: Sequence[str], normalized: Sequence[str]) -> bool:
    """Compare two streams produced by ``word_stream`` token by token."""
    return list(original) == list(normalized)


def verify_word_integrity(
    original: Sequence[TranscriptSegment],
    normalized: Sequence[TranscriptSegment],
) -> bool:
    """True when normalization only touched case, punctuation and whitespace."""
    return same_word_stream(
        word_stream(segment.text for segment in original),
        word_stream(segment.text for segment in normalized),
    )
