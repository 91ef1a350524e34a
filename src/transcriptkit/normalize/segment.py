"""Per-segment text rewriting and sentence-start threading."""

from __future__ import annotations

from collections.abc import Sequence

from transcriptkit.languages.base import BaseLanguagePack
from transcriptkit.models import TranscriptSegment
from transcriptkit.normalize.boundary import (
    DEFAULT_PAUSE_THRESHOLD_MS,
    ends_sentence,
    ends_with_terminal_punctuation,
)
from transcriptkit.text import collapse_whitespace
from transcriptkit.text.tokenizer import first_letter_index

_TRAILING_NOISE = ".,;:!? "


def capitalize_first_letter(text: str) -> str:
    """Upper-case the first letter, leaving anything before it untouched."""
    index = first_letter_index(text)
    if index < 0:
        return text
    return f"{text[:index]}{text[index].upper()}{text[index + 1 :]}"


def normalize_segment_text(text: str, *, capitalize_start: bool, terminate: bool) -> str:
    """Rewrite one segment's text.

    Text that already ends a sentence keeps its own punctuation. Otherwise
    trailing ``. , ; : ! ?`` noise is stripped and a single period is added
    when ``terminate`` is set.
    """
    out = collapse_whitespace(text)
    if not out:
        return out

    if capitalize_start:
        out = capitalize_first_letter(out)

    if ends_with_terminal_punctuation(out):
        return out

    out = out.rstrip(_TRAILING_NOISE)
    if terminate:
        out = f"{out}."
    return out


def normalize_segments(
    segments: Sequence[TranscriptSegment],
    language_pack: BaseLanguagePack,
    *,
    pause_threshold_ms: int = DEFAULT_PAUSE_THRESHOLD_MS,
) -> list[TranscriptSegment]:
    """Normalize every segment in order, returning new segment objects."""
    output: list[TranscriptSegment] = []
    sentence_start = True

    for index, segment in enumerate(segments):
        following = segments[index + 1] if index + 1 < len(segments) else None
        text = collapse_whitespace(segment.text)
        if not text:
            output.append(segment.model_copy(update={"text": text}))
            continue

        terminate = ends_sentence(
            text,
            segment,
            following,
            language_pack,
            pause_threshold_ms=pause_threshold_ms,
        )
        normalized = normalize_segment_text(
            text,
            capitalize_start=sentence_start,
            terminate=terminate,
        )
        output.append(segment.model_copy(update={"text": normalized}))
        sentence_start = terminate or ends_with_terminal_punctuation(normalized)

    return output
