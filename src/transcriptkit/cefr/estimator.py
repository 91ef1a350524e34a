"""Transcript difficulty estimation against the CEFR scale.

The estimate is the lowest level whose cumulative vocabulary reaches 95%
of all tokens, which approximates the vocabulary a reader needs to follow
the transcript comfortably. Transcripts where under 20% of tokens are in
the dictionary are not scored at all.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from transcriptkit.cefr.dictionary import CEFR_LEVELS, DictionaryCache, default_cache
from transcriptkit.languages import base_language
from transcriptkit.models import CefrEstimate, DifficultyEstimate, TranscriptSegment
from transcriptkit.text import letter_tokens

INDETERMINATE = "indeterminate"
MIN_KNOWN_COVERAGE = 0.20
TARGET_COVERAGE = 0.95


def estimate_breakdown(
    segments: Sequence[TranscriptSegment],
    language: str | None,
    *,
    cache: DictionaryCache | None = None,
) -> DifficultyEstimate:
    """Estimate the CEFR level and report the token statistics behind it."""
    lang = base_language(language)
    dictionary = (cache or default_cache()).get(lang)
    if not dictionary.available:
        return DifficultyEstimate(
            level=INDETERMINATE,
            language=lang,
            dictionary_status=dictionary.status,
        )

    text = " ".join(segment.text for segment in segments).lower()
    tokens = letter_tokens(text)
    total = len(tokens)

    counts: Counter[str] = Counter()
    unknown = 0
    for token in tokens:
        level = dictionary.words.get(token)
        if level is None:
            unknown += 1
        else:
            counts[level] += 1

    coverage = (total - unknown) / total if total else 0.0
    return DifficultyEstimate(
        level=_pick_level(counts, total, coverage),
        language=lang,
        dictionary_status=dictionary.status,
        total_tokens=total,
        unknown_tokens=unknown,
        coverage=coverage,
        level_counts={level: counts[level] for level in CEFR_LEVELS},
    )


def estimate_cefr_level(
    segments: Sequence[TranscriptSegment],
    language: str | None,
    *,
    cache: DictionaryCache | None = None,
) -> CefrEstimate:
    """Return a CEFR level label, or ``"indeterminate"``."""
    return estimate_breakdown(segments, language, cache=cache).level


def _pick_level(counts: Counter[str], total: int, coverage: float) -> CefrEstimate:
    if total == 0 or coverage < MIN_KNOWN_COVERAGE:
        return INDETERMINATE

    cumulative = 0
    for level in CEFR_LEVELS:
        cumulative += counts[level]
        if cumulative / total >= TARGET_COVERAGE:
            return level
    return "C2"
