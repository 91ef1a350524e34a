"""Deterministic transcript normalization pipeline.

``normalize_transcript`` is a pure function: it never mutates its input and
never raises for degenerate transcripts. Every outcome, including the ones
where nothing is rewritten, is explained by ``meta.reason``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from transcriptkit.cefr import DictionaryCache, estimate_breakdown
from transcriptkit.config import AppConfig
from transcriptkit.languages import base_language, resolve_language_pack
from transcriptkit.models import (
    AnalysisResponse,
    NormalizationMeta,
    NormalizationReason,
    NormalizationResult,
    TranscriptSegment,
)
from transcriptkit.normalize import (
    DEFAULT_PAUSE_THRESHOLD_MS,
    normalize_segments,
    verify_word_integrity,
)

ENGINE_VERSION = "deterministic-v1"


@dataclass(frozen=True)
class NormalizationSettings:
    """Switches that control the normalization pipeline."""

    enabled: bool = True
    pause_threshold_ms: int = DEFAULT_PAUSE_THRESHOLD_MS
    languages: frozenset[str] = frozenset({"en", "es"})

    @classmethod
    def from_config(cls, config: AppConfig) -> NormalizationSettings:
        return cls(
            enabled=config.normalization_enabled,
            pause_threshold_ms=config.normalization_pause_ms,
            languages=config.normalization_langs,
        )


def normalize_transcript(
    segments: Sequence[TranscriptSegment],
    language: str | None,
    settings: NormalizationSettings | None = None,
) -> NormalizationResult:
    """Re-segment raw caption text into sentences without touching its words."""
    resolved = settings or NormalizationSettings()
    original = list(segments)
    lang = base_language(language)

    if not resolved.enabled:
        return _unchanged(original, "disabled", lang)

    language_pack = resolve_language_pack(lang)
    if not lang or lang not in resolved.languages or language_pack is None:
        return _unchanged(original, "unsupported_language", lang)

    candidate = normalize_segments(
        original,
        language_pack,
        pause_threshold_ms=resolved.pause_threshold_ms,
    )
    if not verify_word_integrity(original, candidate):
        return _unchanged(original, "word_integrity_check_failed", lang)

    changed = sum(1 for before, after in zip(original, candidate) if before.text != after.text)
    if changed == 0:
        return _unchanged(original, "no_changes", lang, changed_segments=0)

    return NormalizationResult(
        segments=candidate,
        meta=NormalizationMeta(
            applied=True,
            reason="ok",
            engine=ENGINE_VERSION,
            language=lang,
            changed_segments=changed,
        ),
    )


def analyze_transcript(
    segments: Sequence[TranscriptSegment],
    language: str | None,
    *,
    settings: NormalizationSettings | None = None,
    cache: DictionaryCache | None = None,
) -> AnalysisResponse:
    """Normalize a transcript, then estimate its level on the resulting text."""
    normalization = normalize_transcript(segments, language, settings)
    difficulty = estimate_breakdown(normalization.segments, language, cache=cache)
    return AnalysisResponse(normalization=normalization, difficulty=difficulty)


def _unchanged(
    segments: list[TranscriptSegment],
    reason: NormalizationReason,
    language: str,
    *,
    changed_segments: int | None = None,
) -> NormalizationResult:
    return NormalizationResult(
        segments=segments,
        meta=NormalizationMeta(
            applied=False,
            reason=reason,
            engine=ENGINE_VERSION,
            language=language,
            changed_segments=changed_segments,
        ),
    )
