"""Core transcript pipelines."""

from transcriptkit.core.pipeline import (
    ENGINE_VERSION,
    NormalizationSettings,
    analyze_transcript,
    normalize_transcript,
)

__all__ = ["ENGINE_VERSION", "NormalizationSettings", "analyze_transcript", "normalize_transcript"]
