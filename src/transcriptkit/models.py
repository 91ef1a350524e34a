"""Shared data models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

CefrLevel = Literal["A1", "A2", "B1", "B2", "C1", "C2"]
CefrEstimate = Literal["A1", "A2", "B1", "B2", "C1", "C2", "indeterminate"]
NormalizationReason = Literal[
    "disabled",
    "unsupported_language",
    "word_integrity_check_failed",
    "no_changes",
    "ok",
]
DictionaryStatus = Literal["loaded", "missing", "malformed"]


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class TranscriptSegment(BaseModel):
    """One timed chunk of transcript text.

    Offsets and durations are integer milliseconds. Fields beyond the three
    declared ones (ids, speaker labels) are kept and passed through.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    text: str = ""
    offset: int = Field(default=0, ge=0)
    duration: int = Field(default=0, ge=0)

    @property
    def end(self) -> int:
        return self.offset + self.duration


class NormalizationMeta(BaseModel):
    """Explains what normalization did and why."""

    applied: bool
    reason: NormalizationReason
    engine: str
    language: str
    changed_segments: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _applied_matches_reason(self) -> NormalizationMeta:
        if self.applied != (self.reason == "ok"):
            raise ValueError("applied must be true exactly when reason is 'ok'")
        return self


class NormalizationResult(BaseModel):
    """Normalized (or untouched) segments plus metadata."""

    segments: list[TranscriptSegment]
    meta: NormalizationMeta


class DifficultyEstimate(BaseModel):
    """CEFR estimate with the vocabulary statistics it was derived from."""

    level: CefrEstimate
    language: str
    dictionary_status: DictionaryStatus
    total_tokens: int = Field(default=0, ge=0)
    unknown_tokens: int = Field(default=0, ge=0)
    coverage: float = Field(default=0.0, ge=0.0, le=1.0)
    level_counts: dict[CefrLevel, int] = Field(default_factory=dict)


class TranscriptRequest(BaseModel):
    """Transcript payload accepted by the normalize/difficulty/analyze endpoints."""

    segments: list[TranscriptSegment]
    language: str = Field(default="en", min_length=1, max_length=35)


class AnalysisResponse(BaseModel):
    """Combined normalization and difficulty output for one transcript."""

    normalization: NormalizationResult
    difficulty: DifficultyEstimate
