"""HTTP API for transcriptkit."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from transcriptkit import __version__
from transcriptkit.cefr import DictionaryCache, estimate_breakdown
from transcriptkit.config import AppConfig, load_config
from transcriptkit.core import NormalizationSettings, analyze_transcript, normalize_transcript
from transcriptkit.logging_utils import setup_logging
from transcriptkit.models import (
    AnalysisResponse,
    DifficultyEstimate,
    HealthResponse,
    NormalizationResult,
    TranscriptRequest,
)

logger = logging.getLogger(__name__)


def create_app(
    config: AppConfig | None = None,
    cache: DictionaryCache | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    The dictionary cache lives as long as the app; pass one in to share it
    or to point it at another data directory.
    """
    app = FastAPI(
        title="transcriptkit",
        version=__version__,
        description="Transcript sentence normalization and CEFR difficulty estimation.",
    )
    resolved_config = config or load_config()
    setup_logging(resolved_config.log_level)
    settings = NormalizationSettings.from_config(resolved_config)
    dictionaries = cache or DictionaryCache(resolved_config.cefr_data_dir)

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=resolved_config.env)

    @app.post("/v1/normalize", response_model=NormalizationResult, tags=["normalization"])
    def normalize(request: TranscriptRequest) -> NormalizationResult:
        result = normalize_transcript(request.segments, request.language, settings)
        logger.info(
            "Normalization for %r: reason=%s changed=%s",
            request.language,
            result.meta.reason,
            result.meta.changed_segments,
        )
        return result

    @app.post("/v1/difficulty", response_model=DifficultyEstimate, tags=["difficulty"])
    def difficulty(request: TranscriptRequest) -> DifficultyEstimate:
        estimate = estimate_breakdown(request.segments, request.language, cache=dictionaries)
        logger.info(
            "CEFR estimate for %r: %s (coverage=%.3f)",
            request.language,
            estimate.level,
            estimate.coverage,
        )
        return estimate

    @app.post("/v1/analyze", response_model=AnalysisResponse, tags=["analysis"])
    def analyze(request: TranscriptRequest) -> AnalysisResponse:
        return analyze_transcript(
            request.segments,
            request.language,
            settings=settings,
            cache=dictionaries,
        )

    return app


app = create_app()
