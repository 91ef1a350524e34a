"""JSON serializers for normalization, difficulty and analysis results."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


def to_json(response: BaseModel) -> str:
    """Serialize a ``NormalizationResult``, ``DifficultyEstimate`` or ``AnalysisResponse``."""
    return response.model_dump_json(indent=2)


def write_json(response: BaseModel, output_path: str | Path) -> None:
    """Write a result as indented JSON, creating parent directories as needed."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(response) + "\n", encoding="utf-8")
