"""Transcript readers."""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from transcriptkit.models import TranscriptSegment
from transcriptkit.text import collapse_whitespace

_SEGMENTS_ADAPTER = TypeAdapter(list[TranscriptSegment])


class TranscriptFileError(ValueError):
    """Raised when a transcript file cannot be read or does not hold segments."""


def read_segments(path: str | Path, *, captions: bool = False) -> list[TranscriptSegment]:
    """Read segments from a JSON file.

    The file holds either a list of segments or an object with a
    ``segments`` list. With ``captions=True`` the items are raw caption
    entries timed in seconds and go through ``segments_from_captions``.
    """
    source = Path(path)
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise TranscriptFileError(f"cannot read transcript {source}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise TranscriptFileError(f"transcript {source} is not valid JSON: {exc}") from exc

    if isinstance(payload, dict):
        payload = payload.get("segments")
    if not isinstance(payload, list):
        raise TranscriptFileError(f"transcript {source} must contain a list of segments")

    if captions:
        return segments_from_captions(payload)
    try:
        return _SEGMENTS_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise TranscriptFileError(f"transcript {source} has invalid segments: {exc}") from exc


def segments_from_captions(items: Iterable[Any]) -> list[TranscriptSegment]:
    """Convert raw caption items (offset/duration in seconds) into segments.

    Items with empty text or non-numeric timings are dropped. Timings are
    rounded to whole milliseconds and clamped at zero.
    """
    segments: list[TranscriptSegment] = []
    for item in items:
        if not isinstance(item, Mapping):
            continue
        text = collapse_whitespace(str(item.get("text") or ""))
        if not text:
            continue
        offset_sec = _finite_float(item.get("offset"))
        duration_sec = _finite_float(item.get("duration"))
        if offset_sec is None or duration_sec is None:
            continue
        segments.append(
            TranscriptSegment(
                text=text,
                offset=_to_ms(offset_sec),
                duration=_to_ms(duration_sec),
            )
        )
    return segments


def _finite_float(value: object) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _to_ms(seconds: float) -> int:
    # Half-up, unlike round().
    return max(0, math.floor(seconds * 1000 + 0.5))
