"""Per-language word -> CEFR level dictionaries.

Dictionaries are static JSON objects stored as ``<data_dir>/<lang>.json``.
A ``DictionaryCache`` reads each language at most once and keeps the
outcome for its whole lifetime, including failures: a language whose file
is missing or malformed stays unsupported until a new cache is built
(normally a process restart). There is no eviction and no lock; concurrent
first loads of one language produce the same value, so the last write wins
harmlessly.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import get_args

from transcriptkit.models import CefrLevel, DictionaryStatus

logger = logging.getLogger(__name__)

CEFR_LEVELS: tuple[CefrLevel, ...] = get_args(CefrLevel)

_VALID_LEVELS = frozenset(CEFR_LEVELS)
_LANGUAGE_FILE_RE = re.compile(r"[a-z]{2,3}")


@dataclass(frozen=True)
class LoadedDictionary:
    """Outcome of loading one language's dictionary."""

    language: str
    status: DictionaryStatus
    words: Mapping[str, CefrLevel] = field(default_factory=dict)
    path: Path | None = None

    @property
    def available(self) -> bool:
        return self.status == "loaded"


def default_data_dir() -> Path:
    return Path(__file__).resolve().parents[1] / "data" / "cefr"


class DictionaryCache:
    """Read-through, never-evicted cache of CEFR dictionaries."""

    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else default_data_dir()
        self._entries: dict[str, LoadedDictionary] = {}

    def path_for(self, language: str) -> Path:
        return self.data_dir / f"{language}.json"

    def get(self, language: str) -> LoadedDictionary:
        """Return the cached dictionary for a base language code, loading it once.

        Codes that cannot name a dictionary file are answered as missing
        without being cached, so arbitrary client input cannot grow the cache.
        """
        if not _LANGUAGE_FILE_RE.fullmatch(language):
            logger.debug("No CEFR dictionary for invalid language code %r", language)
            return LoadedDictionary(language=language, status="missing")

        entry = self._entries.get(language)
        if entry is None:
            entry = self._load(language)
            self._entries[language] = entry
        return entry

    def status(self, language: str) -> DictionaryStatus:
        return self.get(language).status

    def cached_languages(self) -> frozenset[str]:
        return frozenset(self._entries)

    def _load(self, language: str) -> LoadedDictionary:
        path = self.path_for(language)
        try:
            with path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            logger.info("CEFR dictionary missing for %r at %s", language, path)
            return LoadedDictionary(language=language, status="missing", path=path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("CEFR dictionary for %r is malformed (%s): %s", language, path, exc)
            return LoadedDictionary(language=language, status="malformed", path=path)

        if not isinstance(payload, dict):
            logger.warning(
                "CEFR dictionary for %r must be a JSON object, got %s",
                language,
                type(payload).__name__,
            )
            return LoadedDictionary(language=language, status="malformed", path=path)

        words = _coerce_words(payload)
        logger.debug("Loaded %d CEFR entries for %r from %s", len(words), language, path)
        return LoadedDictionary(language=language, status="loaded", words=words, path=path)


def _coerce_words(payload: dict[object, object]) -> dict[str, CefrLevel]:
    words: dict[str, CefrLevel] = {}
    for raw_word, raw_level in payload.items():
        if not isinstance(raw_word, str) or raw_level not in _VALID_LEVELS:
            continue
        words.setdefault(raw_word.lower(), raw_level)  # type: ignore[arg-type]
    return words


_DEFAULT_CACHE: DictionaryCache | None = None


def default_cache() -> DictionaryCache:
    """Process-wide cache over the packaged dictionaries, built on first use."""
    global _DEFAULT_CACHE
    if _DEFAULT_CACHE is None:
        _DEFAULT_CACHE = DictionaryCache()
    return _DEFAULT_CACHE
