"""Language pack registry and resolution."""

from __future__ import annotations

from transcriptkit.languages.base import BaseLanguagePack
from transcriptkit.languages.english import ENGLISH_PACK
from transcriptkit.languages.spanish import SPANISH_PACK

_LANGUAGE_PACKS: dict[str, BaseLanguagePack] = {
    "en": ENGLISH_PACK,
    "es": SPANISH_PACK,
}


def base_language(language_code: str | None) -> str:
    """Strip any region suffix: ``"en-US"`` -> ``"en"``, ``"ES_mx"`` -> ``"es"``."""
    code = (language_code or "").strip().casefold()
    return code.replace("_", "-").split("-", 1)[0]


def resolve_language_pack(language_code: str | None) -> BaseLanguagePack | None:
    """Resolve a language code to its pack.

    Returns ``None`` when no pack exists; callers treat that as an
    unsupported language rather than falling back to another pack.
    """
    return _LANGUAGE_PACKS.get(base_language(language_code))


def supported_languages() -> frozenset[str]:
    """Base codes that have a language pack."""
    return frozenset(_LANGUAGE_PACKS)
