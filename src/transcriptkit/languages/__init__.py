"""Language packs and language-code resolution."""

from transcriptkit.languages.base import BaseLanguagePack
from transcriptkit.languages.registry import (
    base_language,
    resolve_language_pack,
    supported_languages,
)

__all__ = ["BaseLanguagePack", "base_language", "resolve_language_pack", "supported_languages"]
