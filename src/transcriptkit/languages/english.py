"""English language pack."""

from __future__ import annotations

from transcriptkit.languages.base import BaseLanguagePack


class EnglishLanguagePack(BaseLanguagePack):
    """English conjunctions and relative words that keep a sentence open."""

    code = "en"
    name = "English"
    continuation_words = frozenset(
        {
            "and",
            "but",
            "or",
            "so",
            "because",
            "that",
            "which",
            "who",
            "while",
            "when",
            "if",
            "then",
        }
    )


ENGLISH_PACK = EnglishLanguagePack()
