"""Spanish language pack."""

from __future__ import annotations

from transcriptkit.languages.base import BaseLanguagePack


class SpanishLanguagePack(BaseLanguagePack):
    """Spanish conjunctions that keep a sentence open."""

    code = "es"
    name = "Spanish"
    continuation_words = frozenset(
        {
            "y",
            "e",
            "o",
            "u",
            "pero",
            "porque",
            "que",
            "cuando",
            "si",
            "aunque",
            "mientras",
        }
    )


SPANISH_PACK = SpanishLanguagePack()
