"""Language pack base types."""

from __future__ import annotations


class BaseLanguagePack:
    """Language-specific data consulted by the sentence boundary rules.

    A pack carries no logic of its own beyond membership tests, so adding a
    language means adding a pack, never touching the rules.
    """

    code: str
    name: str
    continuation_words: frozenset[str]

    def continues_sentence(self, word: str | None) -> bool:
        """Return whether ``word`` opening a segment carries the sentence on."""
        if not word:
            return False
        return word.lower() in self.continuation_words
