"""Text primitives shared by the normalization and difficulty pipelines."""

from transcriptkit.text.tokenizer import (
    collapse_whitespace,
    first_word,
    letter_tokens,
    word_tokens,
)

__all__ = ["collapse_whitespace", "first_word", "letter_tokens", "word_tokens"]
