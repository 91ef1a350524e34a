"""Unicode-aware word tokenization.

Two token grammars live here:

* ``word_tokens`` follows the full word grammar used by the integrity check:
  runs of letters, combining marks and numbers, optionally joined across a
  single apostrophe (``'`` or ``’``) or hyphen to another such run, so
  ``don't``, ``co-op`` and ``mother-in-law`` are single tokens.
* ``letter_tokens`` is the coarser letters-only rule used for vocabulary
  statistics, where punctuation inside words simply splits them.
"""

from __future__ import annotations

import re
import unicodedata

_SPACES_RE = re.compile(r"\s+")
_LETTER_RE = re.compile(r"[^\W\d_]")
_LETTERS_RE = re.compile(r"[^\W\d_]+")


def _combining_mark_class() -> str:
    # `re` has no \p{M}; build the class from the Unicode database once.
    spans: list[tuple[int, int]] = []
    for block_start, block_end in ((0x0300, 0x20000), (0xE0100, 0xE01F0)):
        run_start: int | None = None
        for codepoint in range(block_start, block_end):
            if unicodedata.category(chr(codepoint)).startswith("M"):
                if run_start is None:
                    run_start = codepoint
            elif run_start is not None:
                spans.append((run_start, codepoint - 1))
                run_start = None
        if run_start is not None:
            spans.append((run_start, block_end - 1))
    return "".join(
        chr(start) if start == end else f"{chr(start)}-{chr(end)}" for start, end in spans
    )


_WORD_UNIT = rf"(?:[^\W_]|[{_combining_mark_class()}])"
WORD_RE = re.compile(rf"{_WORD_UNIT}+(?:['’\-]{_WORD_UNIT}+)*")


def collapse_whitespace(text: str | None) -> str:
    """Collapse whitespace runs to single spaces and trim both ends."""
    return _SPACES_RE.sub(" ", text or "").strip()


def word_tokens(text: str | None) -> list[str]:
    """Return word tokens in order of appearance, original casing preserved."""
    if not text:
        return []
    return WORD_RE.findall(text)


def letter_tokens(text: str | None) -> list[str]:
    """Return maximal runs of letters, ignoring digits, marks and punctuation."""
    if not text:
        return []
    return _LETTERS_RE.findall(text)


def first_word(text: str | None) -> str | None:
    """Return the first word token lower-cased, or ``None`` when there is none."""
    if not text:
        return None
    match = WORD_RE.search(text)
    if match is None:
        return None
    return match.group(0).lower()


def first_letter_index(text: str) -> int:
    """Index of the first letter in ``text``, or ``-1``.

    Numerics such as ``½`` or ``Ⅻ`` also match ``[^\\W\\d_]``; they are skipped.
    """
    for match in _LETTER_RE.finditer(text):
        if unicodedata.category(match.group(0)).startswith("L"):
            return match.start()
    return -1
