"""Segment boundary classification."""

from __future__ import annotations

import re

from transcriptkit.languages.base import BaseLanguagePack
from transcriptkit.models import TranscriptSegment
from transcriptkit.text import first_word

DEFAULT_PAUSE_THRESHOLD_MS = 1200

_TERMINAL_PUNCT_RE = re.compile(r"[.!?][\"')\]]*$")


def ends_with_terminal_punctuation(text: str) -> bool:
    """True for text ending in ``.``, ``!`` or ``?``, optionally followed by closers."""
    return _TERMINAL_PUNCT_RE.search(text) is not None


def pause_ms(current: TranscriptSegment, following: TranscriptSegment) -> int:
    """Silence between two segments; overlapping segments give 0."""
    return max(0, following.offset - current.end)


def ends_sentence(
    text: str,
    current: TranscriptSegment,
    following: TranscriptSegment | None,
    language_pack: BaseLanguagePack,
    *,
    pause_threshold_ms: int = DEFAULT_PAUSE_THRESHOLD_MS,
) -> bool:
    """Decide whether ``current`` should be closed with a new terminal period.

    ``text`` is the whitespace-collapsed text of ``current``. Returns False
    when the text is empty or already terminated, since no period is needed
    in either case.
    """
    if not text:
        return False
    if ends_with_terminal_punctuation(text):
        return False
    if following is None or not following.text:
        return True
    if pause_ms(current, following) >= pause_threshold_ms:
        return True

    next_word = first_word(following.text)
    if next_word is None:
        return True
    return not language_pack.continues_sentence(next_word)
