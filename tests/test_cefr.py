import json
from pathlib import Path

from transcriptkit.cefr import (
    CEFR_LEVELS,
    INDETERMINATE,
    DictionaryCache,
    estimate_breakdown,
    estimate_cefr_level,
)
from transcriptkit.models import TranscriptSegment


def _write_dictionary(directory: Path, language: str, words: dict[str, str]) -> None:
    (directory / f"{language}.json").write_text(json.dumps(words), encoding="utf-8")


def _transcript(*texts: str) -> list[TranscriptSegment]:
    return [TranscriptSegment(text=text) for text in texts]


def _cache(tmp_path: Path) -> DictionaryCache:
    _write_dictionary(
        tmp_path,
        "en",
        {"cat": "A1", "dog": "A2", "bird": "B1", "whale": "B2", "lynx": "C1", "okapi": "C2"},
    )
    return DictionaryCache(tmp_path)


def test_levels_are_ordered() -> None:
    assert CEFR_LEVELS == ("A1", "A2", "B1", "B2", "C1", "C2")


def test_mostly_known_easy_vocabulary_is_a1(tmp_path: Path) -> None:
    segments = _transcript("cat " * 12, "Cat " * 12 + "zzz")

    estimate = estimate_breakdown(segments, "en", cache=_cache(tmp_path))

    assert estimate.level == "A1"
    assert estimate.total_tokens == 25
    assert estimate.unknown_tokens == 1
    assert estimate.coverage == 0.96
    assert estimate.level_counts["A1"] == 24
    assert estimate.dictionary_status == "loaded"


def test_insufficient_coverage_is_indeterminate(tmp_path: Path) -> None:
    segments = _transcript("okapi cat dog " + "zzz " * 17)

    assert estimate_cefr_level(segments, "en", cache=_cache(tmp_path)) == INDETERMINATE


def test_coverage_gate_is_inclusive_and_c2_is_the_ceiling(tmp_path: Path) -> None:
    segments = _transcript("cat qqq rrr sss ttt")

    estimate = estimate_breakdown(segments, "en", cache=_cache(tmp_path))

    assert estimate.coverage == 0.2
    assert estimate.level == "C2"


def test_cumulative_walk_picks_lowest_sufficient_level(tmp_path: Path) -> None:
    segments = _transcript("cat " * 10 + "bird " * 10)

    assert estimate_cefr_level(segments, "en", cache=_cache(tmp_path)) == "B1"


def test_cumulative_threshold_is_inclusive(tmp_path: Path) -> None:
    segments = _transcript("cat " * 19 + "lynx")

    assert estimate_cefr_level(segments, "en", cache=_cache(tmp_path)) == "A1"


def test_easier_vocabulary_never_raises_level(tmp_path: Path) -> None:
    cache = _cache(tmp_path)
    base = _transcript("cat dog bird whale lynx " * 4)
    order = {level: index for index, level in enumerate(CEFR_LEVELS)}

    before = estimate_cefr_level(base, "en", cache=cache)
    after = estimate_cefr_level([*base, *_transcript("cat dog " * 30)], "en", cache=cache)

    assert before != INDETERMINATE
    assert after != INDETERMINATE
    assert order[after] <= order[before]


def test_empty_transcript_is_indeterminate(tmp_path: Path) -> None:
    estimate = estimate_breakdown(_transcript("", "  ...  ", "123"), "en", cache=_cache(tmp_path))

    assert estimate.level == INDETERMINATE
    assert estimate.total_tokens == 0
    assert estimate.dictionary_status == "loaded"


def test_tokens_are_lowercased_letter_runs(tmp_path: Path) -> None:
    segments = _transcript("CAT, cat's dog-dog")

    estimate = estimate_breakdown(segments, "en", cache=_cache(tmp_path))

    assert estimate.total_tokens == 5
    assert estimate.unknown_tokens == 1
    assert estimate.level_counts == {"A1": 2, "A2": 2, "B1": 0, "B2": 0, "C1": 0, "C2": 0}


def test_missing_dictionary_is_cached_permanently(tmp_path: Path) -> None:
    cache = DictionaryCache(tmp_path)
    segments = _transcript("cat cat cat")

    assert estimate_cefr_level(segments, "fr", cache=cache) == INDETERMINATE
    assert cache.status("fr") == "missing"

    _write_dictionary(tmp_path, "fr", {"cat": "A1"})

    estimate = estimate_breakdown(segments, "fr-FR", cache=cache)
    assert estimate.level == INDETERMINATE
    assert estimate.dictionary_status == "missing"
    assert estimate_cefr_level(segments, "fr", cache=DictionaryCache(tmp_path)) == "A1"


def test_malformed_dictionary_is_reported_separately(tmp_path: Path) -> None:
    (tmp_path / "de.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "it.json").write_text('["cat"]', encoding="utf-8")
    cache = DictionaryCache(tmp_path)

    assert estimate_breakdown(_transcript("cat"), "de", cache=cache).dictionary_status == (
        "malformed"
    )
    assert cache.status("it") == "malformed"
    assert cache.cached_languages() == frozenset({"de", "it"})


def test_invalid_entries_are_ignored(tmp_path: Path) -> None:
    _write_dictionary(tmp_path, "en", {"Cat": "A1", "dog": "Z9", "bird": "b1"})
    cache = DictionaryCache(tmp_path)

    entry = cache.get("en")

    assert entry.available
    assert dict(entry.words) == {"cat": "A1"}


def test_unsafe_language_codes_never_touch_the_filesystem(tmp_path: Path) -> None:
    cache = DictionaryCache(tmp_path)

    assert cache.status("../etc") == "missing"
    assert cache.get("").path is None


def test_caches_are_isolated(tmp_path: Path) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _write_dictionary(first, "en", {"cat": "A1"})
    _write_dictionary(second, "en", {"cat": "C2"})
    segments = _transcript("cat")

    assert estimate_cefr_level(segments, "en", cache=DictionaryCache(first)) == "A1"
    assert estimate_cefr_level(segments, "en", cache=DictionaryCache(second)) == "C2"


def test_packaged_dictionaries() -> None:
    cache = DictionaryCache()

    english = _transcript("I went to the store", "and bought milk.")
    spanish = _transcript("Fui a la tienda", "y compré leche.")

    assert estimate_cefr_level(english, "en-US", cache=cache) == "A1"
    assert estimate_cefr_level(spanish, "es", cache=cache) == "A1"


def test_invalid_language_codes_are_not_cached(tmp_path: Path) -> None:
    cache = DictionaryCache(tmp_path)

    for index in range(200):
        assert cache.get("x" * 50 + str(index)).status == "missing"
    assert estimate_cefr_level(_transcript("cat"), "../../etc", cache=cache) == INDETERMINATE

    assert cache.cached_languages() == frozenset()
