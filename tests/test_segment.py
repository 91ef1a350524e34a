from transcriptkit.languages import resolve_language_pack
from transcriptkit.models import TranscriptSegment
from transcriptkit.normalize import normalize_segment_text, normalize_segments
from transcriptkit.normalize.segment import capitalize_first_letter

EN = resolve_language_pack("en")


def test_collapses_whitespace_capitalizes_and_terminates() -> None:
    out = normalize_segment_text("  hello   world ,, ", capitalize_start=True, terminate=True)

    assert out == "Hello world."


def test_strips_trailing_noise_without_terminating() -> None:
    assert normalize_segment_text("wait;", capitalize_start=False, terminate=False) == "wait"
    assert normalize_segment_text("so , ;", capitalize_start=False, terminate=False) == "so"


def test_keeps_existing_terminal_punctuation() -> None:
    assert normalize_segment_text("what?", capitalize_start=True, terminate=False) == "What?"
    assert normalize_segment_text('she said "go."', capitalize_start=False, terminate=False) == (
        'she said "go."'
    )


def test_empty_text_is_returned_collapsed() -> None:
    assert normalize_segment_text("   ", capitalize_start=True, terminate=True) == ""


def test_capitalize_skips_leading_non_letters() -> None:
    assert capitalize_first_letter('"hello"') == '"Hello"'
    assert capitalize_first_letter("123 apples") == "123 Apples"
    assert capitalize_first_letter("...") == "..."
    assert capitalize_first_letter("élan") == "Élan"


def test_sentence_start_threads_through_segments() -> None:
    segments = [
        TranscriptSegment(text="so we started", offset=0, duration=1000),
        TranscriptSegment(text="because it rained", offset=1000, duration=1000),
        TranscriptSegment(text="then it stopped", offset=2000, duration=1000),
        TranscriptSegment(text="we went home", offset=3000, duration=1000),
    ]

    out = normalize_segments(segments, EN)

    assert [segment.text for segment in out] == [
        "So we started",
        "because it rained",
        "then it stopped.",
        "We went home.",
    ]


def test_existing_terminal_punctuation_starts_new_sentence() -> None:
    segments = [
        TranscriptSegment(text="is it open?", offset=0, duration=500),
        TranscriptSegment(text="and then what", offset=500, duration=500),
    ]

    out = normalize_segments(segments, EN)

    assert [segment.text for segment in out] == ["Is it open?", "And then what."]


def test_empty_segment_does_not_break_threading() -> None:
    segments = [
        TranscriptSegment(text="hello there", offset=0, duration=500),
        TranscriptSegment(text="   ", offset=500, duration=100),
        TranscriptSegment(text="general kenobi", offset=600, duration=500),
    ]

    out = normalize_segments(segments, EN)

    assert [segment.text for segment in out] == ["Hello there.", "", "General kenobi."]


def test_extra_fields_and_timings_pass_through() -> None:
    segment = TranscriptSegment(text="hi", offset=40, duration=10, id="seg-1", speaker="A")

    out = normalize_segments([segment], EN)

    assert out[0].text == "Hi."
    assert out[0].offset == 40
    assert out[0].duration == 10
    assert out[0].model_extra == {"id": "seg-1", "speaker": "A"}
    assert segment.text == "hi"


def test_capitalize_skips_leading_numerics() -> None:
    assert capitalize_first_letter("½ cup of sugar") == "½ Cup of sugar"
    assert capitalize_first_letter("Ⅻ chapters") == "Ⅻ Chapters"
    assert capitalize_first_letter("x² grows") == "X² grows"
