from transcriptkit.text import collapse_whitespace, first_word, letter_tokens, word_tokens


def test_word_tokens_keep_internal_apostrophes_and_hyphens() -> None:
    tokens = word_tokens("I don't like co-op  rock'n'roll, mother-in-law!")

    assert tokens == ["I", "don't", "like", "co-op", "rock'n'roll", "mother-in-law"]


def test_word_tokens_accept_curly_apostrophe() -> None:
    assert word_tokens("It’s fine") == ["It’s", "fine"]


def test_word_tokens_split_on_dangling_joiners() -> None:
    assert word_tokens("well- known 'quoted' end-") == ["well", "known", "quoted", "end"]


def test_word_tokens_include_numbers_and_combining_marks() -> None:
    text = "Room 101, cafe\u0301 au lait"

    assert word_tokens(text) == ["Room", "101", "cafe\u0301", "au", "lait"]


def test_word_tokens_treat_underscore_as_separator() -> None:
    assert word_tokens("snake_case") == ["snake", "case"]


def test_word_tokens_empty_inputs() -> None:
    assert word_tokens("") == []
    assert word_tokens(None) == []
    assert word_tokens("   \n\t ") == []
    assert word_tokens("... !!! ??? --") == []


def test_letter_tokens_are_letters_only() -> None:
    assert letter_tokens("don't stop 2 times, señor") == ["don", "t", "stop", "times", "señor"]
    assert letter_tokens("123 ...") == []


def test_first_word_is_lowercased() -> None:
    assert first_word('  ..."And then') == "and"
    assert first_word("Y luego") == "y"
    assert first_word("!!!") is None
    assert first_word("") is None


def test_collapse_whitespace() -> None:
    assert collapse_whitespace("  a \n\t b  ") == "a b"
    assert collapse_whitespace(None) == ""
