import random

import pytest

from wordbank import (
    DEFAULT_WORDS_PATH,
    FALLBACK_WORD,
    WordListNotFoundError,
    WordScrambleError,
    load_word_list,
    parse_words,
    pick_random,
)


def test_parse_words_lowercases_and_drops_blank_lines():
    assert parse_words("Silkworm\n\n  LISTEN \naardvark\n") == ("silkworm", "listen", "aardvark")


def test_load_word_list_from_file(tmp_path):
    path = tmp_path / "start.txt"
    path.write_text("Alpha\nbeta\n\nGamma\n", encoding="utf-8")

    assert load_word_list(path) == ("alpha", "beta", "gamma")


def test_load_word_list_keeps_file_order(tmp_path):
    path = tmp_path / "start.txt"
    path.write_text("zebra\napple\nmango", encoding="utf-8")

    assert load_word_list(str(path)) == ("zebra", "apple", "mango")


def test_missing_word_list_is_fatal(tmp_path):
    with pytest.raises(WordListNotFoundError) as excinfo:
        load_word_list(tmp_path / "nope.txt")

    assert "nope.txt" in str(excinfo.value)
    assert isinstance(excinfo.value, FileNotFoundError)
    assert isinstance(excinfo.value, WordScrambleError)


def test_bundled_word_list_loads():
    words = load_word_list()

    assert DEFAULT_WORDS_PATH.name == "start.txt"
    assert "silkworm" in words
    assert all(w == w.lower() and w for w in words)


def test_pick_random_returns_member():
    words = ("one", "two", "three")
    rng = random.Random(7)

    for _ in range(20):
        assert pick_random(words, rng) in words


def test_pick_random_is_reproducible_with_seeded_rng():
    words = tuple(f"word{i}" for i in range(50))

    first = [pick_random(words, random.Random(42)) for _ in range(3)]
    second = [pick_random(words, random.Random(42)) for _ in range(3)]

    assert first == second


def test_pick_random_empty_list_falls_back():
    assert pick_random(()) == FALLBACK_WORD
    assert pick_random([]) == FALLBACK_WORD
