import pytest

from wordscramble import WordScramble


class FakeSpellChecker:
    """Knows a fixed set of words and remembers what it was asked."""

    def __init__(self, words=()):
        self.words = set(words)
        self.calls = []

    def is_correctly_spelled(self, word, language):
        self.calls.append((word, language))
        return language == "en" and word in self.words


@pytest.fixture
def checker():
    return FakeSpellChecker(
        {"tin", "silent", "lens", "list", "tint", "net", "raaa", "aaaa", "dark", "cat", "act"}
    )


@pytest.fixture
def game(checker):
    return WordScramble(spell_checker=checker).start_round("listen")
