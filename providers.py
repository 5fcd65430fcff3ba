import logging
from pathlib import Path
from typing import Iterable, Optional, Protocol, Union

import requests
from wordfreq import zipf_frequency

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_DICTIONARY_PATH = DATA_DIR / "dictionary.txt"

DICTIONARY_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/{language}/{word}"

# Zipf scale: 0 means never seen, ~3 is a word seen once per million words.
DEFAULT_MIN_ZIPF = 2.0


class SpellChecker(Protocol):
    def is_correctly_spelled(self, word: str, language: str) -> bool:
        ...


class WordListSpellChecker:
    """
    In-memory dictionary. Knows the words of a single language and
    answers False for anything else.
    """

    def __init__(self, words: Iterable[str], language: str = "en"):
        self.language = language
        self._words = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: Optional[Union[str, Path]] = None, language: str = "en") -> "WordListSpellChecker":
        path = Path(path) if path is not None else DEFAULT_DICTIONARY_PATH
        with open(path, "r", encoding="utf-8") as f:
            checker = cls(f, language=language)
        logger.info("Loaded %d dictionary words from %s", len(checker), path)
        return checker

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._words

    def is_correctly_spelled(self, word: str, language: str) -> bool:
        if language != self.language:
            return False
        return word in self


class WordFreqSpellChecker:
    """
    Treats a word as real when it is common enough in wordfreq's corpus
    for the given language. Non-alphabetic input is never a word.
    """

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF):
        self.min_zipf = min_zipf

    def is_correctly_spelled(self, word: str, language: str) -> bool:
        word = word.lower()
        if not word.isalpha():
            return False
        return zipf_frequency(word, language) >= self.min_zipf


class OnlineSpellChecker:
    """
    Asks the free dictionary API whether a word exists.
    200 means it does, 404 means it does not. Anything else (timeouts,
    network errors, odd statuses) is logged and counts as not confirmed.
    """

    def __init__(self, timeout: float = 5, *, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session

    def is_correctly_spelled(self, word: str, language: str) -> bool:
        url = DICTIONARY_API_URL.format(language=language, word=requests.utils.quote(word.lower(), safe=""))
        get = self.session.get if self.session is not None else requests.get
        try:
            response = get(url, timeout=self.timeout)
        except requests.exceptions.Timeout:
            logger.warning("Timeout while validating word: %s", word)
            return False
        except requests.exceptions.RequestException as e:
            logger.warning("Network error while validating %s: %s", word, e)
            return False

        if response.status_code == 200:
            return True
        if response.status_code != 404:
            logger.warning("Unexpected status %s for word: %s", response.status_code, word)
        return False
