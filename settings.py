"""
settings.py

Environment-driven configuration. Values may also come from a .env file
in the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from providers import (
    DEFAULT_DICTIONARY_PATH,
    DEFAULT_MIN_ZIPF,
    OnlineSpellChecker,
    SpellChecker,
    WordFreqSpellChecker,
    WordListSpellChecker,
)
from wordbank import DEFAULT_WORDS_PATH, WordList, load_word_list
from wordscramble import WordScramble

DICTIONARY_BACKENDS = ("wordfreq", "local", "online")


@dataclass(frozen=True)
class Settings:
    words_file: Path = DEFAULT_WORDS_PATH
    dictionary: str = "wordfreq"
    dictionary_file: Path = DEFAULT_DICTIONARY_PATH
    language: str = "en"
    min_zipf: float = DEFAULT_MIN_ZIPF
    timeout: float = 5.0
    log_level: str = "WARNING"


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    load_dotenv(dotenv_path)

    dictionary = os.getenv("WORDSCRAMBLE_DICTIONARY", "wordfreq").strip().lower()
    if dictionary not in DICTIONARY_BACKENDS:
        raise ValueError(
            f"WORDSCRAMBLE_DICTIONARY must be one of {', '.join(DICTIONARY_BACKENDS)}, got {dictionary!r}"
        )

    return Settings(
        words_file=Path(os.getenv("WORDSCRAMBLE_WORDS_FILE", str(DEFAULT_WORDS_PATH))),
        dictionary=dictionary,
        dictionary_file=Path(os.getenv("WORDSCRAMBLE_DICTIONARY_FILE", str(DEFAULT_DICTIONARY_PATH))),
        language=os.getenv("WORDSCRAMBLE_LANGUAGE", "en"),
        min_zipf=float(os.getenv("WORDSCRAMBLE_MIN_ZIPF", str(DEFAULT_MIN_ZIPF))),
        timeout=float(os.getenv("WORDSCRAMBLE_TIMEOUT", "5")),
        log_level=os.getenv("WORDSCRAMBLE_LOG_LEVEL", "WARNING").upper(),
    )


def build_spell_checker(settings: Settings) -> SpellChecker:
    if settings.dictionary == "online":
        return OnlineSpellChecker(timeout=settings.timeout)
    if settings.dictionary == "wordfreq":
        return WordFreqSpellChecker(min_zipf=settings.min_zipf)
    return WordListSpellChecker.from_file(settings.dictionary_file, language=settings.language)


def build_game(settings: Settings) -> Tuple[WordScramble, WordList]:
    """
    Load the word bank and wire an engine. The word bank goes first so a
    missing resource fails before anything else is set up.
    """
    words = load_word_list(settings.words_file)
    engine = WordScramble(spell_checker=build_spell_checker(settings), language=settings.language)
    return engine, words
