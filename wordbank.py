# wordbank.py
# Candidate base words for Word Scramble.
# The list is read once at startup from a newline-delimited text file and
# never changes afterwards. Rounds pick their base word from it at random.

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_WORDS_PATH = DATA_DIR / "start.txt"

# Used when the word list turns out to be empty.
FALLBACK_WORD = "silkworm"

WordList = Tuple[str, ...]


class WordScrambleError(Exception):
    """Base class for Word Scramble errors."""


class WordListNotFoundError(WordScrambleError, FileNotFoundError):
    """The bundled base word resource is missing. The game cannot run without it."""


def parse_words(raw: str) -> WordList:
    """
    Parse newline-delimited content into lowercase words.
    Blank lines (including a trailing newline) are dropped.
    """
    return tuple(line.strip().lower() for line in raw.splitlines() if line.strip())


def load_word_list(path: Optional[Union[str, Path]] = None) -> WordList:
    """
    Load the base word list. Raises WordListNotFoundError if the file is missing.
    """
    path = Path(path) if path is not None else DEFAULT_WORDS_PATH
    if not path.is_file():
        raise WordListNotFoundError(f"Can't find the word list at {path}")

    words = parse_words(path.read_text(encoding="utf-8"))
    logger.info("Loaded %d base words from %s", len(words), path)
    return words


def pick_random(words: Sequence[str], rng: Optional[random.Random] = None) -> str:
    if not words:
        logger.warning("Word list is empty; falling back to %r", FALLBACK_WORD)
        return FALLBACK_WORD
    return (rng or random).choice(words)
