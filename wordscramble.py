# wordscramble.py
# Round engine for the "Word Scramble" game
# Rules:
# - A base word is picked at random from the word bank.
# - The player enters words made only from the base word's letters.
#   Each letter of the base word can be used at most once per answer.
# - An answer is accepted when it is new this round, can be spelled from
#   the base word, and the spell checker knows it.
# - Example: base="listen" -> "tin", "silent", "lens" are fine; "tint" is not.
#
# This module is UI-agnostic (no input/print in core logic).
# The Streamlit page in app.py and the CLI at the bottom both drive it.

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from providers import SpellChecker
from wordbank import WordScrambleError, pick_random

logger = logging.getLogger(__name__)


# -------------------------
# Utilities
# -------------------------

def normalize(raw: str) -> str:
    return (raw or "").strip().lower()


def can_spell(word: str, base: str) -> bool:
    """
    Multiset containment: every letter of `word` must match a distinct
    letter of `base`. Example: base="aardvark" allows "raaa" but not "aaaa".
    """
    remaining = list(base)
    for letter in word:
        try:
            remaining.remove(letter)
        except ValueError:
            return False
    return True


# -------------------------
# Results
# -------------------------

class Rejection(enum.Enum):
    # checked in this order; the first one that fails wins
    ALREADY_USED = ("Word used already", "Be more original")
    NOT_POSSIBLE = ("Word not possible", "You can't spell that word from '{base}'!")
    NOT_REAL = ("Word not recognized", "You can't just make them up, you know!")

    def __init__(self, title: str, message: str):
        self.title = title
        self._message = message

    def message_for(self, base_word: str) -> str:
        return self._message.format(base=base_word)


@dataclass(frozen=True)
class SubmitResult:
    accepted: bool
    word: str = ""
    reason: Optional[Rejection] = None
    message: str = ""

    @property
    def ignored(self) -> bool:
        """Empty input: nothing accepted and nothing to report."""
        return not self.accepted and self.reason is None

    @property
    def title(self) -> str:
        return self.reason.title if self.reason else ""


@dataclass(frozen=True)
class RoundView:
    base_word: str
    used_words: Tuple[str, ...]


class RoundNotStartedError(WordScrambleError):
    """submit() was called before start_round()/reset_round()."""


# -------------------------
# Game Engine
# -------------------------

@dataclass
class WordScramble:
    spell_checker: SpellChecker
    language: str = "en"

    # internal state (set on start_round)
    _base_word: Optional[str] = field(default=None, init=False)
    _used_words: List[str] = field(default_factory=list, init=False)

    # ------------- lifecycle -------------

    def start_round(self, base: str) -> "WordScramble":
        self._base_word = normalize(base)
        self._used_words.clear()
        logger.info("New round with base word %r", self._base_word)
        return self

    def reset_round(self, words: Sequence[str]) -> "WordScramble":
        return self.start_round(pick_random(words))

    # ------------- gameplay -------------

    def submit(self, raw: str) -> SubmitResult:
        """
        Validate an answer and store it on success.
        - Empty input (after trimming) is ignored silently.
        - Checks run in order: already used, possible, real.
        - Rejected answers leave the round untouched.
        """
        if self._base_word is None:
            raise RoundNotStartedError("Start a round before submitting words.")

        answer = normalize(raw)
        if not answer:
            return SubmitResult(accepted=False)

        if answer in self._used_words:
            return self._reject(answer, Rejection.ALREADY_USED)

        if not can_spell(answer, self._base_word):
            return self._reject(answer, Rejection.NOT_POSSIBLE)

        # most expensive check goes last
        if not self.spell_checker.is_correctly_spelled(answer, self.language):
            return self._reject(answer, Rejection.NOT_REAL)

        self._used_words.insert(0, answer)
        return SubmitResult(accepted=True, word=answer)

    def _reject(self, answer: str, reason: Rejection) -> SubmitResult:
        logger.debug("Rejected %r for base %r: %s", answer, self._base_word, reason.name)
        return SubmitResult(
            accepted=False,
            word=answer,
            reason=reason,
            message=reason.message_for(self._base_word or ""),
        )

    # ------------- accessors -------------

    def view(self) -> RoundView:
        return RoundView(base_word=self._base_word or "", used_words=tuple(self._used_words))


# -------------------------
# Optional: tiny CLI for quick testing
# -------------------------

def _cli():
    """
    Quick terminal game for manual testing (kept minimal):
    - Run:  python wordscramble.py
    - Type :new for a new base word, :quit (or Ctrl-D) to leave.
    """
    import sys
    from settings import build_game, load_settings
    from wordbank import WordListNotFoundError

    settings = load_settings()
    logging.basicConfig(level=settings.log_level)

    try:
        engine, words = build_game(settings)
    except WordListNotFoundError as e:
        sys.exit(f"[!] {e}")

    engine.reset_round(words)
    print("Welcome to Word Scramble!")
    print(f"Make words out of: {engine.view().base_word}")

    while True:
        try:
            raw = input("Your word: ")
        except EOFError:
            break

        command = raw.strip().lower()
        if command == ":quit":
            break
        if command == ":new":
            engine.reset_round(words)
            print(f"Make words out of: {engine.view().base_word}")
            continue

        res = engine.submit(raw)
        if res.ignored:
            continue
        if not res.accepted:
            print(f"[!] {res.title}: {res.message}")
            continue
        print(f"Nice! {len(engine.view().used_words)} word(s) so far.")

    # show the round's words, newest first
    print("Your words:")
    for w in engine.view().used_words:
        print(f"{len(w):2d}. {w}")


if __name__ == "__main__":
    _cli()
