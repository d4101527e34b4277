# wordscramble/services/spell_checker.py
import logging
from typing import Iterable, Protocol

from wordfreq import zipf_frequency

from wordscramble.core.config import settings

logger = logging.getLogger("wordscramble.services.spell_checker")  # Logger for this module

class SpellChecker(Protocol):
    """The only thing the validator needs to know about spelling."""

    def is_recognized_word(self, word: str, language: str) -> bool:
        ...

class WordfreqSpellChecker:
    """
    Treats a word as real if wordfreq has seen it often enough.
    Zipf 1.0 is roughly once per billion words; unseen words score 0.0.
    """

    def __init__(self, min_zipf: float | None = None):
        self.min_zipf = settings.SPELLCHECK_MIN_ZIPF if min_zipf is None else min_zipf

    def is_recognized_word(self, word: str, language: str) -> bool:
        freq = zipf_frequency(word, language)
        logger.debug(f"wordfreq zipf('{word}', {language}) = {freq}")
        return freq >= self.min_zipf

class WordListSpellChecker:
    """Recognizes exactly the given words, whatever the language tag."""

    def __init__(self, words: Iterable[str]):
        self.words = frozenset(w.strip().lower() for w in words if w.strip())

    def is_recognized_word(self, word: str, language: str) -> bool:
        return word.lower() in self.words
