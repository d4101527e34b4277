# wordscramble/services/word_validator.py
import logging
from collections import Counter
from typing import Collection, Optional

from wordscramble.core.config import settings
from wordscramble.models.enums import RejectionReason
from wordscramble.models.validation import ValidationOutcome, RejectionMessage
from wordscramble.services.spell_checker import SpellChecker

logger = logging.getLogger("wordscramble.services.word_validator")  # Logger for this module

def normalize_word(raw: str) -> str:
    return raw.strip().lower()

def is_original(word: str, used_words: Collection[str]) -> bool:
    # used_words may come from a host that never normalized them
    return word not in {normalize_word(u) for u in used_words}

def is_possible(word: str, root_word: str, strict_letter_counts: bool = False) -> bool:
    """
    Every letter of `word` must appear in `root_word`.
    By default a root letter may be reused any number of times ("aa" from "cat").
    With strict_letter_counts, each root letter can be used at most as often as it occurs.
    """
    if strict_letter_counts:
        available = Counter(root_word)
        return all(available[letter] >= count for letter, count in Counter(word).items())
    return all(letter in root_word for letter in word)

def is_recognized(word: str, spell_checker: SpellChecker, language: str = "en") -> bool:
    return spell_checker.is_recognized_word(word, language)

def is_substantial(word: str, root_word: str, min_length: int = 3) -> bool:
    """False for the root word itself and for anything shorter than min_length."""
    return word != root_word and len(word) >= min_length

def validate_word(
    candidate: str,
    root_word: str,
    used_words: Collection[str],
    spell_checker: SpellChecker,
    language: str = "en",
    min_length: int | None = None,
    strict_letter_counts: bool | None = None,
) -> Optional[ValidationOutcome]:
    """
    Classifies a raw submission against the current root word.

    Checks run in a fixed order and stop at the first failure:
    1. already used          -> ALREADY_USED
    2. letters not in root   -> NOT_POSSIBLE
    3. unknown to the oracle -> NOT_RECOGNIZED
    4. root word / too short -> TOO_TRIVIAL

    Returns None when the candidate is empty after normalization; the caller
    should treat that as "nothing happened".
    """
    min_length = settings.MIN_WORD_LENGTH if min_length is None else min_length
    strict_letter_counts = settings.STRICT_LETTER_COUNTS if strict_letter_counts is None else strict_letter_counts

    word = normalize_word(candidate)
    root_word = normalize_word(root_word)
    if not word:
        return None

    if not is_original(word, used_words):
        reason = RejectionReason.ALREADY_USED
    elif not is_possible(word, root_word, strict_letter_counts):
        reason = RejectionReason.NOT_POSSIBLE
    elif not is_recognized(word, spell_checker, language):
        reason = RejectionReason.NOT_RECOGNIZED
    elif not is_substantial(word, root_word, min_length):
        reason = RejectionReason.TOO_TRIVIAL
    else:
        logger.debug(f"Word '{word}' accepted for root '{root_word}'")
        return ValidationOutcome.accepted(word)

    logger.debug(f"Word '{word}' rejected for root '{root_word}': {reason.value}")
    return ValidationOutcome.rejected(word, reason)

def rejection_message(reason: RejectionReason, root_word: str) -> RejectionMessage:
    if reason is RejectionReason.ALREADY_USED:
        return RejectionMessage(title="Word used already", message="Be more original!")
    if reason is RejectionReason.NOT_POSSIBLE:
        return RejectionMessage(title="Word not possible", message=f"You can't spell that word from '{root_word}'!")
    if reason is RejectionReason.NOT_RECOGNIZED:
        return RejectionMessage(title="Word not recognized", message="You can't just make them up, you know!")
    if reason is RejectionReason.TOO_TRIVIAL:
        return RejectionMessage(title="Word can't be added", message="You can't just enter key word or any short words")
    raise ValueError(f"Unknown rejection reason: {reason!r}")
