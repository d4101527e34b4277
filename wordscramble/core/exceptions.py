# wordscramble/core/exceptions.py


class WordScrambleError(Exception):
    """Base class for errors raised by the word scramble core."""


class EmptyWordCorpusError(WordScrambleError):
    """
    The start-word corpus is missing or has no usable words.
    A session cannot begin without a root word, so hosts treat this as fatal.
    """
