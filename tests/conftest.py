# tests/conftest.py
import random
import logging
import pytest

from wordscramble.services.spell_checker import WordListSpellChecker

# Small dictionary that covers every word the tests expect to be "real"
KNOWN_WORDS = [
    "silk", "worm", "milk", "work", "mils", "slim", "skim", "kilo", "rows",
    "silkworm", "cat", "act", "tact", "ca", "aa", "dog", "at",
]

@pytest.fixture
def spell_checker() -> WordListSpellChecker:
    return WordListSpellChecker(KNOWN_WORDS)

@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so root word draws are reproducible."""
    return random.Random(1234)

@pytest.fixture
def corpus():
    return ["silkworm", "abdicate", "absolute", "academic"]

def pytest_configure(config):
    """
    Hook to configure logging levels before tests are run.
    This silences noisy third-party libraries.
    """
    logging.getLogger("wordfreq").setLevel(logging.WARNING)
