# wordscramble/services/root_word_provider.py
import logging
import pathlib
import random
from typing import List, Optional, Sequence

from wordscramble.core.exceptions import EmptyWordCorpusError

logger = logging.getLogger("wordscramble.services.root_word_provider")  # Logger for this module

def read_word_file(path: pathlib.Path | str, role: str = "Start words") -> List[str]:
    """
    Reads a newline-delimited word file.
    Entries are trimmed and lowercased; blank lines (e.g. a trailing newline) are dropped.
    Raises EmptyWordCorpusError if the file can't be read or yields no words;
    `role` names the file in the error message.
    """
    path = pathlib.Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise EmptyWordCorpusError(f"Could not load {role.lower()} from {path}: {e}") from e

    words = [line.strip().lower() for line in raw.split("\n")]
    words = [w for w in words if w]
    if not words:
        raise EmptyWordCorpusError(f"{role} file {path} contains no words.")

    logger.debug(f"Loaded {len(words)} entries ({role.lower()}) from {path}")
    return words

def load_start_words(path: pathlib.Path | str) -> List[str]:
    """The bundled start-word resource that root words are drawn from."""
    return read_word_file(path, "Start words")

def choose_root_word(corpus: Sequence[str], rng: Optional[random.Random] = None) -> str:
    """Picks one entry of `corpus` uniformly at random. An empty corpus is fatal."""
    if not corpus:
        raise EmptyWordCorpusError("Cannot choose a root word from an empty corpus.")
    chooser = rng or random
    root_word = chooser.choice(corpus)
    logger.info(f"Chose root word '{root_word}' from {len(corpus)} candidates")
    return root_word
