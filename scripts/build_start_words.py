import argparse
import os
import sys
from pathlib import Path

from wordfreq import top_n_list

# Add project root to Python path to allow importing wordscramble modules
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from wordscramble.core.config import settings

# --- Configuration ---
DEFAULT_WORD_LENGTH = 8
DEFAULT_VOCABULARY_SIZE = 50000 # How many of wordfreq's most common words to scan
DEFAULT_MAX_WORDS = 1000


def collect_start_words(language: str, word_length: int, vocabulary_size: int, max_words: int) -> list[str]:
    """Most frequent alphabetic words of exactly `word_length` letters, no duplicates, frequency order."""
    seen = set()
    out = []
    for w in top_n_list(language, n_top=vocabulary_size):
        w = w.strip().lower()
        if len(w) != word_length or not w.isalpha() or not w.isascii():
            continue
        if w in seen:
            continue
        seen.add(w)
        out.append(w)
        if len(out) >= max_words:
            break
    return out


def main():
    parser = argparse.ArgumentParser(description="Regenerate the start-word list used to pick root words.")
    parser.add_argument("--output", default=str(settings.START_WORDS_FILE), help="Where to write the word list.")
    parser.add_argument("--language", default=settings.VALIDATION_LANGUAGE)
    parser.add_argument("--length", type=int, default=DEFAULT_WORD_LENGTH)
    parser.add_argument("--vocabulary-size", type=int, default=DEFAULT_VOCABULARY_SIZE)
    parser.add_argument("--max-words", type=int, default=DEFAULT_MAX_WORDS)
    args = parser.parse_args()

    words = collect_start_words(args.language, args.length, args.vocabulary_size, args.max_words)
    if not words:
        print(f"No {args.length}-letter words found for language '{args.language}'. Nothing written.")
        sys.exit(1)

    out_path = Path(args.output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} start words to {out_path}")


if __name__ == "__main__":
    main()
