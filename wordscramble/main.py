# wordscramble/main.py
# Play in a terminal with: python -m wordscramble (or the `wordscramble` script)
import argparse
import logging
import random
import sys
from typing import List, Optional, TextIO

from wordscramble.core.config import settings
from wordscramble.core.exceptions import EmptyWordCorpusError
from wordscramble.core.logging_utils import configure_logging
from wordscramble.models.session import GameSession, PlayerAction
from wordscramble.services import game_service
from wordscramble.services.game_service import GameEvent
from wordscramble.services.root_word_provider import load_start_words, read_word_file
from wordscramble.services.spell_checker import SpellChecker, WordfreqSpellChecker, WordListSpellChecker

logger = logging.getLogger("wordscramble.main")  # Logger for this module

RESTART_COMMAND = ":restart"
QUIT_COMMAND = ":quit"


def render_session(state: GameSession, out: TextIO) -> None:
    """Prints the root word, the score and the accepted words, newest first."""
    out.write(f"\n=== {state.root_word} ===\n")
    out.write(f"Your current score: {state.score}\n")
    for word in state.used_words:
        out.write(f"  ({len(word)}) {word}\n")


def render_events(events: List[GameEvent], out: TextIO) -> None:
    for event in events:
        if event.type == "word_rejected":
            out.write(f"{event.payload['title']}: {event.payload['message']}\n")
        elif event.type == "error_message":
            out.write(f"Error: {event.payload['message']}\n")
        elif event.type == "session_restarted":
            out.write(f"New game! Your root word is '{event.payload['root_word']}'.\n")


def build_spell_checker(offline_words: Optional[str]) -> SpellChecker:
    if offline_words:
        return WordListSpellChecker(read_word_file(offline_words, "Dictionary"))
    return WordfreqSpellChecker()


def play(
    corpus: List[str],
    spell_checker: SpellChecker,
    rng: Optional[random.Random] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> GameSession:
    """Runs the input loop until :quit or end of input; returns the last session."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    state = game_service.start_new_session(corpus, rng)
    stdout.write(f"Make words from the letters of the root word. "
                 f"Type {RESTART_COMMAND} for a new word, {QUIT_COMMAND} to stop.\n")
    render_session(state, stdout)

    for line in stdin:
        command = line.strip()
        if command == QUIT_COMMAND:
            break
        if command == RESTART_COMMAND:
            action = PlayerAction(action_type="restart")
        else:
            action = PlayerAction(action_type="submit_word", payload={"word": line})

        new_state, events = game_service.process_player_action(
            state, action, spell_checker=spell_checker, corpus=corpus, rng=rng
        )
        render_events(events, stdout)
        if new_state is not state:
            render_session(new_state, stdout)
        state = new_state

    return state


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=f"{settings.PROJECT_NAME}: spell new words from a root word.")
    parser.add_argument("--words-file", default=str(settings.START_WORDS_FILE),
                        help="Newline-delimited list of root words to draw from.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible root words.")
    parser.add_argument("--offline-words", default=None,
                        help="Recognize only the words in this file instead of using wordfreq.")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level)

    try:
        corpus = load_start_words(args.words_file)
        spell_checker = build_spell_checker(args.offline_words)
    except EmptyWordCorpusError as e:
        logger.critical(f"Cannot start game: {e}")
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    final_state = play(corpus, spell_checker, rng)
    logger.info(f"Game ended on root '{final_state.root_word}' with score {final_state.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
