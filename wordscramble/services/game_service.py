# wordscramble/services/game_service.py
import logging
import random
from typing import Dict, Any, Tuple, List, Literal, Optional, Sequence

from wordscramble.core.config import settings
from wordscramble.models.session import GameSession, PlayerAction
from wordscramble.services.root_word_provider import choose_root_word
from wordscramble.services.spell_checker import SpellChecker
from wordscramble.services.word_validator import validate_word, rejection_message

logger = logging.getLogger("wordscramble.services.game_service")  # Logger for this module

# Define possible event types that game_service can return
GameEventType = Literal[
    "word_accepted",
    "word_rejected",
    "session_restarted",
    "error_message",
]

class GameEvent:
    def __init__(self, event_type: GameEventType, payload: Dict[str, Any]):
        self.type = event_type
        self.payload = payload

    def to_dict(self): # For hosts that serialize events
        return {"type": self.type, "payload": self.payload}

    def __repr__(self):
        return f"GameEvent({self.type!r}, {self.payload!r})"


def start_new_session(
    corpus: Sequence[str],
    rng: Optional[random.Random] = None,
    language: str | None = None,
) -> GameSession:
    """Draws a root word and returns a fresh session with no words and zero score."""
    root_word = choose_root_word(corpus, rng)
    return GameSession(root_word=root_word, language=language or settings.VALIDATION_LANGUAGE)


def _submit_word(
    state: GameSession,
    raw_word: str,
    spell_checker: SpellChecker,
) -> Tuple[GameSession, List[GameEvent]]:
    outcome = validate_word(raw_word, state.root_word, state.used_words, spell_checker, language=state.language)

    if outcome is None:
        # Blank input: no state change and nothing to show
        return state, []

    if not outcome.is_accepted:
        msg = rejection_message(outcome.reason, state.root_word)
        logger.info(f"Rejected '{outcome.word}' for root '{state.root_word}': {outcome.reason.value}")
        return state, [GameEvent("word_rejected", {
            "word": outcome.word,
            "reason": outcome.reason.value,
            "title": msg.title,
            "message": msg.message,
        })]

    new_state = state.model_copy(update={
        "used_words": (outcome.word,) + state.used_words,
        "score": state.score + len(outcome.word),
    })
    logger.info(f"Accepted '{outcome.word}' for root '{state.root_word}'. Score {state.score} -> {new_state.score}")
    return new_state, [GameEvent("word_accepted", {
        "word": outcome.word,
        "points": len(outcome.word),
        "score": new_state.score,
    })]


def process_player_action(
    state: GameSession,
    action: PlayerAction,
    *,
    spell_checker: SpellChecker,
    corpus: Sequence[str],
    rng: Optional[random.Random] = None,
) -> Tuple[GameSession, List[GameEvent]]:
    """
    Applies one player action to the session and returns the resulting session
    together with the events the host should render.
    `state` is never modified; accepted words and restarts produce a new GameSession.
    """
    if action.action_type == "submit_word":
        word = (action.payload or {}).get("word", "")
        if not isinstance(word, str):
            logger.error(f"submit_word payload has non-string word: {word!r}. Ignoring.")
            return state, [GameEvent("error_message", {"message": "Submitted word must be text."})]
        return _submit_word(state, word, spell_checker)

    elif action.action_type == "restart":
        new_state = start_new_session(corpus, rng, language=state.language)
        logger.info(f"Session restarted. Root word '{state.root_word}' -> '{new_state.root_word}' (final score was {state.score})")
        return new_state, [GameEvent("session_restarted", {
            "root_word": new_state.root_word,
            "previous_root_word": state.root_word,
            "previous_score": state.score,
        })]

    # PlayerAction validation normally rules this out; models built with model_construct can still get here
    logger.error(f"Unknown action type '{action.action_type}'. Ignoring.")
    return state, [GameEvent("error_message", {"message": f"Unknown action '{action.action_type}'."})]
