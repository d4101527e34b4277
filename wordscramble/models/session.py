# wordscramble/models/session.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Any, Literal, Tuple

class GameSession(BaseModel):
    # Immutable: every change goes through game_service and yields a new instance
    model_config = ConfigDict(frozen=True)

    root_word: str = Field(min_length=1)
    used_words: Tuple[str, ...] = ()  # newest first
    score: int = Field(default=0, ge=0)
    language: str = Field(default="en", max_length=8)  # tag passed to the spell checker

    @field_validator("root_word", mode="before")
    @classmethod
    def normalize_root_word(cls, value: Any) -> Any:
        # Candidates are lowercased before the letter check, so the root must be too
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("used_words", mode="before")
    @classmethod
    def normalize_used_words(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple(w.strip().lower() if isinstance(w, str) else w for w in value)
        return value

class PlayerAction(BaseModel):
    action_type: Literal["submit_word", "restart"]
    payload: Dict[str, Any] | None = None # e.g., {"word": "silk"}
