# wordscramble/models/validation.py
from typing import Optional
from pydantic import BaseModel, ConfigDict

from wordscramble.models.enums import RejectionReason

class ValidationOutcome(BaseModel):
    """Either Accepted(word) when reason is None, or Rejected(reason)."""
    model_config = ConfigDict(frozen=True)

    word: str  # the normalized candidate
    reason: Optional[RejectionReason] = None

    @property
    def is_accepted(self) -> bool:
        return self.reason is None

    @classmethod
    def accepted(cls, word: str) -> "ValidationOutcome":
        return cls(word=word)

    @classmethod
    def rejected(cls, word: str, reason: RejectionReason) -> "ValidationOutcome":
        return cls(word=word, reason=reason)

class RejectionMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    message: str
