from .enums import RejectionReason
from .session import GameSession, PlayerAction
from .validation import ValidationOutcome, RejectionMessage

__all__ = ["RejectionReason", "GameSession", "PlayerAction", "ValidationOutcome", "RejectionMessage"]
