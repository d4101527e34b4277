from enum import Enum

class RejectionReason(Enum):
    ALREADY_USED = "already_used"      # word was accepted earlier this session
    NOT_POSSIBLE = "not_possible"      # uses a letter the root word doesn't have
    NOT_RECOGNIZED = "not_recognized"  # spell-check oracle doesn't know it
    TOO_TRIVIAL = "too_trivial"        # the root word itself, or too short
