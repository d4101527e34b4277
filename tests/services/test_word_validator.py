# tests/services/test_word_validator.py
import pytest
from unittest.mock import MagicMock

from wordscramble.models.enums import RejectionReason
from wordscramble.services import word_validator
from wordscramble.services.word_validator import validate_word, rejection_message, is_possible, normalize_word


def test_normalize_word_trims_and_lowercases():
    assert normalize_word(" WORD \n") == "word"
    assert normalize_word("\t\n") == ""

def test_accepts_scenario_silk(spell_checker):
    outcome = validate_word("silk", "silkworm", [], spell_checker)
    assert outcome.is_accepted
    assert outcome.word == "silk"
    assert outcome.reason is None

def test_normalization_is_idempotent(spell_checker):
    assert validate_word(" SILK \n", "silkworm", [], spell_checker) == validate_word("silk", "silkworm", [], spell_checker)

@pytest.mark.parametrize("raw", ["", "   ", "\n", " \t\n "])
def test_empty_input_produces_no_outcome(raw, spell_checker):
    assert validate_word(raw, "silkworm", [], spell_checker) is None

def test_already_used_is_case_insensitive(spell_checker):
    outcome = validate_word("SILK", "silkworm", ["silk"], spell_checker)
    assert outcome.reason is RejectionReason.ALREADY_USED

def test_already_used_wins_regardless_of_root(spell_checker):
    # "dog" is not possible from "cat", but originality is checked first
    outcome = validate_word("dog", "cat", ("dog",), spell_checker)
    assert outcome.reason is RejectionReason.ALREADY_USED

def test_not_possible_scenario(spell_checker):
    outcome = validate_word("dog", "cat", [], spell_checker)
    assert outcome.reason is RejectionReason.NOT_POSSIBLE

def test_possibility_allows_letter_reuse():
    assert is_possible("aa", "cat")
    assert is_possible("tact", "cat")

def test_strict_letter_counts_limits_reuse():
    assert not is_possible("aa", "cat", strict_letter_counts=True)
    assert not is_possible("tact", "cat", strict_letter_counts=True)
    assert is_possible("act", "cat", strict_letter_counts=True)

def test_tact_accepted_by_default_but_not_in_strict_mode(spell_checker):
    assert validate_word("tact", "cat", [], spell_checker).is_accepted
    strict = validate_word("tact", "cat", [], spell_checker, strict_letter_counts=True)
    assert strict.reason is RejectionReason.NOT_POSSIBLE

def test_not_recognized(spell_checker):
    outcome = validate_word("mirk", "silkworm", [], spell_checker)
    assert outcome.reason is RejectionReason.NOT_RECOGNIZED

def test_spell_checker_called_with_normalized_word_and_language():
    oracle = MagicMock()
    oracle.is_recognized_word.return_value = True
    validate_word("  SILK ", "silkworm", [], oracle, language="en")
    oracle.is_recognized_word.assert_called_once_with("silk", "en")

def test_spell_checker_not_called_after_earlier_failure():
    oracle = MagicMock()
    validate_word("dog", "cat", [], oracle)
    validate_word("cat", "cat", ["cat"], oracle)
    oracle.is_recognized_word.assert_not_called()

def test_too_trivial_short_word(spell_checker):
    outcome = validate_word("ca", "cat", [], spell_checker)
    assert outcome.reason is RejectionReason.TOO_TRIVIAL

def test_too_trivial_root_word(spell_checker):
    outcome = validate_word("cat", "cat", [], spell_checker)
    assert outcome.reason is RejectionReason.TOO_TRIVIAL

def test_reused_letters_short_word_is_too_trivial(spell_checker):
    # "aa" passes the loose possibility check and the oracle, then fails on length
    outcome = validate_word("aa", "cat", [], spell_checker)
    assert outcome.reason is RejectionReason.TOO_TRIVIAL

def test_min_length_is_configurable(spell_checker):
    assert validate_word("act", "cat", [], spell_checker, min_length=4).reason is RejectionReason.TOO_TRIVIAL
    assert validate_word("act", "cat", [], spell_checker, min_length=3).is_accepted

def test_defaults_come_from_settings(mocker, spell_checker):
    mocker.patch.object(word_validator.settings, "MIN_WORD_LENGTH", 5)
    assert validate_word("silk", "silkworm", [], spell_checker).reason is RejectionReason.TOO_TRIVIAL

@pytest.mark.parametrize("reason, title, message", [
    (RejectionReason.ALREADY_USED, "Word used already", "Be more original!"),
    (RejectionReason.NOT_POSSIBLE, "Word not possible", "You can't spell that word from 'silkworm'!"),
    (RejectionReason.NOT_RECOGNIZED, "Word not recognized", "You can't just make them up, you know!"),
    (RejectionReason.TOO_TRIVIAL, "Word can't be added", "You can't just enter key word or any short words"),
])
def test_rejection_messages(reason, title, message):
    msg = rejection_message(reason, "silkworm")
    assert msg.title == title
    assert msg.message == message

@pytest.mark.parametrize("used", [["Silk"], ("SILK",), [" silk\n"]])
def test_already_used_ignores_case_of_used_words(used, spell_checker):
    outcome = validate_word("Silk", "silkworm", used, spell_checker)
    assert outcome.reason is RejectionReason.ALREADY_USED

def test_mixed_case_root_word_is_normalized(spell_checker):
    assert validate_word("silk", "SilkWorm", [], spell_checker).is_accepted
    assert validate_word("silkworm", "SilkWorm", [], spell_checker).reason is RejectionReason.TOO_TRIVIAL
