# wordscramble/core/config.py
import pathlib
import logging
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

logger = logging.getLogger("wordscramble.core.config")  # Logger for this module

PACKAGE_DIR = pathlib.Path(__file__).resolve().parent.parent

class Settings(BaseSettings):
    PROJECT_NAME: str = "Word Scramble"

    # Newline-delimited list of candidate root words shipped with the package
    START_WORDS_FILE: pathlib.Path = PACKAGE_DIR / "data" / "start.txt"

    # Language tag handed to the spell-check oracle
    VALIDATION_LANGUAGE: str = "en"
    # Anything shorter than this is rejected as too trivial (3 -> "length > 2")
    MIN_WORD_LENGTH: int = 3
    # False keeps the per-letter rule ("aa" is possible from "cat").
    # True requires the candidate's letters to be a multiset subset of the root.
    STRICT_LETTER_COUNTS: bool = False
    # Words with a wordfreq Zipf frequency below this are "not recognized"
    SPELLCHECK_MIN_ZIPF: float = 1.0

    LOG_CONFIG_FILE: pathlib.Path = PACKAGE_DIR / "core" / "logging_config.json"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

@lru_cache()
def get_settings():
    settings_instance = Settings()
    logger.debug(f"Start words file set to: {settings_instance.START_WORDS_FILE}")
    return settings_instance

settings = get_settings()
