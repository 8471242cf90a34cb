"""
Configuration for the document search engine.

Settings come from environment variables. For local development they can be
put into `.env.local` (highest priority) or `.env` at the project root:

    DOCSEARCH_STOP_WORDS="a an and in the"
    DOCSEARCH_LOG_LEVEL=DEBUG
    DOCSEARCH_LOG_FILE=logs/docsearch.log
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from .engine.tokenizer import split_into_words

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "logs/docsearch.log"


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment"""
    stop_words: Tuple[str, ...] = ()
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str = DEFAULT_LOG_FILE

    @property
    def console_level(self) -> int:
        """Numeric logging level for the console handler (unknown names fall back to INFO)"""
        return getattr(logging, self.log_level.upper(), logging.INFO)


def load_env_files(env_file: Optional[Path] = None) -> Optional[Path]:
    """
    Load environment variables from a dotenv file.

    Args:
        env_file: Explicit file to load. When omitted, `.env.local` is
            preferred over `.env` in the project root.

    Returns:
        Path of the loaded file, or None if nothing was found
    """
    candidates = [env_file] if env_file else [PROJECT_ROOT / ".env.local", PROJECT_ROOT / ".env"]

    for candidate in candidates:
        if candidate is not None and Path(candidate).exists():
            logger.info(f"Loading environment from: {candidate}")
            load_dotenv(candidate, override=True)
            return Path(candidate)

    logger.debug("No .env.local or .env file found - using system environment variables only")
    return None


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Build Settings from dotenv files and the process environment.

    Args:
        env_file: Optional dotenv file to load first

    Returns:
        Settings instance
    """
    load_env_files(env_file)

    stop_words_text = os.getenv("DOCSEARCH_STOP_WORDS", "")
    settings = Settings(
        stop_words=tuple(split_into_words(stop_words_text)),
        log_level=os.getenv("DOCSEARCH_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        log_file=os.getenv("DOCSEARCH_LOG_FILE", DEFAULT_LOG_FILE),
    )

    logger.debug(f"Settings loaded: {len(settings.stop_words)} stop words, log_level={settings.log_level}")
    return settings
