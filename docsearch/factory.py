"""
Factory to create SearchServer instances based on configuration.
"""

import logging
from typing import Optional

from .config import Settings, load_settings
from .engine.search_server import SearchServer

logger = logging.getLogger(__name__)


class SearchServerFactory:
    """Factory to create search servers from environment settings."""

    @classmethod
    def create(cls, settings: Optional[Settings] = None) -> SearchServer:
        """
        Create a SearchServer configured from settings.

        Config (env vars, see docsearch.config):
            DOCSEARCH_STOP_WORDS: space-separated stop words

        Args:
            settings: Pre-loaded settings (default: load_settings())

        Returns:
            Empty SearchServer

        Raises:
            InvalidTermError: a configured stop word is invalid
        """
        settings = settings or load_settings()

        try:
            server = SearchServer(settings.stop_words)
        except Exception as e:
            logger.error(f"Failed to create search server: {e}")
            raise

        logger.info(f"Created search server with {len(server.stop_words)} stop words")
        return server
