"""
Service: SearchService

Thin wrapper over the configured web-search provider (SEARCH_PROVIDER).
Keeps the handler unaware of which vendor answers.
"""

# Python Packages
import logging
from typing import Optional

# Vendors
from ...vendors import get_search_service
from ...vendors.base import BaseSearchService

logger = logging.getLogger(__name__)





class SearchService:

    def __init__(self, search_service: BaseSearchService = None):
        self.search_service = search_service or get_search_service()


    def search(self, message: str, system_prompt: Optional[str] = None) -> dict:
        """
        Returns:
            {"content", "citations", "model", "usage"}
        """

        result = self.search_service.search(message, system_prompt = system_prompt)
        logger.info("Search answered with %d citation(s)", len(result["citations"]))

        return result
