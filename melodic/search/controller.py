"""
Search Controller
Orchestrates between handler and service layer.
"""

# Python Packages
from typing import Optional

# Services
from .services.search_service import SearchService





class SearchController:

    def __init__(self):
        """ Initialize services... """

        self.search_service = SearchService()



    def search(self, message: str, system_prompt: Optional[str] = None) -> dict:
        """
        Answer *message* from live web results.

        Returns:
            {"content", "citations", "model", "usage"}
        """

        return self.search_service.search(message = message, system_prompt = system_prompt)
