""" OpenRouter Vendor Package """

from .chat_service import ChatService
from .search_service import SearchService

__all__ = ['ChatService', 'SearchService']
