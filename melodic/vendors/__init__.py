"""
vendors/__init__.py
====================
Public surface of the vendors package.

Services depend on the factory, never on a concrete provider:

    from ...vendors import get_chat_service, get_search_service

Concrete adapters stay importable for tests and scripts:

    from ...vendors.openai import ChatService
    from ...vendors.perplexity import SearchService
"""

from .base import BaseChatService, BaseSearchService
from .factory import get_chat_service, get_search_service

__all__ = [
    "BaseChatService",
    "BaseSearchService",
    "get_chat_service",
    "get_search_service",
]
