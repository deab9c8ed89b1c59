""" Perplexity Vendor Package """

from .search_service import SearchService

__all__ = ['SearchService']
