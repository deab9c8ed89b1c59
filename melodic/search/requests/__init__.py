from .search_request import SearchRequest
