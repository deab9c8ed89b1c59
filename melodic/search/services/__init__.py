from .search_service import SearchService
