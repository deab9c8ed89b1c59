from .search_validation import SearchValidation
