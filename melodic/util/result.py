"""
StoreResult

Return type for the fail-open storage paths (context read/write, message
history read). A failed operation still yields a usable value; the error
rides alongside it instead of being raised, so callers keep serving and
tests can check that the fallback was taken.
"""

# Python Packages
from dataclasses import dataclass
from typing import Any, Optional





@dataclass
class StoreResult:
    """ Value plus the storage error that produced it, if any... """

    value: Any
    error: Optional[Exception] = None


    @property
    def ok(self) -> bool:
        return self.error is None


    @classmethod
    def success(cls, value: Any) -> "StoreResult":
        return cls(value = value)


    @classmethod
    def fallback(cls, value: Any, error: Exception) -> "StoreResult":
        return cls(value = value, error = error)
