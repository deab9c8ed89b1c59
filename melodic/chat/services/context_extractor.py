"""
Context Extractor

Pulls self-identification facts ("my name is Alice", "call me Bob") out of a
user message and merges them into the session's context map.

Pure: no I/O, and the input mapping is never mutated.
"""

# Python Packages
from typing import Dict

# Config
from ..config.context_patterns import CONTEXT_PATTERNS, MIN_FACT_VALUE_LENGTH





def extract_user_info(message: str, current_context: Dict[str, str]) -> Dict[str, str]:
    """
    Return a copy of *current_context* updated with facts found in *message*.

    For each fact kind the patterns are tried in order; the first one whose
    captured value is long enough wins and overwrites any earlier value.
    No match leaves the content unchanged.

    >>> extract_user_info("My name is Alice", {})
    {'name': 'Alice'}
    >>> extract_user_info("I'm Bob and I like jazz", {"name": "Alice"})
    {'name': 'Bob'}
    """

    updated_context = dict(current_context or {})

    if not message:
        return updated_context

    for fact_key, patterns in CONTEXT_PATTERNS:
        for pattern in patterns:
            match = pattern.search(message)
            if not match or not match.group(1):
                continue

            value = match.group(1).strip()
            if len(value) > MIN_FACT_VALUE_LENGTH:
                updated_context[fact_key] = value
                break

    return updated_context
