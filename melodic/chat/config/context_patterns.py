"""
context_patterns.py — Self-Identification Patterns
====================================================
Patterns used by extract_user_info() to pick facts out of a user message.

Format: (fact_key, [compiled patterns, tried in order])

  - Matching is case-insensitive, so "[A-Z][a-z]+" also accepts lowercase
    words ("i'm tired" stores "tired"). Clients have relied on that looseness;
    tighten the patterns here, not in the extractor.
  - Group 1 of a pattern is the value. The first pattern whose value is
    longer than one character wins for that fact_key.

How to extend:
  Add a new (fact_key, [patterns]) entry. The key becomes the sentence
  "The user's <fact_key> is <value>." in the system prompt.
"""

# Python Packages
import re

_FLAGS = re.IGNORECASE

CONTEXT_PATTERNS = [
    (
        "name",
        [
            re.compile(r"my name is ([A-Z][a-z]+)", _FLAGS),
            re.compile(r"I am ([A-Z][a-z]+)", _FLAGS),
            re.compile(r"I'm ([A-Z][a-z]+)", _FLAGS),
            re.compile(r"call me ([A-Z][a-z]+)", _FLAGS),
        ]
    ),
]

# Captured values must be longer than this many characters
MIN_FACT_VALUE_LENGTH = 1
