"""
chat/config/__init__.py
=======================
Public surface of the chat configuration package.

Config files:
  chat_config       — API-level settings (history window, limits, default model)
  llm_config        — temperature / max_tokens for the chat call
  prompts           — persona and context-injection sentences
  context_patterns  — self-identification patterns used by the extractor
"""

from . import chat_config
from . import llm_config
from . import prompts
from . import context_patterns
