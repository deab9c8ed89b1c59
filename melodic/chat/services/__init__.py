"""
Chat Services Package

Service responsibilities:
  ConversationService — chat orchestrator (main entry point)
  ContextService      — per-session context map persistence
  extract_user_info   — pure fact extraction from a user message
"""

from .context_extractor import extract_user_info
from .context_service import ContextService
from .conversation_service import ConversationService, build_system_prompt, build_messages

__all__ = [
    "extract_user_info",
    "ContextService",
    "ConversationService",
    "build_system_prompt",
    "build_messages",
]
