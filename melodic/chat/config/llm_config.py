"""
llm_config.py — Chat Sampling Settings
=======================================
Temperature for the main chat call. Reply budgets (max_tokens) belong to
each provider and live in base/constants.py; None here means "provider
default" (OpenAI 500, OpenRouter 1000, Anthropic 1000).
"""

# ── Chat Reply ─────────────────────────────────────────────────────────────────
# Friendly, a little playful. Same value for every provider.
LLM_CHAT_TEMPERATURE = 0.7
LLM_CHAT_MAX_TOKENS  = None
