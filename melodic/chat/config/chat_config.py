"""
chat_config.py — API-Level Chat Settings
=========================================
Limits applied to POST /api/chat and the history endpoints.
"""

# Model used when the client does not send one
CHAT_DEFAULT_MODEL = "gpt-4o"

# Max prior turns forwarded to the provider. Older turns are dropped, so the
# 51st-newest message never reaches the provider.
CHAT_HISTORY_LIMIT = 50

# Default / ceiling for GET /api/messages/<session_id>?limit=
MESSAGES_DEFAULT_LIMIT = 50
MESSAGES_MAX_LIMIT     = 500

# Maximum accepted user message length (characters)
CHAT_MESSAGE_MAX_LENGTH = 10_000

ALLOWED_ROLES = ("user", "assistant")
