"""
Service: ConversationService
=============================
Runs one chat turn end to end.

Pipeline
--------
1. Resolve session       → client sessionId, or a fresh uuid4
2. Load context          → ContextService (row created lazily)
3. Extract & merge       → extract_user_info(); persist only if it changed
4. Compose system prompt → persona + "The user's <key> is <value>." per fact
5. Assemble history      → last CHAT_HISTORY_LIMIT {role, content} turns
6. Provider call         → BaseChatService.complete(), exactly once
7. Persist turn          → user + assistant rows in one transaction, best-effort
8. Return                → normalized completion + sessionId

Failure policy
--------------
Context and persistence problems never fail the turn (fail-open, logged).
Configuration and provider errors propagate to the handler untouched.
Nothing is retried.
"""

# Python Packages
import logging
import uuid
from typing import List, Dict, Optional

# Services
from .context_extractor import extract_user_info
from .context_service import ContextService
from ...messages.services.message_service import MessageService

# Vendors
from ...vendors.base import BaseChatService

# Exceptions
from ...util.exceptions import StorageException

# Config
from ..config import chat_config, llm_config, prompts

logger = logging.getLogger(__name__)





def build_system_prompt(context: Dict[str, str], base_prompt: Optional[str] = None) -> str:
    """
    Persona (or *base_prompt*) followed by one sentence per context fact and
    the usage instruction. No facts → the persona alone.
    """

    system_prompt = base_prompt or prompts.MELODIC_SYSTEM_PROMPT

    if not context:
        return system_prompt

    facts = " ".join(
        prompts.CONTEXT_FACT_TEMPLATE.format(key = key, value = value)
        for key, value in context.items()
    )

    return f"{system_prompt}\n\n{facts} {prompts.CONTEXT_USAGE_INSTRUCTION}"



def build_messages(
    system_prompt: str,
    history: Optional[List[Dict]],
    message: str,
    limit: int = chat_config.CHAT_HISTORY_LIMIT
) -> List[Dict[str, str]]:
    """
    [system] + last *limit* history turns + [user message].

    History entries are reduced to {role, content}; anything that is not a
    user/assistant turn with text is skipped.
    """

    turns = [
        {"role": turn.get("role"), "content": turn.get("content")}
        for turn in (history or [])
        if turn.get("role") in chat_config.ALLOWED_ROLES and turn.get("content")
    ]

    return (
        [{"role": "system", "content": system_prompt}]
        + turns[-limit:]
        + [{"role": "user", "content": message}]
    )





class ConversationService:
    """
    Chat orchestrator. Stateless between requests: everything it knows about
    a session comes from the context and message stores.
    """

    def __init__(
        self,
        chat_service: BaseChatService,
        context_service: ContextService = None,
        message_service: MessageService = None
    ):
        self.chat_service    = chat_service
        self.context_service = context_service or ContextService()
        self.message_service = message_service or MessageService()


    def chat(
        self,
        message: str,
        session_id: Optional[str] = None,
        conversation_history: Optional[List[Dict]] = None,
        model: Optional[str] = None,
        system_prompt: Optional[str] = None,
        user_id: Optional[int] = None
    ) -> dict:
        """
        Answer *message* within *session_id*.

        Args:
            message:              The new user message (already validated).
            session_id:           Client session id; None starts a new session.
            conversation_history: Prior turns held by the client. None → use
                                  the stored history for the session.
            model:                Provider model id (provider default if None).
            system_prompt:        Replaces the persona; facts are still appended.
            user_id:              Signed-in user, stored on both rows.

        Returns:
            Normalized completion dict plus "sessionId".

        Raises:
            ConfigurationException / UpstreamException from the provider.
        """

        session_id = session_id or self.new_session_id()

        # ── Context ────────────────────────────────────────────────────────────
        context         = self.context_service.get_context(session_id)
        updated_context = extract_user_info(message, context)

        if updated_context != context:
            logger.info("Context updated (session=%s): %s", session_id, sorted(updated_context))
            self.context_service.update_context(session_id, updated_context)

        # ── Prompt ─────────────────────────────────────────────────────────────
        if conversation_history is None:
            conversation_history = self.message_service.get_messages(
                session_id, limit = chat_config.CHAT_HISTORY_LIMIT
            )

        messages = build_messages(
            system_prompt = build_system_prompt(updated_context, system_prompt),
            history       = conversation_history,
            message       = message
        )

        # ── Provider ───────────────────────────────────────────────────────────
        response = self.chat_service.complete(
            messages    = messages,
            model       = model,
            temperature = llm_config.LLM_CHAT_TEMPERATURE,
            max_tokens  = llm_config.LLM_CHAT_MAX_TOKENS
        )

        # ── Persist ────────────────────────────────────────────────────────────
        reply = response["choices"][0]["message"]["content"]
        self._persist_turn(session_id, message, reply, user_id)

        return {**response, "sessionId": session_id}


    @staticmethod
    def new_session_id() -> str:
        return str(uuid.uuid4())



    # ── Private ────────────────────────────────────────────────────────────────

    def _persist_turn(self, session_id: str, message: str, reply: str, user_id: Optional[int]) -> bool:
        """
        Store the user message and the assistant reply together. Best-effort:
        the reply has already been produced, so a storage failure is logged,
        not raised. A failed turn leaves no rows behind.
        """

        try:
            self.message_service.create_turn(session_id, message, reply, user_id = user_id)
            return True

        except StorageException as exc:
            logger.warning("Chat turn not persisted (session=%s): %s", session_id, exc)
            return False
