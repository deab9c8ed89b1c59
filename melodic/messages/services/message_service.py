"""
Service: MessageService

Stores and reads chat turns (table chat_messages), keyed by session id.

Design:
  - Reads are fail-open: a storage error is logged and an empty history is
    returned, so a database outage never blocks chat.
  - Writes and deletes raise StorageException; the caller decides whether
    the failure matters (the chat flow logs and carries on, the REST
    endpoints surface a 500).
  - All writes roll back on failure so a failed statement never poisons the
    SQLAlchemy session for the caller's later queries.
  - History is returned oldest first even though it is queried newest first
    (that is how "the last N" is selected).
"""

# Python Packages
import logging
from typing import List, Dict, Optional

# Database
from ...config.database import db

# Models
from ...models.melodic_chat_message import ChatMessage

# Exceptions
from ...util.exceptions import StorageException
from ...util.result import StoreResult
from ...util import messages

# Config
from ...chat.config import chat_config

logger = logging.getLogger(__name__)





class MessageService:
    """
    Persistence for ChatMessage rows. No business logic beyond CRUD.
    """

    # ── History Retrieval ──────────────────────────────────────────────────────

    def get_messages(
        self,
        session_id: str,
        limit: int = chat_config.MESSAGES_DEFAULT_LIMIT
    ) -> List[Dict]:
        """
        Return the *limit* most recent messages, oldest first.
        Empty list for unknown sessions or on storage error.
        """
        return self.fetch_messages(session_id, limit).value


    def fetch_messages(
        self,
        session_id: str,
        limit: int = chat_config.MESSAGES_DEFAULT_LIMIT
    ) -> StoreResult:
        """
        Same as get_messages(), wrapped in a StoreResult so the fallback path
        is visible to the caller.
        """
        try:
            rows = (
                ChatMessage.query
                .filter_by(session_id = session_id)
                .order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc())
                .limit(limit)
                .all()
            )

            # Reverse so the caller gets oldest → newest
            return StoreResult.success([row.to_dict() for row in reversed(rows)])

        except Exception as exc:
            db.session.rollback()
            logger.warning("get_messages failed (session=%s): %s", session_id, exc)
            return StoreResult.fallback([], exc)


    # ── Message Persistence ────────────────────────────────────────────────────

    def create_message(self, message: Dict) -> Dict:
        """
        Append one message.

        Args:
            message: {"sessionId", "role", "content", "userId"?}

        Returns:
            The stored row as a dict.

        Raises:
            StorageException: the insert failed.
        """
        try:
            row = ChatMessage(
                session_id = message["sessionId"],
                role       = message["role"],
                content    = message["content"],
                user_id    = message.get("userId")
            )
            db.session.add(row)
            db.session.commit()

            return row.to_dict()

        except Exception as exc:
            db.session.rollback()
            logger.error("create_message failed (session=%s): %s", message.get("sessionId"), exc)
            raise StorageException(
                error_code = "MESSAGE_CREATE_FAILED",
                message = messages.ERROR["MESSAGE_CREATE_FAILED"],
                details = str(exc)
            ) from exc


    def create_turn(self, session_id: str, message: str, reply: str, user_id: Optional[int] = None) -> List[Dict]:
        """
        Store a user message and its assistant reply in one transaction.
        Either both rows are committed or neither is.

        Returns:
            The two stored rows, user first.

        Raises:
            StorageException: the insert failed; nothing was stored.
        """
        try:
            rows = [
                ChatMessage(session_id = session_id, role = role, content = content, user_id = user_id)
                for role, content in (("user", message), ("assistant", reply))
            ]
            db.session.add_all(rows)
            db.session.commit()

            return [row.to_dict() for row in rows]

        except Exception as exc:
            db.session.rollback()
            logger.error("create_turn failed (session=%s): %s", session_id, exc)
            raise StorageException(
                error_code = "MESSAGE_CREATE_FAILED",
                message = messages.ERROR["MESSAGE_CREATE_FAILED"],
                details = str(exc)
            ) from exc


    # ── Session Lifecycle ──────────────────────────────────────────────────────

    def delete_all_messages(self, session_id: str) -> int:
        """
        Delete every message of *session_id*. Idempotent.

        Returns:
            Number of deleted rows (0 for an empty or unknown session).

        Raises:
            StorageException: the delete failed.
        """
        try:
            deleted = ChatMessage.query.filter_by(session_id = session_id).delete()
            db.session.commit()

            logger.info("Cleared %d messages (session=%s)", deleted, session_id)
            return deleted

        except Exception as exc:
            db.session.rollback()
            logger.error("delete_all_messages failed (session=%s): %s", session_id, exc)
            raise StorageException(
                error_code = "MESSAGE_DELETE_FAILED",
                message = messages.ERROR["MESSAGE_DELETE_FAILED"],
                details = str(exc)
            ) from exc
