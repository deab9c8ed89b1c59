"""
Service: ContextService

Reads and writes the per-session context map (table user_contexts).

Design:
  - get_context() creates the row lazily, so callers never need an
    "ensure exists" step.
  - Both the lazy create and update_context() are single atomic
    INSERT ... ON CONFLICT statements. Two overlapping requests for a brand
    new session can never produce two rows; the last full-map write wins.
  - Fail-open: a storage error is logged, the session is rolled back and a
    fallback value is returned inside a StoreResult. Chat keeps working when
    context memory is broken.
  - An unsupported database dialect is a configuration error and is raised,
    not absorbed by the fail-open path.
  - No in-process cache: every call goes to the database, so any number of
    worker processes see the same context.
"""

# Python Packages
import logging
from typing import Dict

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.dialects import postgresql, sqlite

# Database
from ...config.database import db

# Models
from ...models.melodic_user_context import UserContext

# Exceptions
from ...util.exceptions import AppException
from ...util import messages

# Utils
from ...util.result import StoreResult

logger = logging.getLogger(__name__)

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite":     sqlite.insert,
}





class ContextService:
    """
    Persistence for UserContext rows. No business logic beyond CRUD.
    """

    # ── Public (fail-open values) ──────────────────────────────────────────────

    def get_context(self, session_id: str) -> Dict[str, str]:
        """
        Return the stored context for *session_id*, creating an empty one if
        none exists. Returns {} on any storage error.
        """
        return self.load_context(session_id).value


    def update_context(self, session_id: str, context_data: Dict[str, str]) -> bool:
        """
        Replace the context map for *session_id* (insert or update).
        Returns False on storage error instead of raising.
        """
        return self.save_context(session_id, context_data).value


    # ── Public (StoreResult) ───────────────────────────────────────────────────

    def load_context(self, session_id: str) -> StoreResult:
        """
        Returns:
            StoreResult whose value is the context dict ({} on failure).
        """
        try:
            record = UserContext.query.filter_by(session_id = session_id).first()
            if record:
                return StoreResult.success(dict(record.context or {}))

            statement = self._insert()(UserContext).values(
                session_id = session_id,
                context    = {}
            ).on_conflict_do_nothing(index_elements = ["session_id"])

            db.session.execute(statement)
            db.session.commit()

            return StoreResult.success({})

        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.warning("get_context failed (session=%s): %s", session_id, exc)
            return StoreResult.fallback({}, exc)


    def save_context(self, session_id: str, context_data: Dict[str, str]) -> StoreResult:
        """
        Returns:
            StoreResult whose value is True when the write committed.
        """
        try:
            insert = self._insert()
            statement = insert(UserContext).values(
                session_id   = session_id,
                context      = dict(context_data),
                last_updated = func.now()
            )
            statement = statement.on_conflict_do_update(
                index_elements = ["session_id"],
                set_ = {
                    "context":      statement.excluded.context,
                    "last_updated": func.now()
                }
            )

            db.session.execute(statement)
            db.session.commit()

            return StoreResult.success(True)

        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.warning("update_context failed (session=%s): %s", session_id, exc)
            return StoreResult.fallback(False, exc)


    # ── Private ────────────────────────────────────────────────────────────────

    def _insert(self):
        """ Dialect-specific insert() that supports ON CONFLICT... """

        dialect = db.engine.dialect.name

        if dialect not in _INSERT_BY_DIALECT:
            raise AppException(
                error_code = "UNSUPPORTED_DATABASE",
                message = messages.ERROR["UNSUPPORTED_DATABASE"].format(
                    dialect = dialect, allowed = ", ".join(_INSERT_BY_DIALECT)
                ),
                status_code = 500
            )

        return _INSERT_BY_DIALECT[dialect]
