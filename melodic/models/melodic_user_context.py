"""
Model: UserContext
Table: user_contexts

Facts remembered about the person behind a session, e.g. {"name": "Alice"}.
At most one row per session (unique session_id); rows are written through
atomic insert-on-conflict statements in ContextService.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db





class UserContext(db.Model):
    """Per-session key/value context map."""

    __tablename__ = "user_contexts"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    session_id = db.Column(
        db.String(255),
        nullable = False,
        unique = True,
        index = True,
        doc = "Session the facts belong to."
    )

    context = db.Column(
        db.JSON,
        nullable = False,
        default = dict,
        doc = "Mapping of fact name to fact value, e.g. {'name': 'Alice'}."
    )

    last_updated = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now(),
        onupdate = func.now()
    )

    def __repr__(self):
        return f"<UserContext {self.session_id}>"
