"""
Model: ChatMessage
Table: chat_messages

One turn of a chat session. Role is either 'user' or 'assistant'.
Rows are append-only: created on every successful chat turn (or through
POST /api/messages) and removed in bulk when a session's history is cleared.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db





class ChatMessage(db.Model):
    """ One message (user or assistant turn) in a chat session... """

    # Table Name
    __tablename__ = "chat_messages"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id"),
        nullable = True,
        doc = "Signed-in user who sent the message, if any."
    )

    session_id = db.Column(
        db.String(255),
        nullable = False,
        index = True,
        doc = "Opaque session identifier supplied by the client or generated on first chat."
    )

    role = db.Column(
        db.String(20),
        nullable = False,
        doc = "'user' or 'assistant'."
    )

    content = db.Column(db.Text, nullable = False)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )


    def to_dict(self) -> dict:
        return {
            "id":        self.id,
            "userId":    self.user_id,
            "sessionId": self.session_id,
            "role":      self.role,
            "content":   self.content,
            "createdAt": self.created_at.isoformat() if self.created_at else None
        }


    def __repr__(self):
        return f"<ChatMessage {self.id} session={self.session_id} role={self.role}>"
