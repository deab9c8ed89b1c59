"""
Models Package
Registers all SQLAlchemy ORM models so they are discoverable by Flask-SQLAlchemy.

Import order matters: models with foreign keys must be imported after
the models they reference.
"""

from .melodic_user import User
from .melodic_chat_message import ChatMessage
from .melodic_user_context import UserContext

__all__ = [
    "User",
    "ChatMessage",
    "UserContext",
]
