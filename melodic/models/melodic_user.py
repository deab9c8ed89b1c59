"""
Model: User
Table: users

Account used by the optional sign-in that gates web search on the client.
Only the password hash is stored.
"""

# Python Packages
from werkzeug.security import generate_password_hash, check_password_hash

# Database
from ..config.database import db





class User(db.Model):
    """A signed-in Melodic user."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    username = db.Column(db.String(255), nullable = False, unique = True)

    password = db.Column(
        db.String(255),
        nullable = False,
        doc = "werkzeug password hash, never the raw password."
    )

    # Relationship
    messages = db.relationship("ChatMessage", backref = "user", lazy = "select")


    def set_password(self, raw_password: str):
        self.password = generate_password_hash(raw_password)


    def check_password(self, raw_password: str) -> bool:
        return check_password_hash(self.password, raw_password)


    def to_dict(self) -> dict:
        return {"id": self.id, "username": self.username}


    def __repr__(self):
        return f"<User {self.username}>"
