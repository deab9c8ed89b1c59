"""
Service: UserService

Account lookups and creation for the optional sign-in.
Passwords are hashed on the model; the raw value is never stored.
"""

# Python Packages
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

# Database
from ...config.database import db

# Models
from ...models.melodic_user import User

# Exceptions
from ...util.exceptions import ValidationException, StorageException
from ...util import messages

logger = logging.getLogger(__name__)





class UserService:

    def get_user(self, user_id: int) -> Optional[User]:
        return db.session.get(User, user_id)


    def get_user_by_username(self, username: str) -> Optional[User]:
        return User.query.filter_by(username = username).first()


    def create_user(self, username: str, password: str) -> User:
        """
        Create an account.

        Raises:
            ValidationException: missing username/password, or username taken.
            StorageException:    any other write failure.
        """
        if not username or not username.strip():
            raise ValidationException(messages.ERROR["USERNAME_REQUIRED"], error_code = "USERNAME_REQUIRED")

        if not password:
            raise ValidationException(messages.ERROR["PASSWORD_REQUIRED"], error_code = "PASSWORD_REQUIRED")

        user = User(username = username.strip())
        user.set_password(password)

        try:
            db.session.add(user)
            db.session.commit()
            return user

        except IntegrityError as exc:
            db.session.rollback()
            raise ValidationException(
                messages.ERROR["USERNAME_TAKEN"], error_code = "USERNAME_TAKEN"
            ) from exc

        except Exception as exc:
            db.session.rollback()
            logger.error("create_user failed (username=%s): %s", username, exc)
            raise StorageException(
                error_code = "USER_CREATE_FAILED",
                message = messages.ERROR["USER_CREATE_FAILED"],
                details = str(exc)
            ) from exc
