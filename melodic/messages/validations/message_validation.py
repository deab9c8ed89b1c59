"""
Validation for the /api/messages endpoints.
"""

# Exceptions
from ...util.exceptions import ValidationException

# Messages
from ...util import messages

# Config
from ...chat.config import chat_config





class MessageValidation:

    @staticmethod
    def validate_body(data):
        if not data or not isinstance(data, dict):
            raise ValidationException(
                error_code = "INVALID_REQUEST",
                message = messages.ERROR["INVALID_REQUEST"]
            )


    @staticmethod
    def validate_session_id(session_id):
        if not isinstance(session_id, str) or len(session_id.strip()) == 0:
            raise ValidationException(
                error_code = "MISSING_SESSION_ID",
                message = messages.ERROR["MISSING_SESSION_ID"]
            )


    @staticmethod
    def validate_role(role):
        if role not in chat_config.ALLOWED_ROLES:
            raise ValidationException(
                error_code = "INVALID_ROLE",
                message = messages.ERROR["INVALID_ROLE"]
            )


    @staticmethod
    def validate_content(content):
        if not isinstance(content, str) or len(content.strip()) == 0:
            raise ValidationException(
                error_code = "MISSING_CONTENT",
                message = messages.ERROR["MISSING_CONTENT"]
            )


    @staticmethod
    def validate_user_id(user_id):
        if user_id is None:
            return

        # bool is an int subclass
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise ValidationException(
                error_code = "INVALID_USER_ID",
                message = messages.ERROR["INVALID_USER_ID"]
            )


    @staticmethod
    def validate_limit(limit) -> int:
        """
        Parse the raw ?limit= value. Returns it as an int in
        1..MESSAGES_MAX_LIMIT; anything else is a 400.
        """
        error = ValidationException(
            error_code = "INVALID_LIMIT",
            message = messages.ERROR["INVALID_LIMIT"].format(chat_config.MESSAGES_MAX_LIMIT)
        )

        try:
            limit = int(limit)
        except (TypeError, ValueError):
            raise error from None

        if limit < 1 or limit > chat_config.MESSAGES_MAX_LIMIT:
            raise error

        return limit
