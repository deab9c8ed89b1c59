"""
Chat validation for POST /api/chat.
Every check runs before any context read, provider call or write.
"""

# Exceptions
from ...util.exceptions import ValidationException

# Messages
from ...util import messages

# Config
from ..config import chat_config





class ChatValidation:

    @staticmethod
    def validate_body(data):
        if not data or not isinstance(data, dict):
            raise ValidationException(
                error_code = "INVALID_REQUEST",
                message = messages.ERROR["INVALID_REQUEST"]
            )


    @staticmethod
    def validate_message(message):
        if message is None:
            raise ValidationException(
                error_code = "MISSING_MESSAGE",
                message = messages.ERROR["MISSING_MESSAGE"]
            )

        if not isinstance(message, str) or len(message.strip()) == 0:
            raise ValidationException(
                error_code = "INVALID_MESSAGE",
                message = messages.ERROR["INVALID_MESSAGE"]
            )

        if len(message) > chat_config.CHAT_MESSAGE_MAX_LENGTH:
            raise ValidationException(
                error_code = "MESSAGE_TOO_LONG",
                message = messages.ERROR["MESSAGE_TOO_LONG"].format(chat_config.CHAT_MESSAGE_MAX_LENGTH)
            )


    @staticmethod
    def validate_api_key(api_key):
        if not api_key or not isinstance(api_key, str):
            raise ValidationException(
                error_code = "MISSING_API_KEY",
                message = messages.ERROR["MISSING_API_KEY"]
            )


    @staticmethod
    def validate_model(model):
        if model is None:
            return

        if not isinstance(model, str) or len(model.strip()) == 0:
            raise ValidationException(
                error_code = "INVALID_MODEL",
                message = messages.ERROR["INVALID_MODEL"]
            )


    @staticmethod
    def validate_session_id(session_id):
        if session_id is None:
            return

        if not isinstance(session_id, str) or len(session_id.strip()) == 0:
            raise ValidationException(
                error_code = "INVALID_SESSION_ID",
                message = messages.ERROR["INVALID_SESSION_ID"]
            )


    @staticmethod
    def validate_history(history):
        """
        None is allowed (stored history is used). Otherwise a list of
        {role: "user" | "assistant", content: str}.
        """
        if history is None:
            return

        if not isinstance(history, list):
            raise ValidationException(
                error_code = "INVALID_HISTORY",
                message = messages.ERROR["INVALID_HISTORY"]
            )

        for turn in history:
            if not isinstance(turn, dict) or not isinstance(turn.get("content"), str):
                raise ValidationException(
                    error_code = "INVALID_HISTORY",
                    message = messages.ERROR["INVALID_HISTORY"]
                )

            if turn.get("role") not in chat_config.ALLOWED_ROLES:
                raise ValidationException(
                    error_code = "INVALID_HISTORY_ROLE",
                    message = messages.ERROR["INVALID_HISTORY_ROLE"]
                )


    @staticmethod
    def validate_system_prompt(system_prompt):
        if system_prompt is not None and not isinstance(system_prompt, str):
            raise ValidationException(
                error_code = "INVALID_SYSTEM_PROMPT",
                message = messages.ERROR["INVALID_SYSTEM_PROMPT"]
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
