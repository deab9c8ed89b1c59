"""
Search validation for POST /api/search.
"""

# Exceptions
from ...util.exceptions import ValidationException

# Messages
from ...util import messages





class SearchValidation:

    @staticmethod
    def validate_message(data):
        message = data.get("message") if isinstance(data, dict) else None

        if not isinstance(message, str) or len(message.strip()) == 0:
            raise ValidationException(
                error_code = "MISSING_MESSAGE",
                message = messages.ERROR["MISSING_MESSAGE"]
            )


    @staticmethod
    def validate_system_prompt(system_prompt):
        if system_prompt is not None and not isinstance(system_prompt, str):
            raise ValidationException(
                error_code = "INVALID_SYSTEM_PROMPT",
                message = messages.ERROR["INVALID_SYSTEM_PROMPT"]
            )
