from .message_validation import MessageValidation
