from .create_message_request import CreateMessageRequest
