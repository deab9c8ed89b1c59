from .chat_request import ChatRequest
