""" OpenAI Vendor Package... """

# Services
from .openai_client import OpenAIClient
from .chat_service import ChatService

__all__ = ['OpenAIClient', 'ChatService']
