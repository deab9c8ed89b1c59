"""
vendors/openrouter/chat_service.py
===================================
ChatService implementation routed through the OpenRouter gateway.

OpenRouter exposes an OpenAI-compatible API, so the openai SDK is reused
with a different base_url. OpenRouter model ids are namespaced
("openai/gpt-4o"); a bare id coming from the client ("gpt-4o") is assumed to
be an OpenAI model and gets the "openai/" prefix.
"""

# Python Packages
import openai
from typing import Optional

# Client
from ..openai.openai_client import OpenAIClient

# Base
from ..base import BaseChatService, upstream_error

# Constants
from ...base import constants





def openrouter_client():
    """ Shared OpenRouter client with the attribution headers OpenRouter asks for... """

    return OpenAIClient(
        api_key = constants.OPENROUTER_API_KEY,
        provider = "OpenRouter",
        env_var = "OPENROUTER_API_KEY",
        base_url = constants.OPENROUTER_BASE_URL,
        default_headers = {
            "HTTP-Referer": constants.OPENROUTER_REFERER,
            "X-Title":      constants.OPENROUTER_TITLE
        }
    ).get_client()





class ChatService(BaseChatService):
    """OpenRouter implementation of ChatService."""

    provider_name      = "OpenRouter"
    default_model      = constants.OPENROUTER_DEFAULT_MODEL
    default_max_tokens = constants.OPENROUTER_MAX_TOKENS

    def __init__(self, client = None):
        self.client = client or openrouter_client()


    def resolve_model(self, model: Optional[str]) -> str:
        model = model or self.default_model
        if "/" not in model:
            model = f"openai/{model}"
        return model


    def _create(self, messages, model, temperature, max_tokens) -> dict:
        try:
            response = self.client.chat.completions.create(
                model = model,
                messages = messages,
                temperature = temperature,
                max_tokens = max_tokens
            )
        except openai.APIError as error:
            raise upstream_error(self.provider_name, error) from error

        return self.normalize_openai_response(response)
