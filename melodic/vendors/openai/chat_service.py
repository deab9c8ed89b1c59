"""OpenAI Chat/Completion Service"""

# Python Packages
import openai
from typing import Optional

# Client
from .openai_client import OpenAIClient

# Base
from ..base import BaseChatService, upstream_error

# Constants
from ...base import constants





class ChatService(BaseChatService):
    """Chat completions straight against api.openai.com"""

    provider_name      = "OpenAI"
    default_model      = constants.OPENAI_DEFAULT_MODEL
    default_max_tokens = constants.OPENAI_MAX_TOKENS

    def __init__(self, api_key: Optional[str] = None, client = None):
        """
        Args:
            api_key: Legacy client-supplied key. None → server key.
            client:  Pre-built SDK client (tests inject fakes here).
        """
        if client is None:
            client = OpenAIClient(
                api_key = api_key or constants.OPENAI_API_KEY,
                provider = self.provider_name,
                env_var = "OPENAI_API_KEY",
                cache = api_key is None
            ).get_client()

        self.client = client


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
