""" OpenAI Client Configuration... """

# Python Packages
from openai import OpenAI
from typing import Optional, Dict

# Exceptions
from ...util.exceptions import ConfigurationException





class OpenAIClient:
    """
    Shared openai-SDK clients for the application.

    OpenAI, OpenRouter and Perplexity all speak the OpenAI wire format, so the
    same SDK serves all three; only base_url, key and headers differ. One
    client per (base_url, api_key) pair is built and reused across requests.
    Legacy client-supplied keys pass cache=False so they never stay in memory.
    """

    _clients: Dict[tuple, OpenAI] = {}


    def __init__(
        self,
        api_key: Optional[str],
        provider: str = "OpenAI",
        env_var: str = "OPENAI_API_KEY",
        base_url: Optional[str] = None,
        default_headers: Optional[Dict[str, str]] = None,
        cache: bool = True
    ):
        if not api_key:
            raise ConfigurationException(provider = provider, env_var = env_var)

        key = (base_url, api_key)

        if cache and key in self._clients:
            self._client = self._clients[key]
            return

        self._client = OpenAI(
            api_key = api_key,
            base_url = base_url,
            default_headers = default_headers,
            max_retries = 0
        )

        if cache:
            self._clients[key] = self._client



    @property
    def client(self) -> OpenAI:
        """ Get the OpenAI client instance... """

        return self._client


    def get_client(self) -> OpenAI:
        """Get the OpenAI client instance (alternative method)"""

        return self.client
