"""
vendors/anthropic/anthropic_client.py
======================================
Singleton Anthropic client.
Reads ANTHROPIC_API_KEY from environment via base/constants.py.
"""

# Python Packages
from anthropic import Anthropic

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import ConfigurationException





class AnthropicClient:
    """
    Singleton Anthropic client for the application.
    One shared instance reused across all requests; it is only built once
    a key is configured, so a missing key fails each request instead of
    the whole process.
    """

    _instance = None
    _client   = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(AnthropicClient, cls).__new__(cls)

        if cls._client is None and constants.ANTHROPIC_API_KEY:
            cls._client = Anthropic(api_key = constants.ANTHROPIC_API_KEY, max_retries = 0)

        return cls._instance


    def get_client(self) -> Anthropic:
        if self._client is None:
            raise ConfigurationException(provider = "Anthropic", env_var = "ANTHROPIC_API_KEY")
        return self._client
