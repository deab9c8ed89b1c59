"""
vendors/factory.py — AI Provider Factory
==========================================
Single place that decides which provider serves chat and web search.

How to switch providers
------------------------
In your .env file, set:

    CHAT_PROVIDER=openai        ← GPT models straight from OpenAI (default)
    CHAT_PROVIDER=openrouter    ← any model through the OpenRouter gateway
    CHAT_PROVIDER=anthropic     ← Claude models

    SEARCH_PROVIDER=perplexity  ← Perplexity Sonar online model (default)
    SEARCH_PROVIDER=openrouter  ← OpenRouter's gpt-4o-mini search preview

That's the ONLY change needed to switch providers. The conversation and
search services only ever see BaseChatService.complete() and
BaseSearchService.search().

Legacy client-supplied keys
----------------------------
Early clients sent their own OpenAI key in the request body. When a key is
passed here it is always used against OpenAI directly (the only provider the
legacy mode ever supported), regardless of CHAT_PROVIDER.
"""

# Python Packages
import logging
from typing import Optional

# Constants
from ..base import constants

# Exceptions
from ..util.exceptions import AppException
from ..util import messages

logger = logging.getLogger(__name__)

CHAT_PROVIDERS   = ("openai", "openrouter", "anthropic")
SEARCH_PROVIDERS = ("perplexity", "openrouter")





def _unsupported(provider: str, allowed: tuple) -> AppException:
    return AppException(
        error_code = "UNSUPPORTED_PROVIDER",
        message = messages.ERROR["UNSUPPORTED_PROVIDER"].format(
            provider = provider, allowed = ", ".join(allowed)
        ),
        status_code = 500
    )



def get_chat_service(provider: Optional[str] = None, api_key: Optional[str] = None):
    """
    Return the ChatService for *provider* (default: CHAT_PROVIDER).

    Args:
        provider: Override of the configured provider name.
        api_key:  Legacy client-supplied OpenAI key.

    Raises:
        AppException:           unsupported provider name.
        ConfigurationException: the provider's key is not configured.
    """

    if api_key:
        logger.info("Chat provider: OpenAI with client-supplied key (legacy mode)")
        from .openai.chat_service import ChatService
        return ChatService(api_key = api_key)

    provider = (provider or constants.CHAT_PROVIDER).lower().strip()
    logger.debug("Chat provider: %s", provider)

    if provider == "openai":
        from .openai.chat_service import ChatService
        return ChatService()

    elif provider == "openrouter":
        from .openrouter.chat_service import ChatService
        return ChatService()

    elif provider == "anthropic":
        from .anthropic.chat_service import ChatService
        return ChatService()

    raise _unsupported(provider, CHAT_PROVIDERS)



def get_search_service(provider: Optional[str] = None):
    """
    Return the SearchService for *provider* (default: SEARCH_PROVIDER).
    """

    provider = (provider or constants.SEARCH_PROVIDER).lower().strip()
    logger.debug("Search provider: %s", provider)

    if provider == "perplexity":
        from .perplexity.search_service import SearchService
        return SearchService()

    elif provider == "openrouter":
        from .openrouter.search_service import SearchService
        return SearchService()

    raise _unsupported(provider, SEARCH_PROVIDERS)
