"""
vendors/perplexity/search_service.py
=====================================
Web search through Perplexity's online Sonar model.

Perplexity is OpenAI-compatible for the request/response envelope, but adds
its own request fields (search filters) and a top-level "citations" array in
the reply. The extra request fields travel in extra_body; the citations are
read from the dumped payload.
"""

# Python Packages
import openai

# Client
from ..openai.openai_client import OpenAIClient

# Base
from ..base import BaseSearchService, upstream_error

# Constants
from ...base import constants





class SearchService(BaseSearchService):
    """Perplexity implementation of SearchService."""

    provider_name         = "Perplexity"
    default_system_prompt = "Be precise and concise."

    def __init__(self, client = None):
        if client is None:
            client = OpenAIClient(
                api_key = constants.PERPLEXITY_API_KEY,
                provider = self.provider_name,
                env_var = "PERPLEXITY_API_KEY",
                base_url = constants.PERPLEXITY_BASE_URL
            ).get_client()

        self.client = client


    def _search(self, message: str, system_prompt: str) -> dict:
        try:
            response = self.client.chat.completions.create(
                model = constants.PERPLEXITY_SEARCH_MODEL,
                messages = [
                    {"role": "system", "content": system_prompt},
                    {"role": "user",   "content": message}
                ],
                temperature = constants.PERPLEXITY_SEARCH_TEMPERATURE,
                top_p = constants.PERPLEXITY_SEARCH_TOP_P,
                max_tokens = constants.PERPLEXITY_SEARCH_MAX_TOKENS,
                presence_penalty = 0,
                frequency_penalty = 1,
                stream = False,
                extra_body = {
                    "search_domain_filter":     [],
                    "return_images":            False,
                    "return_related_questions": False,
                    "search_recency_filter":    constants.PERPLEXITY_RECENCY_FILTER
                }
            )
        except openai.APIError as error:
            raise upstream_error(self.provider_name, error) from error

        data = self.read_openai_payload(response)

        return {
            "content":   data["content"],
            "citations": data["raw"].get("citations") or [],
            "model":     data["model"],
            "usage":     data["usage"]
        }
