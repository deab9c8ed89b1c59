"""
vendors/openrouter/search_service.py
=====================================
Web search through OpenRouter's search-enabled model.

Unlike Perplexity, OpenRouter returns no structured citation list; sources
are pulled out of the answer text instead:
  1. numbered links, "[1] https://example.com"
  2. failing that, every bare URL in the text
"""

# Python Packages
import re
import openai
from typing import List

# Client
from .chat_service import openrouter_client

# Base
from ..base import BaseSearchService, upstream_error

# Constants
from ...base import constants

NUMBERED_CITATION = re.compile(r"\[(\d+)\]\s*(\bhttps?://[^\s,]+)")
BARE_URL          = re.compile(r"\bhttps?://[^\s,)]+")

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful web search assistant with real-time internet access. "
    "Provide accurate information from the web, with sources cited as numbered links "
    "at the end of your response. Keep your responses concise and informative."
)





def extract_citations(content: str) -> List[str]:
    """ Pull source URLs out of an answer... """

    citations = [match.group(2) for match in NUMBERED_CITATION.finditer(content)]

    if not citations:
        citations = BARE_URL.findall(content)

    return citations





class SearchService(BaseSearchService):
    """OpenRouter implementation of SearchService."""

    provider_name         = "OpenRouter"
    default_system_prompt = DEFAULT_SYSTEM_PROMPT

    def __init__(self, client = None):
        self.client = client or openrouter_client()


    def _search(self, message: str, system_prompt: str) -> dict:
        try:
            response = self.client.chat.completions.create(
                model = constants.OPENROUTER_SEARCH_MODEL,
                messages = [
                    {"role": "system", "content": system_prompt},
                    {"role": "user",   "content": message}
                ],
                temperature = constants.OPENROUTER_SEARCH_TEMPERATURE,
                max_tokens = constants.OPENROUTER_SEARCH_MAX_TOKENS
            )
        except openai.APIError as error:
            raise upstream_error(self.provider_name, error) from error

        data    = self.read_openai_payload(response)
        content = data["content"]

        return {
            "content":   content,
            "citations": extract_citations(content),
            "model":     data["model"],
            "usage":     data["usage"]
        }
