"""
vendors/base.py — Provider Interfaces
======================================
Every chat provider implements BaseChatService.complete() and every search
provider implements BaseSearchService.search(). Callers never see which
provider answered: replies are normalized to one shape.

Normalized chat completion
--------------------------
    {
        "id":      "chatcmpl-...",
        "model":   "gpt-4o",
        "choices": [{"index": 0,
                     "message": {"role": "assistant", "content": "..."},
                     "finish_reason": "stop"}],
        "usage":   {"prompt_tokens": 12, "completion_tokens": 30, "total_tokens": 42}
    }

Normalized search result
------------------------
    {"content": "...", "citations": ["https://..."], "model": "...", "usage": {...}}

Neither interface retries. One request per call, the SDK clients are built
with max_retries=0, and any failure surfaces as UpstreamException.
"""

# Python Packages
import logging
from typing import List, Dict, Optional

# Exceptions
from ..util.exceptions import UpstreamException
from ..util import messages as app_messages

logger = logging.getLogger(__name__)





def upstream_error(provider: str, error: Exception) -> UpstreamException:
    """
    Convert an SDK error (openai or anthropic) into UpstreamException.

    Status errors carry the HTTP status and the raw response body; connection
    errors have neither, so the error text is used as the body.
    """

    status_code = getattr(error, "status_code", None)
    response    = getattr(error, "response", None)
    body        = response.text if response is not None else str(error)

    logger.error("%s request failed: status=%s body=%s", provider, status_code, body)
    return UpstreamException(provider = provider, upstream_status = status_code, body = body)



def with_system_prompt(messages: List[Dict[str, str]], system_prompt: Optional[str]) -> List[Dict[str, str]]:
    """ Prepend *system_prompt* as a system message when one is given... """

    if not system_prompt:
        return list(messages)

    return [{"role": "system", "content": system_prompt}] + list(messages)





class BaseChatService:
    """
    Provider-agnostic chat completion interface.
    Subclasses set provider_name / default_model / default_max_tokens and
    implement _create().
    """

    provider_name      = "provider"
    default_model      = None
    default_max_tokens = 1000


    def complete(
        self,
        messages: List[Dict[str, str]],
        model: str = None,
        system_prompt: str = None,
        temperature: float = 0.7,
        max_tokens: int = None
    ) -> dict:
        """
        Run one chat completion.

        Args:
            messages:      OpenAI-style [{"role", "content"}, ...] list.
            model:         Provider model id; defaults per provider.
            system_prompt: Optional system prompt placed before *messages*.
            temperature:   Sampling temperature.
            max_tokens:    Reply budget; defaults per provider.

        Returns:
            Normalized completion dict (see module docstring).

        Raises:
            ConfigurationException: provider key missing.
            UpstreamException:      provider failure or unreadable reply.
        """

        payload = with_system_prompt(messages, system_prompt)
        model   = self.resolve_model(model)

        logger.info(
            "Calling %s chat completion | model=%s | messages=%d",
            self.provider_name, model, len(payload)
        )

        result = self._create(
            messages    = payload,
            model       = model,
            temperature = temperature,
            max_tokens  = max_tokens or self.default_max_tokens
        )

        if not result.get("choices"):
            raise UpstreamException(
                provider = self.provider_name,
                body = app_messages.ERROR["UPSTREAM_EMPTY_RESPONSE"].format(provider = self.provider_name)
            )

        return result


    def resolve_model(self, model: Optional[str]) -> str:
        return model or self.default_model


    def _create(self, messages, model, temperature, max_tokens) -> dict:
        raise NotImplementedError



    # ── Helpers ────────────────────────────────────────────────────────────────
    @staticmethod
    def normalize_openai_response(response) -> dict:
        """
        Reduce an openai-SDK ChatCompletion (OpenAI or any compatible gateway)
        to the normalized completion shape.
        """

        data    = response.model_dump()
        choices = []

        for index, choice in enumerate(data.get("choices") or []):
            message = choice.get("message") or {}
            choices.append({
                "index": choice.get("index", index),
                "message": {
                    "role":    message.get("role") or "assistant",
                    "content": message.get("content") or ""
                },
                "finish_reason": choice.get("finish_reason")
            })

        return {
            "id":      data.get("id"),
            "model":   data.get("model"),
            "choices": choices,
            "usage":   data.get("usage")
        }





class BaseSearchService:
    """
    Provider-agnostic web search interface.
    """

    provider_name         = "provider"
    default_system_prompt = ""


    def search(self, message: str, system_prompt: str = None) -> dict:
        """
        Answer *message* with live web results.

        Returns:
            {"content", "citations", "model", "usage"}
        """

        logger.info("Calling %s search", self.provider_name)
        return self._search(message, system_prompt or self.default_system_prompt)


    def _search(self, message: str, system_prompt: str) -> dict:
        raise NotImplementedError


    def read_openai_payload(self, response) -> dict:
        """
        Pull the answer text out of an openai-SDK ChatCompletion.

        Returns:
            {"content", "model", "usage", "raw"}, where raw is the full dumped
            payload so providers can read their own extra fields.
        """

        data    = response.model_dump()
        choices = data.get("choices") or []

        if not choices:
            raise UpstreamException(
                provider = self.provider_name,
                body = app_messages.ERROR["UPSTREAM_EMPTY_RESPONSE"].format(provider = self.provider_name)
            )

        message = choices[0].get("message") or {}

        return {
            "content": message.get("content") or "",
            "model":   data.get("model"),
            "usage":   data.get("usage"),
            "raw":     data
        }
