"""
vendors/anthropic/chat_service.py
===================================
ChatService implementation using Anthropic Claude models.

Implements the same interface as vendors/openai/chat_service.py so the
factory can swap providers transparently.

Key difference from OpenAI:
  Anthropic separates the system prompt from the messages array.
  OpenAI sends system as {"role": "system", "content": "..."} inside messages.
  Anthropic takes system as a top-level parameter and messages must only
  contain "user" and "assistant" roles.

Callers always pass messages in the OpenAI format; this service splits the
system prompt out before the call and maps the reply back to the normalized
OpenAI-style completion.
"""

# Python Packages
import anthropic
from typing import List, Dict

# Client
from .anthropic_client import AnthropicClient

# Base
from ..base import BaseChatService, upstream_error

# Constants
from ...base import constants





class ChatService(BaseChatService):
    """
    Anthropic Claude implementation of ChatService.
    """

    provider_name      = "Anthropic"
    default_model      = constants.ANTHROPIC_DEFAULT_MODEL
    default_max_tokens = constants.ANTHROPIC_MAX_TOKENS

    def __init__(self, client = None):
        self.client = client or AnthropicClient().get_client()


    def resolve_model(self, model: str = None) -> str:
        # Client model ids default to OpenAI names ("gpt-4o"); those mean nothing here.
        if model and model.startswith("claude"):
            return model
        return self.default_model


    def _create(self, messages, model, temperature, max_tokens) -> dict:
        system_prompt, conversation = self._split_messages(messages)

        kwargs = dict(
            model       = model,
            max_tokens  = max_tokens,
            temperature = temperature,
            messages    = conversation,
        )

        # Only pass system when there is one
        if system_prompt:
            kwargs["system"] = system_prompt

        try:
            response = self.client.messages.create(**kwargs)
        except anthropic.APIError as error:
            raise upstream_error(self.provider_name, error) from error

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )

        return {
            "id":    response.id,
            "model": response.model,
            "choices": [{
                "index": 0,
                "message": {"role": "assistant", "content": text},
                "finish_reason": response.stop_reason
            }],
            "usage": {
                "prompt_tokens":     response.usage.input_tokens,
                "completion_tokens": response.usage.output_tokens,
                "total_tokens":      response.usage.input_tokens + response.usage.output_tokens
            }
        }



    # ── Private ────────────────────────────────────────────────────────────────
    def _split_messages(self, messages: List[Dict[str, str]]):
        """
        Split OpenAI-style messages into Anthropic format.

        Returns:
            (system_prompt: str, conversation: List[Dict])

        Rules:
          - System messages before any turn become the top-level system prompt.
          - All "user" and "assistant" messages form the conversation array.
          - Later system messages (rare) are prepended to the next user message.
          - Assistant turns before the first user turn are dropped; the
            conversation must open with a user message.
        """
        system_parts   = []
        conversation   = []
        pending_system = []

        for msg in messages:
            role    = msg.get("role", "user")
            content = msg.get("content", "")

            if role == "system":
                if not conversation:
                    system_parts.append(content)
                else:
                    pending_system.append(content)

            elif role == "assistant" and not conversation:
                continue

            elif role in ("user", "assistant"):
                if pending_system and role == "user":
                    content = "\n\n".join(pending_system) + "\n\n" + content
                    pending_system = []
                conversation.append({"role": role, "content": content})

        system_prompt = "\n\n".join(system_parts)
        return system_prompt, conversation
