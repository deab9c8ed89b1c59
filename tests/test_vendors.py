from types import SimpleNamespace

import httpx
import openai
import pytest
from openai.types.chat import ChatCompletion

from melodic.base import constants
from melodic.vendors import get_chat_service, get_search_service
from melodic.vendors.anthropic.anthropic_client import AnthropicClient
from melodic.vendors.anthropic.chat_service import ChatService as AnthropicChatService
from melodic.vendors.openai.chat_service import ChatService as OpenAIChatService
from melodic.vendors.openrouter.chat_service import ChatService as OpenRouterChatService
from melodic.vendors.openrouter.search_service import SearchService as OpenRouterSearchService, extract_citations
from melodic.vendors.perplexity.search_service import SearchService as PerplexitySearchService
from melodic.util.exceptions import AppException, ConfigurationException, UpstreamException


def completion(content="Hello!", model="gpt-4o", choices=True, **extra):
    return ChatCompletion.model_validate({
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 1700000000,
        "model": model,
        "choices": [{
            "index": 0,
            "message": {"role": "assistant", "content": content},
            "finish_reason": "stop",
        }] if choices else [],
        "usage": {"prompt_tokens": 5, "completion_tokens": 7, "total_tokens": 12},
        **extra,
    })


class FakeCompletions:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error:
            raise self.error
        return self.response


def fake_openai_client(response=None, error=None):
    completions = FakeCompletions(response, error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


def status_error(status=500, body="upstream exploded"):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status, text=body, request=request)
    return openai.APIStatusError(body, response=response, body=None)


# ── Chat adapters ─────────────────────────────────────────────────────────────

def test_openai_chat_normalizes_completion():
    client, completions = fake_openai_client(completion("Hi Dana"))

    result = OpenAIChatService(client=client).complete(
        [{"role": "user", "content": "hello"}], system_prompt="Be nice."
    )

    assert result["id"] == "chatcmpl-1"
    assert result["choices"][0]["message"] == {"role": "assistant", "content": "Hi Dana"}
    assert result["usage"]["total_tokens"] == 12
    assert completions.kwargs["messages"][0] == {"role": "system", "content": "Be nice."}
    assert completions.kwargs["model"] == constants.OPENAI_DEFAULT_MODEL
    assert completions.kwargs["max_tokens"] == constants.OPENAI_MAX_TOKENS


def test_openai_status_error_becomes_upstream_exception():
    client, _ = fake_openai_client(error=status_error(429, "rate limited"))

    with pytest.raises(UpstreamException) as exc_info:
        OpenAIChatService(client=client).complete([{"role": "user", "content": "hi"}])

    error = exc_info.value
    assert error.status_code == 500
    assert error.upstream_status == 429
    assert "rate limited" in error.message
    assert error.message.startswith("OpenAI API error: 429")


def test_empty_choices_is_an_upstream_error():
    client, _ = fake_openai_client(completion(choices=False))

    with pytest.raises(UpstreamException):
        OpenAIChatService(client=client).complete([{"role": "user", "content": "hi"}])


def test_openrouter_prefixes_bare_model_ids():
    client, completions = fake_openai_client(completion(model="openai/gpt-4o"))
    service = OpenRouterChatService(client=client)

    service.complete([{"role": "user", "content": "hi"}], model="gpt-4o")
    assert completions.kwargs["model"] == "openai/gpt-4o"

    service.complete([{"role": "user", "content": "hi"}], model="anthropic/claude-3-haiku")
    assert completions.kwargs["model"] == "anthropic/claude-3-haiku"


def test_anthropic_splits_system_prompt_and_normalizes_reply():
    response = SimpleNamespace(
        id="msg_1",
        model="claude-3-5-sonnet-latest",
        content=[SimpleNamespace(type="text", text="Hello "), SimpleNamespace(type="text", text="Dana")],
        stop_reason="end_turn",
        usage=SimpleNamespace(input_tokens=3, output_tokens=4),
    )
    messages_api = FakeCompletions(response)
    client = SimpleNamespace(messages=messages_api)

    result = AnthropicChatService(client=client).complete(
        [{"role": "system", "content": "persona"}, {"role": "user", "content": "hi"}],
        model="gpt-4o",
    )

    assert messages_api.kwargs["system"] == "persona"
    assert messages_api.kwargs["messages"] == [{"role": "user", "content": "hi"}]
    assert messages_api.kwargs["model"] == constants.ANTHROPIC_DEFAULT_MODEL
    assert result["choices"][0]["message"]["content"] == "Hello Dana"
    assert result["usage"]["total_tokens"] == 7


# ── Search adapters ───────────────────────────────────────────────────────────

def test_perplexity_reads_citations_from_payload():
    client, completions = fake_openai_client(
        completion("Answer", model="sonar", citations=["https://a.example", "https://b.example"])
    )

    result = PerplexitySearchService(client=client).search("latest news?")

    assert result["content"] == "Answer"
    assert result["citations"] == ["https://a.example", "https://b.example"]
    assert completions.kwargs["model"] == constants.PERPLEXITY_SEARCH_MODEL
    assert completions.kwargs["messages"][0]["content"] == PerplexitySearchService.default_system_prompt
    assert completions.kwargs["extra_body"]["search_recency_filter"] == "month"


def test_perplexity_without_citations_returns_empty_list():
    client, _ = fake_openai_client(completion("Answer"))

    assert PerplexitySearchService(client=client).search("q")["citations"] == []


def test_openrouter_search_extracts_citations_from_text():
    client, _ = fake_openai_client(completion("See [1] https://a.example and [2] https://b.example"))

    result = OpenRouterSearchService(client=client).search("q", system_prompt="custom")

    assert result["citations"] == ["https://a.example", "https://b.example"]


def test_extract_citations_falls_back_to_bare_urls():
    assert extract_citations("Read https://a.example, then (https://b.example)") == [
        "https://a.example",
        "https://b.example",
    ]
    assert extract_citations("no sources here") == []


# ── Factory ───────────────────────────────────────────────────────────────────

def test_factory_picks_configured_providers():
    assert isinstance(get_chat_service("openai"), OpenAIChatService)
    assert isinstance(get_chat_service("OpenRouter"), OpenRouterChatService)
    assert isinstance(get_search_service("perplexity"), PerplexitySearchService)
    assert isinstance(get_search_service("openrouter"), OpenRouterSearchService)


def test_factory_uses_openai_for_client_keys():
    service = get_chat_service("anthropic", api_key="sk-client")

    assert isinstance(service, OpenAIChatService)
    assert service.client.api_key == "sk-client"


def test_unsupported_provider():
    with pytest.raises(AppException) as exc_info:
        get_chat_service("nope")

    assert exc_info.value.error_code == "UNSUPPORTED_PROVIDER"


def test_missing_key_is_a_configuration_error(monkeypatch):
    monkeypatch.setattr(constants, "PERPLEXITY_API_KEY", "")

    with pytest.raises(ConfigurationException) as exc_info:
        get_search_service("perplexity")

    assert exc_info.value.needs_api_key
    assert "PERPLEXITY_API_KEY" in exc_info.value.message


def test_missing_anthropic_key_is_a_configuration_error(monkeypatch):
    monkeypatch.setattr(constants, "ANTHROPIC_API_KEY", "")
    monkeypatch.setattr(AnthropicClient, "_client", None)

    with pytest.raises(ConfigurationException):
        get_chat_service("anthropic")


def test_anthropic_drops_leading_assistant_turns():
    response = SimpleNamespace(
        id="msg_2",
        model="claude-3-5-sonnet-latest",
        content=[SimpleNamespace(type="text", text="ok")],
        stop_reason="end_turn",
        usage=SimpleNamespace(input_tokens=1, output_tokens=1),
    )
    messages_api = FakeCompletions(response)

    AnthropicChatService(client=SimpleNamespace(messages=messages_api)).complete([
        {"role": "system", "content": "persona"},
        {"role": "assistant", "content": "orphaned reply"},
        {"role": "user", "content": "earlier"},
        {"role": "assistant", "content": "answer"},
        {"role": "user", "content": "now"},
    ])

    assert [m["role"] for m in messages_api.kwargs["messages"]] == ["user", "assistant", "user"]
    assert messages_api.kwargs["messages"][0]["content"] == "earlier"
