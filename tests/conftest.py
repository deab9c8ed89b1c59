import os

# Settings are read when melodic.base.constants is imported, so the test
# environment has to be in place before anything from melodic is imported.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CHAT_PROVIDER"] = "openai"
os.environ["SEARCH_PROVIDER"] = "perplexity"
os.environ["ALLOW_CLIENT_API_KEYS"] = "False"
os.environ["OPENAI_API_KEY"] = "test-openai-key"
os.environ["OPENROUTER_API_KEY"] = "test-openrouter-key"
os.environ["PERPLEXITY_API_KEY"] = "test-perplexity-key"
os.environ["ANTHROPIC_API_KEY"] = ""

import pytest  # noqa: E402

from melodic.app import app as flask_app  # noqa: E402
from melodic.config.database import db  # noqa: E402
from melodic.vendors.base import BaseChatService, BaseSearchService  # noqa: E402


class FakeChatService(BaseChatService):
    """Records every call and answers with a canned completion."""

    provider_name = "Fake"
    default_model = "fake-model"
    default_max_tokens = 321

    def __init__(self, reply="Hello there! 🎵", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def _create(self, messages, model, temperature, max_tokens):
        self.calls.append({
            "messages": messages,
            "model": model,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        if self.error:
            raise self.error
        return {
            "id": "chatcmpl-test",
            "model": model,
            "choices": [{
                "index": 0,
                "message": {"role": "assistant", "content": self.reply},
                "finish_reason": "stop",
            }],
            "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
        }


class FakeSearchService(BaseSearchService):
    provider_name = "FakeSearch"
    default_system_prompt = "Be precise."

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def _search(self, message, system_prompt):
        self.calls.append({"message": message, "system_prompt": system_prompt})
        if self.error:
            raise self.error
        return {
            "content": "Python 3.13 is the latest release. [1] https://python.org",
            "citations": ["https://python.org"],
            "model": "fake-search",
            "usage": {"total_tokens": 20},
        }


@pytest.fixture
def app():
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_chat():
    return FakeChatService()


@pytest.fixture
def chat_factory(monkeypatch, fake_chat):
    """Route the chat endpoint to fake_chat; records the api_key each call asked for."""

    requested_keys = []

    def _factory(provider=None, api_key=None):
        requested_keys.append(api_key)
        return fake_chat

    monkeypatch.setattr("melodic.chat.controller.get_chat_service", _factory)
    return requested_keys


@pytest.fixture
def fake_search(monkeypatch):
    service = FakeSearchService()
    monkeypatch.setattr(
        "melodic.search.services.search_service.get_search_service",
        lambda provider=None: service,
    )
    return service
