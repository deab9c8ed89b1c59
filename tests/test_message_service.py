import pytest

from melodic.config.database import db
from melodic.messages.services import MessageService
from melodic.util.exceptions import StorageException


def _add(service, session_id, *contents):
    roles = ("user", "assistant")
    return [
        service.create_message({"sessionId": session_id, "role": roles[i % 2], "content": content})
        for i, content in enumerate(contents)
    ]


def test_create_message_returns_stored_row(app):
    row = MessageService().create_message({"sessionId": "s1", "role": "user", "content": "Hello"})

    assert row["id"] is not None
    assert row["sessionId"] == "s1"
    assert row["role"] == "user"
    assert row["content"] == "Hello"
    assert row["userId"] is None
    assert row["createdAt"]


def test_get_messages_oldest_first(app):
    service = MessageService()
    _add(service, "s1", "one", "two", "three")

    contents = [m["content"] for m in service.get_messages("s1")]

    assert contents == ["one", "two", "three"]


def test_get_messages_keeps_most_recent_within_limit(app):
    service = MessageService()
    _add(service, "s1", "one", "two", "three", "four", "five")

    contents = [m["content"] for m in service.get_messages("s1", limit=2)]

    assert contents == ["four", "five"]


def test_unknown_session_is_empty(app):
    assert MessageService().get_messages("nobody") == []


def test_sessions_are_isolated(app):
    service = MessageService()
    _add(service, "s1", "mine")
    _add(service, "s2", "theirs")

    assert [m["content"] for m in service.get_messages("s1")] == ["mine"]


def test_delete_all_messages_returns_count_and_is_idempotent(app):
    service = MessageService()
    _add(service, "s1", "one", "two")
    _add(service, "s2", "other")

    assert service.delete_all_messages("s1") == 2
    assert service.delete_all_messages("s1") == 0
    assert service.get_messages("s1") == []
    assert len(service.get_messages("s2")) == 1


def test_read_falls_back_to_empty_on_storage_error(app):
    db.drop_all()

    result = MessageService().fetch_messages("s1")

    assert result.value == []
    assert result.error is not None


def test_write_failure_raises_storage_exception(app):
    db.drop_all()

    with pytest.raises(StorageException) as exc_info:
        MessageService().create_message({"sessionId": "s1", "role": "user", "content": "hi"})

    assert exc_info.value.error_code == "MESSAGE_CREATE_FAILED"
    assert exc_info.value.status_code == 500


def test_create_turn_stores_user_then_assistant(app):
    rows = MessageService().create_turn("s1", "Hello", "Hi there!")

    assert [(r["role"], r["content"]) for r in rows] == [("user", "Hello"), ("assistant", "Hi there!")]
    assert [m["role"] for m in MessageService().get_messages("s1")] == ["user", "assistant"]


def test_create_turn_is_all_or_nothing(app):
    service = MessageService()

    with pytest.raises(StorageException):
        service.create_turn("s1", "Hello", None)

    assert service.get_messages("s1") == []
