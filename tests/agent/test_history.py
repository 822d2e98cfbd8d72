"""Tests for conversation history."""

from thinkact.agent.history import ConversationHistory, Message


def test_start_holds_query():
    history = ConversationHistory.start("List files")
    assert list(history) == [Message("user", "List files")]


def test_append_returns_new_history():
    history = ConversationHistory.start("q")
    extended = history.assistant("reply").user("next")

    assert len(history) == 1
    assert len(extended) == 3
    assert extended.last == Message("user", "next")
    assert extended[1] == Message("assistant", "reply")


def test_empty_history_has_no_last():
    assert ConversationHistory().last is None


def test_to_api_puts_system_first():
    history = ConversationHistory.start("q").assistant("a")

    assert history.to_api("be helpful") == [
        {"role": "system", "content": "be helpful"},
        {"role": "user", "content": "q"},
        {"role": "assistant", "content": "a"},
    ]


def test_to_api_without_system():
    history = ConversationHistory.start("q")
    assert history.to_api() == [{"role": "user", "content": "q"}]
