from datetime import datetime

import pytest

from cyanla.chat import ChatHistoryStore, ChatSession, HumanServiceRequest
from cyanla.chatrules import (
    BACK_TO_AI_TEXT,
    CLEARED_TEXT,
    ERROR_ACTIONS,
    ERROR_PREFIX,
    TRANSFER_NOTICE,
    WELCOME_TEXT,
    ChatMessage,
    MessageType,
    action_buttons_for,
    generate_response,
)


@pytest.fixture
def store():
    with ChatHistoryStore(":memory:") as opened:
        yield opened


def test_store_round_trip(tmp_path):
    stamp = datetime(2024, 5, 6, 7, 8, 9, 123456)
    messages = [
        ChatMessage("hello", MessageType.USER, stamp, "s1"),
        ChatMessage("hi there", MessageType.ROBOT, stamp, "s1"),
    ]
    with ChatHistoryStore(tmp_path / "chat.db") as history:
        assert history.save(messages) == 2
        loaded = history.load("s1")
    assert [(m.content, m.type) for m in loaded] == [
        ("hello", MessageType.USER),
        ("hi there", MessageType.ROBOT),
    ]
    assert all(m.timestamp == stamp.replace(microsecond=0) for m in loaded)


def test_store_separates_sessions(store):
    store.save([ChatMessage("a", MessageType.USER, datetime.now(), "one")])
    assert store.load("two") == []
    assert len(store.load("one")) == 1


def test_closed_store_rejects_use():
    history = ChatHistoryStore()
    history.close()
    with pytest.raises(ValueError):
        history.save([])
    with pytest.raises(ValueError):
        history.load("x")


def test_welcome_message():
    session = ChatSession(None, "1", "Alice")
    message = session.welcome()
    assert message.content == WELCOME_TEXT
    assert message.type is MessageType.ROBOT
    assert message.session_id == session.session_id


def test_send_empty_raises():
    session = ChatSession(None, "1", "Alice")
    with pytest.raises(ValueError):
        session.send("   ")


def test_send_returns_context_and_blocks_until_reply():
    session = ChatSession(None, "1", "Alice")
    context = session.send("  hello  ")
    assert context == "访客：hello\n"
    with pytest.raises(RuntimeError):
        session.send("again")
    session.receive_reply("answer")
    assert session.send("again").endswith("AI助手：answer\n访客：again\n")


def test_recent_context_keeps_last_five():
    session = ChatSession(None, "1", "Alice")
    for number in range(8):
        session.send(f"q{number}")
        session.receive_reply(f"a{number}")
    context = session.recent_context()
    assert context.count("\n") == 5
    assert context.endswith("AI助手：a7\n")
    assert "q0" not in context


def test_transfer_keyword_hands_over():
    session = ChatSession(None, "7", "Bob")
    session.welcome()
    assert session.send("我要转人工") is None
    assert session.history[-1].content == TRANSFER_NOTICE
    assert session.history[-1].type is MessageType.SYSTEM
    request = session.human_requests[-1]
    assert request == HumanServiceRequest(
        "7", "Bob", "AI助手：" + WELCOME_TEXT + "\n访客：我要转人工\n"
    )
    assert session.transferred
    assert not session.awaiting_reply


def test_return_to_ai():
    session = ChatSession(None, "7", "Bob")
    session.transfer_to_human()
    message = session.return_to_ai()
    assert message.content == BACK_TO_AI_TEXT
    assert not session.transferred


def test_receive_reply_actions():
    session = ChatSession(None, "1", "Alice")
    session.send("hello")
    actions = session.receive_reply("reply", "", "控制部")
    assert actions == action_buttons_for("", "控制部")
    assert session.history[-1].content == "reply"


def test_receive_error_falls_back():
    session = ChatSession(None, "1", "Alice")
    session.send("我想预约")
    message = session.receive_error("timeout")
    assert message.content == ERROR_PREFIX + generate_response("我想预约")
    assert session.actions == list(ERROR_ACTIONS)
    assert not session.awaiting_reply


def test_click_action_unknown_raises():
    session = ChatSession(None, "1", "Alice")
    with pytest.raises(ValueError):
        session.click_action("nothing")


def test_click_action_records_choice():
    session = ChatSession(None, "1", "Alice")
    session.send("x")
    session.receive_error("down")
    choice = ERROR_ACTIONS[0]
    message = session.click_action(choice)
    assert message.content.startswith("您选择了：" + choice)
    assert message.type is MessageType.SYSTEM
    assert session.actions == []


def test_click_human_action_transfers():
    session = ChatSession(None, "1", "Alice")
    session.send("x")
    session.receive_error("down")
    result = session.click_action(ERROR_ACTIONS[-1])
    assert isinstance(result, HumanServiceRequest)
    assert session.history[-1].content == TRANSFER_NOTICE


def test_autosave_every_ten_messages(store):
    session = ChatSession(store, "1", "Alice")
    for number in range(5):
        session.send(f"q{number}")
        assert store.load(session.session_id) == []
        session.receive_reply(f"a{number}")
    saved = store.load(session.session_id)
    assert [m.content for m in saved] == [m.content for m in session.history]


def test_clear_resets_history():
    session = ChatSession(None, "1", "Alice")
    session.welcome()
    session.send("hello")
    message = session.clear()
    assert session.history == [message]
    assert message.content == CLEARED_TEXT
    assert session.message_count == 1