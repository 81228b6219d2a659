"""An HR assistant conversation with its SQLite-backed message history."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import datetime
from os import PathLike
from typing import Optional, Union

from cyanla.chatrules import (
    BACK_TO_AI_TEXT,
    CLEARED_TEXT,
    ERROR_ACTIONS,
    ERROR_PREFIX,
    HUMAN_ACTION,
    TRANSFER_NOTICE,
    WELCOME_TEXT,
    ChatMessage,
    MessageType,
    action_buttons_for,
    generate_response,
    new_session_id,
    wants_human,
)

RECENT_CONTEXT_SIZE = 5
AUTOSAVE_EVERY = 10

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS ai_chat_messages ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "session_id TEXT,"
    "content TEXT,"
    "message_type INTEGER,"
    "timestamp TEXT)"
)

_SPEAKERS = {MessageType.USER: "访客：", MessageType.ROBOT: "AI助手："}


class ChatHistoryStore:
    """Persists assistant messages in an SQLite database."""

    def __init__(self, path: Union[str, PathLike] = ":memory:"):
        self._connection: Optional[sqlite3.Connection] = sqlite3.connect(str(path))
        with self._connection:
            self._connection.execute(_CREATE_TABLE)

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def _require_open(self) -> sqlite3.Connection:
        if self._connection is None:
            raise ValueError("the chat history store is closed")
        return self._connection

    def save(self, messages) -> int:
        """Append the messages to the database and return how many were written."""
        connection = self._require_open()
        rows = [
            (
                message.session_id,
                message.content,
                int(message.type),
                message.timestamp.isoformat(timespec="seconds"),
            )
            for message in messages
        ]
        with connection:
            connection.executemany(
                "INSERT INTO ai_chat_messages (session_id, content, message_type, timestamp) "
                "VALUES (?, ?, ?, ?)",
                rows,
            )
        return len(rows)

    def load(self, session_id: str) -> list[ChatMessage]:
        """Return the stored messages of a session in the order they were saved."""
        connection = self._require_open()
        cursor = connection.execute(
            "SELECT content, message_type, timestamp FROM ai_chat_messages "
            "WHERE session_id = ? ORDER BY id",
            (session_id,),
        )
        return [
            ChatMessage(
                content=content,
                type=MessageType(message_type),
                timestamp=datetime.fromisoformat(timestamp),
                session_id=session_id,
            )
            for content, message_type, timestamp in cursor
        ]

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> "ChatHistoryStore":
        return self

    def __exit__(self, *args) -> None:
        self.close()


@dataclass(frozen=True)
class HumanServiceRequest:
    """A hand-over of the conversation to a human agent."""

    user_id: str
    user_name: str
    context: str


class ChatSession:
    """One visitor's conversation with the HR assistant."""

    def __init__(
        self,
        store: Optional[ChatHistoryStore] = None,
        user_id: str = "",
        user_name: str = "",
    ):
        self.store = store
        self.user_id = user_id
        self.user_name = user_name
        self.session_id = new_session_id()
        self.history: list[ChatMessage] = []
        self.message_count = 0
        self.current_context = ""
        self.awaiting_reply = False
        self.actions: list[str] = []
        self.transferred = False
        self.human_requests: list[HumanServiceRequest] = []

    def _add(self, content: str, message_type: MessageType) -> ChatMessage:
        message = ChatMessage(content, message_type, datetime.now(), self.session_id)
        self.history.append(message)
        self.message_count += 1
        if self.store is not None and self.message_count % AUTOSAVE_EVERY == 0:
            self.store.save(self.history)
        return message

    def welcome(self) -> ChatMessage:
        return self._add(WELCOME_TEXT, MessageType.ROBOT)

    def send(self, text: str) -> Optional[str]:
        """Record the visitor's message.

        Returns the recent conversation to send with the AI request, or None
        when the message asked for a human agent and the hand-over happened.
        """
        text = text.strip()
        if not text:
            raise ValueError("the message is empty")
        if self.awaiting_reply:
            raise RuntimeError("still waiting for the assistant's reply")
        self._add(text, MessageType.USER)
        self.current_context = text
        if wants_human(text):
            self.transfer_to_human()
            return None
        self.awaiting_reply = True
        return self.recent_context()

    def recent_context(self) -> str:
        """Return the last few user and assistant messages as dialogue lines."""
        return "".join(
            _SPEAKERS[message.type] + message.content + "\n"
            for message in self.history[-RECENT_CONTEXT_SIZE:]
            if message.type in _SPEAKERS
        )

    def receive_reply(
        self, reply: str, emergency_level: str = "", department: str = ""
    ) -> list[str]:
        """Record the assistant's reply and return the action buttons it calls for."""
        self.awaiting_reply = False
        self._add(reply, MessageType.ROBOT)
        self.actions = action_buttons_for(emergency_level, department)
        return list(self.actions)

    def receive_error(self, error: str) -> ChatMessage:
        """Fall back to the built-in reply when the AI service failed."""
        self.awaiting_reply = False
        self.last_error = error
        message = self._add(
            ERROR_PREFIX + generate_response(self.current_context), MessageType.ROBOT
        )
        self.actions = list(ERROR_ACTIONS)
        return message

    def transfer_to_human(self) -> HumanServiceRequest:
        """Announce the hand-over and return it with the whole dialogue so far."""
        self._add(TRANSFER_NOTICE, MessageType.SYSTEM)
        context = "".join(
            _SPEAKERS[message.type] + message.content + "\n"
            for message in self.history
            if message.type in _SPEAKERS
        )
        request = HumanServiceRequest(self.user_id, self.user_name, context)
        self.human_requests.append(request)
        self.transferred = True
        self.actions = []
        return request

    def return_to_ai(self) -> ChatMessage:
        """Leave the hand-over panel and resume with the assistant."""
        self.transferred = False
        self.actions = []
        return self._add(BACK_TO_AI_TEXT, MessageType.ROBOT)

    def click_action(self, action: str) -> Union[ChatMessage, HumanServiceRequest]:
        if action not in self.actions:
            raise ValueError(f"no such action: {action!r}")
        if HUMAN_ACTION in action:
            return self.transfer_to_human()
        message = self._add(
            "您选择了：" + action + "\n\n相关功能正在开发中。如需立即协助，建议转人工客服。",
            MessageType.SYSTEM,
        )
        self.actions = []
        return message

    def clear(self) -> ChatMessage:
        """Forget the conversation and greet the visitor again."""
        self.history.clear()
        self.message_count = 0
        self.actions = []
        return self._add(CLEARED_TEXT, MessageType.ROBOT)