"""Presentation rules for the live chat between a visitor and company staff."""

from __future__ import annotations

from datetime import datetime
from enum import Enum, IntEnum

SYSTEM_MESSAGE_TYPE = 1
TEXT_MESSAGE_TYPE = 0
SEND_KEYS = frozenset({"Return", "Enter"})
STAFF_JOINED_MARKER = "已接入"
WELCOME_TEXT = "您好！请描述您的问题，我们会尽快为您安排客服。"
SYSTEM_SENDER = "系统"

NOT_CONNECTED = " 客服聊天 - 未连接"
SESSION_ENDED = " 客服聊天 - 会话已结束"
CHATTING = " 与客服对话中"
WAITING_FOR_STAFF = " 客服聊天 - 等待客服接入..."
DEFAULT_STATUS = " 客服聊天"

JUST_NOW = "刚刚"


class SessionStatus(IntEnum):
    """State of a live chat session as stored in the database."""

    ENDED = 0
    ACTIVE = 1
    WAITING = 2


class BubbleStyle(Enum):
    """How a message bubble is placed and coloured."""

    OWN = "own"
    SYSTEM = "system"
    OTHER = "other"

    @property
    def alignment(self) -> str:
        return _STYLE_DETAILS[self][0]

    @property
    def background(self) -> str:
        return _STYLE_DETAILS[self][1]

    @property
    def text_color(self) -> str:
        return _STYLE_DETAILS[self][2]

    @property
    def max_width(self) -> int:
        return _STYLE_DETAILS[self][3]


_STYLE_DETAILS = {
    BubbleStyle.OWN: ("right", "#007AFF", "white", 300),
    BubbleStyle.SYSTEM: ("center", "#F2F2F7", "#8E8E93", 250),
    BubbleStyle.OTHER: ("left", "#E5E5EA", "#000000", 300),
}


def format_relative_time(time: datetime, now: datetime | None = None) -> str:
    """Describe a message time relative to now."""
    current = now if now is not None else datetime.now()
    seconds = int((current - time).total_seconds())
    if seconds < 60:
        return JUST_NOW
    if seconds < 3600:
        return f"{seconds // 60}分钟前"
    if time.date() == current.date():
        return time.strftime("%H:%M")
    return time.strftime("%m-%d %H:%M")


def connection_status(session_id: int, status: int = SessionStatus.ACTIVE, staff_name: str = "") -> str:
    """Return the status line shown above the chat."""
    if session_id <= 0:
        return NOT_CONNECTED
    if status == SessionStatus.ENDED:
        return SESSION_ENDED
    if status == SessionStatus.ACTIVE:
        return f"与客服 {staff_name} 对话中" if staff_name else CHATTING
    if status == SessionStatus.WAITING:
        return WAITING_FOR_STAFF
    return DEFAULT_STATUS


def bubble_style(sender_id: int, current_user_id: int, message_type: int) -> BubbleStyle:
    """Choose the bubble style for a message seen by the current user."""
    if sender_id == current_user_id:
        return BubbleStyle.OWN
    if message_type == SYSTEM_MESSAGE_TYPE:
        return BubbleStyle.SYSTEM
    return BubbleStyle.OTHER


def sender_display_name(real_name: str, username: str) -> str:
    """Prefer the real name, falling back to the user name."""
    return real_name or username


def is_send_key(key: str, shift: bool = False) -> bool:
    """Return whether a key press sends the message (Enter without Shift)."""
    return key in SEND_KEYS and not shift


def announces_staff_joined(message_type: int, content: str) -> bool:
    """Return whether a message is the system notice that staff joined."""
    return message_type == SYSTEM_MESSAGE_TYPE and STAFF_JOINED_MARKER in content