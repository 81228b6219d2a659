"""Interview appointment booking: department, leader, date and time slot."""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Protocol

DEPARTMENTS = (
    "控制部",
    "福利部",
    "记录部",
    "培训部",
    "研发部",
    "情报部",
    "安保部",
    "中央本部一区",
    "中央本部二区",
    "惩戒部",
)

BOOKING_WINDOW_DAYS = 30
BOOKED_SUFFIX = " (已预约)"
PROMPT = "请完成上述选择..."

MORNING_SLOTS = (
    "08:00-08:30", "08:30-09:00", "09:00-09:30", "09:30-10:00",
    "10:00-10:30", "10:30-11:00", "11:00-11:30", "11:30-12:00",
)
AFTERNOON_SLOTS = (
    "14:00-14:30", "14:30-15:00", "15:00-15:30", "15:30-16:00",
    "16:00-16:30", "16:30-17:00", "17:00-17:30", "17:30-18:00",
)

_LEADERS = {
    "控制部": ("Malkuth - 部长", "妮妮 - 队长", "耗 - 副队长"),
    "福利部": ("Chesed - 部长", "骨头哥 - 队长", "白发 - 副队长"),
}
_DEFAULT_LEADERS = ("Ayin - 部长", "苍蓝礼悼 - 队长", "堂吉诃德 - 副队长")


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def leaders_for(department: str) -> tuple[str, ...]:
    """Return the leaders a visitor may book with in a department."""
    return _LEADERS.get(department, _DEFAULT_LEADERS)


@dataclass(frozen=True)
class TimeSlot:
    """A half-hour interview slot, possibly already booked."""

    label: str
    booked: bool = False

    def display(self) -> str:
        return self.label + BOOKED_SUFFIX if self.booked else self.label


def generate_time_slots(rng: Optional[_RandomSource] = None) -> list[TimeSlot]:
    """Build the day's slots; roughly one in four is marked as booked."""
    source = rng if rng is not None else random.Random()
    return [
        TimeSlot(label, booked=source.randrange(4) == 0)
        for label in MORNING_SLOTS + AFTERNOON_SLOTS
    ]


def format_date(day: date) -> str:
    """Format a date as yyyy年MM月dd日."""
    return f"{day.year:04d}年{day.month:02d}月{day.day:02d}日"


class AppointmentBooking:
    """State of an interview booking being filled in step by step."""

    def __init__(self, today: Optional[date] = None, rng: Optional[_RandomSource] = None):
        self.today = today if today is not None else date.today()
        self._rng = rng if rng is not None else random.Random()
        self.department = ""
        self.leader = ""
        self.day: Optional[date] = None
        self.time = ""
        self.leaders: tuple[str, ...] = ()
        self.time_slots: list[TimeSlot] = []
        self.select_department(DEPARTMENTS[0])

    @property
    def first_day(self) -> date:
        return self.today

    @property
    def last_day(self) -> date:
        return self.today + timedelta(days=BOOKING_WINDOW_DAYS)

    def select_department(self, department: str) -> None:
        if department not in DEPARTMENTS:
            raise ValueError(f"unknown department: {department!r}")
        self.department = department
        self.leaders = leaders_for(department)
        self.leader = ""
        self.time = ""
        self.time_slots = []

    def select_leader(self, leader: str) -> None:
        if leader not in self.leaders:
            raise ValueError(f"{leader!r} is not a leader of {self.department}")
        self.leader = leader

    def select_date(self, day: date) -> None:
        if not self.first_day <= day <= self.last_day:
            raise ValueError(
                f"{day.isoformat()} is outside {self.first_day.isoformat()}"
                f"..{self.last_day.isoformat()}"
            )
        self.day = day
        self.time_slots = generate_time_slots(self._rng)

    def select_time(self, slot: str) -> None:
        match = next(
            (s for s in self.time_slots if slot in (s.label, s.display())),
            None,
        )
        if match is None:
            raise ValueError(f"no such time slot: {slot!r}")
        if match.booked:
            raise ValueError(f"time slot {match.label} is already booked")
        self.time = match.label

    def is_complete(self) -> bool:
        return bool(self.department and self.leader and self.day is not None and self.time)

    def summary(self) -> str:
        lines = []
        if self.department:
            lines.append(f"部门: {self.department}\n")
        if self.leader:
            lines.append(f"部长: {self.leader}\n")
        if self.day is not None:
            lines.append(f"日期: {format_date(self.day)}\n")
        if self.time:
            lines.append(f"时间: {self.time}\n")
        return "".join(lines) or PROMPT

    def confirm(self) -> str:
        if not self.is_complete():
            raise ValueError("the appointment is not fully selected")
        assert self.day is not None
        return (
            "预约成功！\n\n"
            f"部门: {self.department}\n"
            f"部长: {self.leader}\n"
            f"日期: {format_date(self.day)}\n"
            f"时间: {self.time}\n\n"
            "请按时参加面试，如需取消请提前联系公司。"
        )