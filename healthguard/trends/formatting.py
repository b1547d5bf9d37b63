# -*- coding: utf-8 -*-
"""Chart axis labels, date-range headers and "time ago" strings."""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Optional

from .bucketing import to_local


def format_date_short(instant: datetime | date) -> str:
    """yy/mm/dd"""
    d = to_local(instant)
    return f"{d.year % 100:02d}/{d.month:02d}/{d.day:02d}"


def format_month_short(instant: datetime | date) -> str:
    """yy/mm"""
    d = to_local(instant)
    return f"{d.year % 100:02d}/{d.month:02d}"


def format_time(instant: datetime) -> str:
    """HH:MM"""
    d = to_local(instant)
    return f"{d.hour:02d}:{d.minute:02d}"


def format_month_day(instant: datetime | date) -> str:
    d = to_local(instant)
    return f"{d.month}/{d.day}"


def is_same_day(first: datetime | date, second: datetime | date) -> bool:
    a = to_local(first)
    b = to_local(second)
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def format_date_range(start: datetime | date, end: datetime | date) -> str:
    s = to_local(start)
    if is_same_day(start, end):
        return f"{s.month}月{s.day}日"
    e = to_local(end)
    return f"{s.month}月{s.day}日 - {e.month}月{e.day}日"


def get_time_ago_string(instant: datetime, now: Optional[datetime] = None) -> str:
    """
    相对时间描述，例如 "刚刚"、"5 分钟前"、"昨天"。

    Args:
        instant: 需要描述的时刻
        now: 参考时刻，默认取调用时的当前时间

    All divisions floor; there is no rounding.
    """
    reference = to_local(now if now is not None else datetime.now(timezone.utc))
    diff_seconds = (reference - to_local(instant)).total_seconds()
    diff_mins = math.floor(diff_seconds / 60)
    diff_hours = math.floor(diff_seconds / 3600)
    diff_days = math.floor(diff_seconds / 86400)

    if diff_mins < 1:
        return "刚刚"
    if diff_mins < 60:
        return f"{diff_mins} 分钟前"
    if diff_hours < 24:
        return f"{diff_hours} 小时前"
    if diff_days == 1:
        return "昨天"
    return f"{diff_days} 天前"
