# -*- coding: utf-8 -*-
"""
时间分桶

把任意时刻映射到其所在日 / 周（周一起始）/ 月的起始时刻。
所有计算都在查看者的本地日历上进行，而不是 UTC。
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, tzinfo
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _zone(name: str) -> Optional[tzinfo]:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, falling back to host local time", name)
        return None


def to_local(instant: datetime | date) -> datetime:
    """Convert an instant to a naive datetime on the local wall clock.

    Aware datetimes are shifted into ``settings.timezone`` (or the host zone
    when unset); naive ones are assumed to already be local.
    """
    if not isinstance(instant, datetime):
        return datetime(instant.year, instant.month, instant.day)
    if instant.tzinfo is None:
        return instant
    zone = _zone(settings.timezone) if settings.timezone else None
    return instant.astimezone(zone).replace(tzinfo=None)


def start_of_day(instant: datetime | date) -> datetime:
    return to_local(instant).replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(instant: datetime | date) -> datetime:
    """Monday 00:00 of the containing week; Sunday belongs to the week before."""
    day = start_of_day(instant)
    return day - timedelta(days=day.weekday())


def start_of_month(instant: datetime | date) -> datetime:
    return start_of_day(instant).replace(day=1)
