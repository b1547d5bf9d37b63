# -*- coding: utf-8 -*-
"""Trend page helpers: date windows, headline averages, the record list and tab series."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ..config import settings
from .aggregation import (
    AggregatedBucket,
    Granularity,
    VitalSample,
    aggregate_by_day,
    format_records_for_display,
    local_instant,
    rounded_mean,
)
from .bucketing import start_of_day, to_local
from .formatting import format_month_day, format_time, is_same_day


class TrendTab(Enum):
    """趋势页标签"""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    RECORD = "record"


# Days covered by each tab's default window, ending today.
TAB_WINDOW_DAYS = {
    TrendTab.DAY: 7,
    TrendTab.WEEK: 14,
    TrendTab.MONTH: 30,
    TrendTab.RECORD: 7,
}


@dataclass
class AverageStats:
    systolic: int = 0
    diastolic: int = 0
    heart_rate: int = 0
    heart_rate_min: int = 0
    heart_rate_max: int = 0
    count: int = 0


@dataclass
class RecordRow:
    """列表视图中的一行"""
    id: str
    time: str  # HH:MM，无法解析时为 "--:--"
    date: str  # M/D，无法解析时为 "未知"
    bp: str  # "120/80"，未测量项显示 "--"
    hr: str
    recorded_at: Optional[datetime] = None
    label: str = "记录"


def _now(now: Optional[datetime]) -> datetime:
    return to_local(now if now is not None else datetime.now(timezone.utc))


def filter_by_range(
    samples: Iterable[VitalSample],
    start: datetime | date,
    end: datetime | date,
) -> List[VitalSample]:
    """Samples recorded from local midnight of ``start`` through the whole of ``end``."""
    lower = start_of_day(start)
    upper = start_of_day(end) + timedelta(days=1)
    kept: List[VitalSample] = []
    for sample in samples:
        local = local_instant(sample)
        if local is not None and lower <= local < upper:
            kept.append(sample)
    return kept


def recent_samples(
    samples: Iterable[VitalSample],
    days: Optional[int] = None,
    now: Optional[datetime] = None,
) -> List[VitalSample]:
    """Samples from the last ``days`` calendar days, today included."""
    days = settings.recent_days if days is None else days
    cutoff = start_of_day(_now(now) - timedelta(days=max(days, 1) - 1))
    return [s for s in samples if (local_instant(s) or datetime.min) >= cutoff]


def average_stats(samples: Iterable[VitalSample]) -> AverageStats:
    items = list(samples)
    if not items:
        return AverageStats()
    rates = [s.heart_rate for s in items]
    return AverageStats(
        systolic=rounded_mean([s.systolic for s in items], False),
        diastolic=rounded_mean([s.diastolic for s in items], False),
        heart_rate=rounded_mean(rates, False),
        heart_rate_min=min(rates),
        heart_rate_max=max(rates),
        count=len(items),
    )


def latest_sample(samples: Iterable[VitalSample]) -> Optional[VitalSample]:
    latest: Optional[VitalSample] = None
    latest_at: Optional[datetime] = None
    for sample in samples:
        local = local_instant(sample)
        if local is None:
            continue
        if latest_at is None or local > latest_at:
            latest, latest_at = sample, local
    return latest


def list_records(samples: Iterable[VitalSample], limit: Optional[int] = None) -> List[RecordRow]:
    """
    列表视图：按时间降序（最新在前）。

    注意与图表序列（升序）方向相反。没有 recorded_at 的记录不显示；
    recorded_at 无法解析的记录以占位符显示并排在最后。
    """
    rows: List[Tuple[datetime, RecordRow]] = []
    for sample in samples:
        if not sample.recorded_at:
            continue
        local = local_instant(sample)
        row = RecordRow(
            id=sample.id,
            time=format_time(local) if local else "--:--",
            date=format_month_day(local) if local else "未知",
            bp=f"{sample.systolic or '--'}/{sample.diastolic or '--'}",
            hr=str(sample.heart_rate or "--"),
            recorded_at=local,
        )
        rows.append((local or datetime.min, row))

    rows.sort(key=lambda pair: pair[0], reverse=True)
    ordered = [row for _, row in rows]
    return ordered if limit is None else ordered[:max(limit, 0)]


def tab_date_range(tab: TrendTab | str, now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    tab = TrendTab(tab)
    end = _now(now)
    return end - timedelta(days=TAB_WINDOW_DAYS[tab] - 1), end


def chart_granularity(
    tab: TrendTab | str,
    start: datetime | date,
    end: datetime | date,
) -> Granularity:
    """
    趋势页标签对应的图表粒度。

    - day：单日范围显示逐条记录，多日范围显示日均值
    - week / month：在 14 / 30 天窗口内显示日均值
    - record：逐条记录
    """
    tab = TrendTab(tab)
    if tab is TrendTab.RECORD:
        return Granularity.NONE
    if tab is TrendTab.DAY and is_same_day(start, end):
        return Granularity.NONE
    return Granularity.DAY


def select_chart_series(
    samples: Iterable[VitalSample],
    tab: TrendTab | str,
    start: datetime | date,
    end: datetime | date,
) -> List[AggregatedBucket]:
    items = list(samples)
    if not items:
        return []
    if chart_granularity(tab, start, end) is Granularity.NONE:
        return format_records_for_display(items)
    return aggregate_by_day(items)
