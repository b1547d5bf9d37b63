# -*- coding: utf-8 -*-
"""
生命体征聚合

把不规则采样的血压 / 心率记录按日、周、月分桶，计算每桶的四舍五入均值与样本数，
并提供不聚合的逐条 "展示" 序列。

图表序列一律按时间升序输出；列表视图（见 summary.list_records）按时间降序。
两者方向不同，不要统一。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from ..config import settings
from .bucketing import start_of_day, start_of_month, start_of_week, to_local
from .formatting import format_date_short, format_month_short, format_time

logger = logging.getLogger(__name__)

VITAL_FIELDS = ("systolic", "diastolic", "heart_rate")


class Granularity(Enum):
    """聚合粒度"""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    NONE = "none"  # 展示模式：每条记录单独成桶


def _parse_iso(value: str) -> Optional[datetime]:
    if not value or not value.strip():
        return None
    text = value.strip().replace("Z", "+00:00")
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    # Postgres trims trailing zeros from fractional seconds (".12+00:00").
    try:
        parsed = pd.to_datetime(text, format="ISO8601")
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(parsed):
        return None
    return parsed.to_pydatetime()


def _as_int(value: Any) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0


@dataclass
class VitalSample:
    """一次测量记录。数值为 0 表示该项未测量。"""
    id: str
    systolic: int = 0  # 收缩压 (mmHg)
    diastolic: int = 0  # 舒张压 (mmHg)
    heart_rate: int = 0  # 心率 (bpm)
    recorded_at: Optional[datetime] = None
    user_id: Optional[str] = None

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "VitalSample":
        """Build a sample from a persistence record; never raises on bad timestamps."""
        raw_ts = record.get("recorded_at")
        if isinstance(raw_ts, datetime):
            recorded_at: Optional[datetime] = raw_ts
        elif isinstance(raw_ts, str):
            recorded_at = _parse_iso(raw_ts)
        else:
            recorded_at = None
        user_id = record.get("user_id")
        return cls(
            id=str(record.get("id") or ""),
            systolic=_as_int(record.get("systolic")),
            diastolic=_as_int(record.get("diastolic")),
            heart_rate=_as_int(record.get("heart_rate")),
            recorded_at=recorded_at,
            user_id=str(user_id) if user_id is not None else None,
        )


@dataclass
class AggregatedBucket:
    """趋势图上的一个点"""
    label: str
    bucket_start: datetime
    systolic: int
    diastolic: int
    heart_rate: int
    count: int


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def local_instant(sample: VitalSample) -> Optional[datetime]:
    """Local wall-clock instant of a sample, or None when recorded_at is unusable."""
    ts = sample.recorded_at
    if isinstance(ts, str):
        ts = _parse_iso(ts)
    if not isinstance(ts, datetime):
        logger.debug("Skipping sample %r without a valid recorded_at", getattr(sample, "id", None))
        return None
    return to_local(ts)


def rounded_mean(values: Sequence[int], exclude_zero_values: bool) -> int:
    if exclude_zero_values:
        values = [v for v in values if v]
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))


_BUCKETERS: Dict[Granularity, Tuple[Callable[[datetime], datetime], Callable[[datetime], str]]] = {
    Granularity.DAY: (start_of_day, format_date_short),
    Granularity.WEEK: (start_of_week, format_date_short),  # 标签为该周周一
    Granularity.MONTH: (start_of_month, format_month_short),
}


def aggregate(
    samples: Iterable[VitalSample],
    granularity: Granularity | str,
    *,
    exclude_zero_values: Optional[bool] = None,
) -> List[AggregatedBucket]:
    """
    按粒度聚合记录，输出按 bucket_start 升序排列。

    Args:
        samples: 原始记录（顺序任意）
        granularity: day / week / month / none
        exclude_zero_values: 为 True 时每项均值只统计非零值；
            默认沿用 settings.exclude_zero_values（默认 False，即 0 也计入均值）

    Returns:
        聚合后的桶列表；空输入返回空列表
    """
    granularity = Granularity(granularity)
    if granularity is Granularity.NONE:
        return format_records_for_display(samples)
    if exclude_zero_values is None:
        exclude_zero_values = settings.exclude_zero_values

    bucket_of, label_of = _BUCKETERS[granularity]
    grouped: Dict[datetime, List[VitalSample]] = {}
    for sample in samples:
        local = local_instant(sample)
        if local is None:
            continue
        grouped.setdefault(bucket_of(local), []).append(sample)

    result: List[AggregatedBucket] = []
    for start, members in grouped.items():
        result.append(
            AggregatedBucket(
                label=label_of(start),
                bucket_start=start,
                systolic=rounded_mean([m.systolic for m in members], exclude_zero_values),
                diastolic=rounded_mean([m.diastolic for m in members], exclude_zero_values),
                heart_rate=rounded_mean([m.heart_rate for m in members], exclude_zero_values),
                count=len(members),
            )
        )
    result.sort(key=lambda b: b.bucket_start)
    return result


def aggregate_by_day(samples: Iterable[VitalSample], **kwargs: Any) -> List[AggregatedBucket]:
    return aggregate(samples, Granularity.DAY, **kwargs)


def aggregate_by_week(samples: Iterable[VitalSample], **kwargs: Any) -> List[AggregatedBucket]:
    return aggregate(samples, Granularity.WEEK, **kwargs)


def aggregate_by_month(samples: Iterable[VitalSample], **kwargs: Any) -> List[AggregatedBucket]:
    return aggregate(samples, Granularity.MONTH, **kwargs)


def format_records_for_display(samples: Iterable[VitalSample]) -> List[AggregatedBucket]:
    """One bucket per sample, labelled HH:MM, ascending by time."""
    result: List[AggregatedBucket] = []
    for sample in samples:
        local = local_instant(sample)
        if local is None:
            continue
        result.append(
            AggregatedBucket(
                label=format_time(local),
                bucket_start=local,
                systolic=sample.systolic,
                diastolic=sample.diastolic,
                heart_rate=sample.heart_rate,
                count=1,
            )
        )
    result.sort(key=lambda b: b.bucket_start)
    return result
