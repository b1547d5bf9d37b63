# -*- coding: utf-8 -*-
"""Trends domain: Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..assessment.models import BPClassificationResponse, ThresholdResponse


class BucketOut(BaseModel):
    label: str = Field(..., description="yy/mm/dd, yy/mm or HH:MM")
    bucket_start: datetime
    systolic: int
    diastolic: int
    heart_rate: int
    count: int = Field(..., ge=1)


class AverageStatsOut(BaseModel):
    systolic: int = 0
    diastolic: int = 0
    heart_rate: int = 0
    heart_rate_min: int = 0
    heart_rate_max: int = 0
    count: int = 0


class TrendResponse(BaseModel):
    granularity: str = Field(..., description="day|week|month|none")
    start: Optional[str] = None
    end: Optional[str] = None
    range_label: Optional[str] = Field(None, description="e.g. 1月5日 - 1月11日")
    buckets: List[BucketOut]
    stats: AverageStatsOut
    thresholds: ThresholdResponse


class RecordRowOut(BaseModel):
    id: str
    time: str
    date: str
    bp: str
    hr: str
    recorded_at: Optional[datetime] = None
    label: str = "记录"


class RecordListResponse(BaseModel):
    total: int
    records: List[RecordRowOut]


class LatestReadingOut(BaseModel):
    id: str
    systolic: int
    diastolic: int
    heart_rate: int
    recorded_at: datetime
    time_ago: str
    status: BPClassificationResponse


class TrendSummaryResponse(BaseModel):
    latest: Optional[LatestReadingOut] = None
    last_record_text: str = Field("暂无记录", description="relative time of the newest reading")
    recent_days: int
    recent_stats: AverageStatsOut
    chart: List[BucketOut] = Field(default_factory=list, description="daily averages over the recent window")
