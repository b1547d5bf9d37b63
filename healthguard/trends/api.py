# -*- coding: utf-8 -*-
"""Trends domain: API endpoints."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query

from ..assessment.api import classification_out, threshold_out
from ..assessment.classifier import evaluate_bp
from ..assessment.thresholds import thresholds
from ..config import settings
from .aggregation import AggregatedBucket, aggregate, aggregate_by_day, local_instant
from .formatting import format_date_range, get_time_ago_string
from .models import (
    AverageStatsOut,
    BucketOut,
    LatestReadingOut,
    RecordListResponse,
    RecordRowOut,
    TrendResponse,
    TrendSummaryResponse,
)
from .smoothing import apply_running_average
from .storage import (
    Profile,
    ProfileSource,
    SampleSource,
    default_profile_source,
    default_sample_source,
    load_profile,
    load_samples,
)
from .summary import (
    AverageStats,
    TrendTab,
    average_stats,
    chart_granularity,
    filter_by_range,
    latest_sample,
    list_records,
    recent_samples,
    select_chart_series,
    tab_date_range,
)

router = APIRouter(prefix="/api/trends", tags=["Trends"])


def get_sample_source() -> SampleSource:
    return default_sample_source()


def get_profile_source() -> ProfileSource:
    return default_profile_source()


def _parse_day(value: str, name: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid {name}: expected YYYY-MM-DD")


def _parse_range(start: Optional[str], end: Optional[str]) -> Optional[Tuple[date, date]]:
    if start is None and end is None:
        return None
    if start is None or end is None:
        raise HTTPException(status_code=400, detail="start and end must be given together")
    s = _parse_day(start, "start")
    e = _parse_day(end, "end")
    if e < s:
        raise HTTPException(status_code=400, detail="end must not be before start")
    return s, e


def _buckets_out(buckets: List[AggregatedBucket]) -> List[BucketOut]:
    return [
        BucketOut(
            label=b.label,
            bucket_start=b.bucket_start,
            systolic=b.systolic,
            diastolic=b.diastolic,
            heart_rate=b.heart_rate,
            count=b.count,
        )
        for b in buckets
    ]


def _stats_out(stats: AverageStats) -> AverageStatsOut:
    return AverageStatsOut(
        systolic=stats.systolic,
        diastolic=stats.diastolic,
        heart_rate=stats.heart_rate,
        heart_rate_min=stats.heart_rate_min,
        heart_rate_max=stats.heart_rate_max,
        count=stats.count,
    )


def _profile_band(profile: Optional[Profile]):
    if profile is None:
        return thresholds()
    return thresholds(profile.age, profile.gender)


@router.get("", response_model=TrendResponse, summary="Aggregated vital-sign trend")
async def trend(
    granularity: str = Query(default="day", pattern="^(day|week|month|none)$"),
    start: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    smooth: str = Query(default="none", description="none or avgN (running average over N buckets)"),
    exclude_zero: Optional[bool] = Query(default=None, description="ignore 0 (not measured) values in means"),
    samples_source: SampleSource = Depends(get_sample_source),
    profile_source: ProfileSource = Depends(get_profile_source),
):
    day_range = _parse_range(start, end)
    samples = await load_samples(samples_source)
    range_label = None
    if day_range:
        samples = filter_by_range(samples, *day_range)
        range_label = format_date_range(*day_range)

    buckets = aggregate(samples, granularity, exclude_zero_values=exclude_zero)
    buckets = apply_running_average(buckets, smooth)
    profile = await load_profile(profile_source)

    return TrendResponse(
        granularity=granularity,
        start=start,
        end=end,
        range_label=range_label,
        buckets=_buckets_out(buckets),
        stats=_stats_out(average_stats(samples)),
        thresholds=threshold_out(_profile_band(profile)),
    )


@router.get("/tab/{tab}", response_model=TrendResponse, summary="Chart series for a Trends tab")
async def trend_tab(
    tab: str,
    start: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    samples_source: SampleSource = Depends(get_sample_source),
    profile_source: ProfileSource = Depends(get_profile_source),
):
    try:
        trend_tab_value = TrendTab(tab)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown tab: {tab}")

    day_range = _parse_range(start, end)
    if day_range is None:
        window_start, window_end = tab_date_range(trend_tab_value)
        day_range = (window_start.date(), window_end.date())

    samples = filter_by_range(await load_samples(samples_source), *day_range)
    profile = await load_profile(profile_source)
    series = select_chart_series(samples, trend_tab_value, *day_range)

    return TrendResponse(
        granularity=chart_granularity(trend_tab_value, *day_range).value,
        start=day_range[0].isoformat(),
        end=day_range[1].isoformat(),
        range_label=format_date_range(*day_range),
        buckets=_buckets_out(series),
        stats=_stats_out(average_stats(samples)),
        thresholds=threshold_out(_profile_band(profile)),
    )


@router.get("/records", response_model=RecordListResponse, summary="Record list, newest first")
async def records(
    limit: Optional[int] = Query(default=None, ge=0),
    samples_source: SampleSource = Depends(get_sample_source),
):
    rows = list_records(await load_samples(samples_source))
    shown = rows if limit is None else rows[:limit]
    return RecordListResponse(
        total=len(rows),
        records=[
            RecordRowOut(
                id=r.id,
                time=r.time,
                date=r.date,
                bp=r.bp,
                hr=r.hr,
                recorded_at=r.recorded_at,
                label=r.label,
            )
            for r in shown
        ],
    )


@router.get("/summary", response_model=TrendSummaryResponse, summary="Latest reading and recent averages")
async def summary(
    samples_source: SampleSource = Depends(get_sample_source),
    profile_source: ProfileSource = Depends(get_profile_source),
):
    samples = await load_samples(samples_source)
    profile = await load_profile(profile_source) or Profile()
    now = datetime.now(timezone.utc)
    recent = recent_samples(samples, settings.recent_days, now=now)

    latest_out = None
    last_record_text = "暂无记录"
    latest = latest_sample(samples)
    if latest is not None:
        recorded_at = local_instant(latest)
        last_record_text = get_time_ago_string(recorded_at, now=now)
        status = evaluate_bp(latest.systolic, latest.diastolic, profile.age, profile.gender, profile.bmi)
        latest_out = LatestReadingOut(
            id=latest.id,
            systolic=latest.systolic,
            diastolic=latest.diastolic,
            heart_rate=latest.heart_rate,
            recorded_at=recorded_at,
            time_ago=last_record_text,
            status=classification_out(status),
        )

    return TrendSummaryResponse(
        latest=latest_out,
        last_record_text=last_record_text,
        recent_days=settings.recent_days,
        recent_stats=_stats_out(average_stats(recent)),
        chart=_buckets_out(aggregate_by_day(recent)),
    )
