# -*- coding: utf-8 -*-
"""
趋势分析模块

生命体征按日 / 周 / 月聚合、滑动平均以及趋势页使用的格式化工具。
"""

from .aggregation import (
    AggregatedBucket,
    Granularity,
    VitalSample,
    aggregate,
    aggregate_by_day,
    aggregate_by_month,
    aggregate_by_week,
    format_records_for_display,
)
from .bucketing import start_of_day, start_of_month, start_of_week, to_local
from .formatting import format_date_range, get_time_ago_string, is_same_day
from .smoothing import apply_running_average, parse_smoothing
from .summary import (
    AverageStats,
    RecordRow,
    TrendTab,
    average_stats,
    filter_by_range,
    latest_sample,
    list_records,
    recent_samples,
    select_chart_series,
    tab_date_range,
)

__all__ = [
    # Aggregation
    "AggregatedBucket",
    "Granularity",
    "VitalSample",
    "aggregate",
    "aggregate_by_day",
    "aggregate_by_week",
    "aggregate_by_month",
    "format_records_for_display",
    # Bucketing
    "start_of_day",
    "start_of_week",
    "start_of_month",
    "to_local",
    # Formatting
    "format_date_range",
    "get_time_ago_string",
    "is_same_day",
    # Smoothing
    "apply_running_average",
    "parse_smoothing",
    # Summary
    "AverageStats",
    "RecordRow",
    "TrendTab",
    "average_stats",
    "filter_by_range",
    "latest_sample",
    "list_records",
    "recent_samples",
    "select_chart_series",
    "tab_date_range",
]
