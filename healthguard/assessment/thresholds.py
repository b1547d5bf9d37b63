# -*- coding: utf-8 -*-
"""
血压 / 心率参考阈值

按年龄、性别给出趋势图上的警戒线：收缩压 / 舒张压上限与心率上下限。
年龄或性别缺失时使用一般成人的参考值，任何输入都不会抛出异常。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ThresholdBand:
    """参考阈值"""
    systolic_high: int  # 收缩压警戒 (mmHg)
    diastolic_high: int  # 舒张压警戒 (mmHg)
    heart_rate_min: int  # 心率过缓 (bpm)
    heart_rate_max: int  # 心率过快 (bpm)


@dataclass(frozen=True)
class BPThreshold:
    systolic: int
    diastolic: int


@dataclass(frozen=True)
class HRThreshold:
    min: int
    max: int


# (年龄上限(不含), 收缩压, 舒张压, 心率下限, 心率上限)，按年龄升序；None 表示无上限
_AGE_BANDS: Tuple[Tuple[Optional[int], int, int, int, int], ...] = (
    (18, 120, 80, 60, 110),
    (65, 140, 90, 60, 100),
    (None, 150, 90, 55, 100),
)
_GENERAL = ThresholdBand(systolic_high=140, diastolic_high=90, heart_rate_min=60, heart_rate_max=100)

# 女性静息心率通常略高
_FEMALE_HR_MAX_OFFSET = 5

_GENDER_ALIASES = {
    "male": "male",
    "m": "male",
    "man": "male",
    "男": "male",
    "female": "female",
    "f": "female",
    "woman": "female",
    "女": "female",
}


def normalize_gender(gender: Optional[str]) -> str:
    """male / female / unknown"""
    if not isinstance(gender, str):
        return "unknown"
    return _GENDER_ALIASES.get(gender.strip().lower(), "unknown")


def _valid_age(age: object) -> Optional[float]:
    if isinstance(age, bool) or not isinstance(age, (int, float)):
        return None
    if math.isnan(age) or age < 0:
        return None
    return float(age)


def thresholds(age: Optional[float] = None, gender: Optional[str] = None) -> ThresholdBand:
    years = _valid_age(age)
    band = _GENERAL
    if years is not None:
        for upper, systolic, diastolic, hr_min, hr_max in _AGE_BANDS:
            if upper is None or years < upper:
                band = ThresholdBand(systolic, diastolic, hr_min, hr_max)
                break

    if normalize_gender(gender) == "female":
        band = ThresholdBand(
            systolic_high=band.systolic_high,
            diastolic_high=band.diastolic_high,
            heart_rate_min=band.heart_rate_min,
            heart_rate_max=band.heart_rate_max + _FEMALE_HR_MAX_OFFSET,
        )
    return band


def get_bp_thresholds(age: Optional[float] = None, gender: Optional[str] = None) -> BPThreshold:
    band = thresholds(age, gender)
    return BPThreshold(systolic=band.systolic_high, diastolic=band.diastolic_high)


def get_hr_thresholds(age: Optional[float] = None, gender: Optional[str] = None) -> HRThreshold:
    band = thresholds(age, gender)
    return HRThreshold(min=band.heart_rate_min, max=band.heart_rate_max)
