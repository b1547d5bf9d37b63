# -*- coding: utf-8 -*-
"""
血压 / 心率分级

血压分级参照《中国高血压防治指南》的诊室血压标准，按规则表自上而下首个命中生效；
规则之间的区间有重叠，顺序即优先级（例如收缩压 180 先命中 3 级，不会再判 2 级）。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from .bmi import bmi_advice_note
from .thresholds import HRThreshold, get_hr_thresholds

DEFAULT_AGE = 30
DEFAULT_GENDER = "unknown"
DEFAULT_BMI = 22.0

ELDER_AGE = 65


class BPTier(Enum):
    """血压分级"""
    LOW = "low"
    NORMAL = "normal"
    HIGH_NORMAL = "high-normal"
    GRADE1 = "grade1"
    GRADE2 = "grade2"
    GRADE3 = "grade3"
    ELDER_ACCEPTABLE = "elder-acceptable"


class ColorTag(Enum):
    YELLOW = "yellow"
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"
    BLUE = "blue"
    GRAY = "gray"


@dataclass(frozen=True)
class ClassificationResult:
    """血压评估结果"""
    tier: BPTier
    label: str
    color_tag: ColorTag
    advice: str


# (分级, 判定条件)，按顺序首个命中生效
_BP_RULES: Tuple[Tuple[BPTier, Callable[[float, float], bool]], ...] = (
    (BPTier.LOW, lambda sbp, dbp: sbp < 90 or dbp < 60),
    (BPTier.GRADE3, lambda sbp, dbp: sbp >= 180 or dbp >= 110),
    (BPTier.GRADE2, lambda sbp, dbp: sbp >= 160 or dbp >= 100),
    (BPTier.GRADE1, lambda sbp, dbp: sbp >= 140 or dbp >= 90),
    (BPTier.HIGH_NORMAL, lambda sbp, dbp: sbp >= 120 or dbp >= 80),
)

# 分级 -> (标签, 颜色, 建议, 是否附加 BMI 提示)
_TIER_TEXT: Dict[BPTier, Tuple[str, ColorTag, str, bool]] = {
    BPTier.LOW: (
        "偏低",
        ColorTag.YELLOW,
        "血压偏低，注意补充水分和营养，起身时动作宜缓慢；如伴有头晕、乏力请及时就医。",
        False,
    ),
    BPTier.NORMAL: (
        "正常",
        ColorTag.GREEN,
        "血压处于理想范围，请继续保持健康的生活方式。",
        False,
    ),
    BPTier.HIGH_NORMAL: (
        "正常高值",
        ColorTag.ORANGE,
        "血压处于正常高值，建议减少食盐摄入、规律运动并定期监测。",
        True,
    ),
    BPTier.GRADE1: (
        "1级高血压",
        ColorTag.RED,
        "属于1级高血压，建议改善生活方式，并咨询医生是否需要药物治疗。",
        True,
    ),
    BPTier.GRADE2: (
        "2级高血压",
        ColorTag.RED,
        "属于2级高血压，建议尽快就医，在医生指导下规范用药。",
        True,
    ),
    BPTier.GRADE3: (
        "3级高血压",
        ColorTag.RED,
        "血压显著升高，请立即休息并尽快就医！",
        False,
    ),
    BPTier.ELDER_ACCEPTABLE: (
        "老年可接受",
        ColorTag.BLUE,
        "对于65岁及以上人群，该血压水平在可接受范围内，请继续定期监测并遵医嘱。",
        False,
    ),
}


def _number_or(value: object, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        return default
    return float(value)


def _base_tier(systolic: float, diastolic: float) -> BPTier:
    for tier, matches in _BP_RULES:
        if matches(systolic, diastolic):
            return tier
    return BPTier.NORMAL


def evaluate_bp(
    systolic: float,
    diastolic: float,
    age: Optional[float] = DEFAULT_AGE,
    gender: Optional[str] = DEFAULT_GENDER,
    bmi: Optional[float] = DEFAULT_BMI,
) -> ClassificationResult:
    """
    评估一次血压读数

    Args:
        systolic: 收缩压 (mmHg)
        diastolic: 舒张压 (mmHg)
        age: 年龄，缺失时按 30 岁
        gender: 性别，不参与血压分级
        bmi: 体质指数，缺失时按 22

    Returns:
        ClassificationResult: 分级、标签、颜色与建议
    """
    age = _number_or(age, DEFAULT_AGE)
    bmi = _number_or(bmi, DEFAULT_BMI)

    tier = _base_tier(systolic, diastolic)
    if tier is BPTier.GRADE1 and age >= ELDER_AGE and systolic < 150 and diastolic < 90:
        tier = BPTier.ELDER_ACCEPTABLE

    label, color, advice, with_bmi_note = _TIER_TEXT[tier]
    if with_bmi_note:
        advice += bmi_advice_note(bmi)
    return ClassificationResult(tier=tier, label=label, color_tag=color, advice=advice)


class HRStatus(Enum):
    """心率状态"""
    SLOW = "slow"
    NORMAL = "normal"
    FAST = "fast"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class HeartRateResult:
    status: HRStatus
    label: str
    color_tag: ColorTag
    threshold: HRThreshold


def evaluate_hr(
    heart_rate: float,
    age: Optional[float] = None,
    gender: Optional[str] = None,
) -> HeartRateResult:
    """Classify a heart rate against the profile's bradycardia/tachycardia bounds; 0 means not measured."""
    threshold = get_hr_thresholds(age, gender)
    if not heart_rate or heart_rate < 0:
        return HeartRateResult(HRStatus.UNKNOWN, "未测量", ColorTag.GRAY, threshold)
    if heart_rate < threshold.min:
        return HeartRateResult(HRStatus.SLOW, "心率过缓", ColorTag.YELLOW, threshold)
    if heart_rate > threshold.max:
        return HeartRateResult(HRStatus.FAST, "心率过快", ColorTag.RED, threshold)
    return HeartRateResult(HRStatus.NORMAL, "正常", ColorTag.GREEN, threshold)
