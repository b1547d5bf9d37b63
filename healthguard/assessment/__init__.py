# -*- coding: utf-8 -*-
"""
血压评估模块

按年龄 / 性别给出参考阈值，并对单次血压、心率读数分级。
"""

from .bmi import bmi_advice_note, calculate_bmi
from .classifier import (
    BPTier,
    ClassificationResult,
    ColorTag,
    HeartRateResult,
    HRStatus,
    evaluate_bp,
    evaluate_hr,
)
from .thresholds import (
    BPThreshold,
    HRThreshold,
    ThresholdBand,
    get_bp_thresholds,
    get_hr_thresholds,
    thresholds,
)

__all__ = [
    "BPTier",
    "ClassificationResult",
    "ColorTag",
    "HeartRateResult",
    "HRStatus",
    "evaluate_bp",
    "evaluate_hr",
    "BPThreshold",
    "HRThreshold",
    "ThresholdBand",
    "get_bp_thresholds",
    "get_hr_thresholds",
    "thresholds",
    "bmi_advice_note",
    "calculate_bmi",
]
