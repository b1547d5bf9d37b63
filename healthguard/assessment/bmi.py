# -*- coding: utf-8 -*-
"""
体质指数 (BMI)

分类采用中国成人标准：<18.5 偏瘦，18.5-23.9 正常，24-27.9 偏胖，>=28 肥胖。
"""

from __future__ import annotations

from typing import Optional

OVERWEIGHT_BMI = 24.0
OBESITY_BMI = 28.0

OVERWEIGHT_NOTE = "您的体重略微超标，建议适当控制饮食热量，增加有氧运动量。"
OBESITY_NOTE = "您的体重已达到肥胖标准，患心血管疾病风险较高，建议在医生指导下科学减重。"


def calculate_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[dict]:
    """
    计算体质指数 (BMI)

    Args:
        weight_kg: 体重 (kg)
        height_cm: 身高 (cm)

    Returns:
        dict: BMI 值和分类；身高或体重缺失 / 非正数时返回 None
    """
    if not weight_kg or not height_cm or weight_kg <= 0 or height_cm <= 0:
        return None
    height_m = height_cm / 100
    bmi = weight_kg / (height_m ** 2)

    if bmi < 18.5:
        category = "偏瘦"
        risk = "营养不良风险"
    elif bmi < OVERWEIGHT_BMI:
        category = "正常"
        risk = "健康范围"
    elif bmi < OBESITY_BMI:
        category = "偏胖"
        risk = "心血管风险轻度增加"
    else:
        category = "肥胖"
        risk = "心血管风险显著增加"

    return {
        "bmi": round(bmi, 1),
        "category": category,
        "risk": risk,
        "weight_kg": weight_kg,
        "height_cm": height_cm,
    }


def bmi_advice_note(bmi: float) -> str:
    """血压建议后附加的体重提示；BMI < 24 时为空串。"""
    if bmi >= OBESITY_BMI:
        return OBESITY_NOTE
    if bmi >= OVERWEIGHT_BMI:
        return OVERWEIGHT_NOTE
    return ""
