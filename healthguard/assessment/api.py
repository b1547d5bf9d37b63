# -*- coding: utf-8 -*-
"""Assessment domain: API endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from .classifier import ClassificationResult, HeartRateResult, evaluate_bp, evaluate_hr
from .models import (
    BPClassificationResponse,
    BPEvaluateRequest,
    HRClassificationResponse,
    HREvaluateRequest,
    ThresholdResponse,
)
from .thresholds import ThresholdBand, thresholds

router = APIRouter(prefix="/api/assessment", tags=["Assessment"])


def classification_out(result: ClassificationResult) -> BPClassificationResponse:
    return BPClassificationResponse(
        tier=result.tier.value,
        label=result.label,
        color_tag=result.color_tag.value,
        advice=result.advice,
    )


def threshold_out(band: ThresholdBand) -> ThresholdResponse:
    return ThresholdResponse(
        systolic_high=band.systolic_high,
        diastolic_high=band.diastolic_high,
        heart_rate_min=band.heart_rate_min,
        heart_rate_max=band.heart_rate_max,
    )


def heart_rate_out(result: HeartRateResult) -> HRClassificationResponse:
    return HRClassificationResponse(
        status=result.status.value,
        label=result.label,
        color_tag=result.color_tag.value,
        heart_rate_min=result.threshold.min,
        heart_rate_max=result.threshold.max,
    )


@router.post("/bp", response_model=BPClassificationResponse, summary="Classify a blood-pressure reading")
def assess_bp(payload: BPEvaluateRequest):
    result = evaluate_bp(payload.systolic, payload.diastolic, payload.age, payload.gender, payload.bmi)
    return classification_out(result)


@router.post("/hr", response_model=HRClassificationResponse, summary="Classify a heart-rate reading")
def assess_hr(payload: HREvaluateRequest):
    return heart_rate_out(evaluate_hr(payload.heart_rate, payload.age, payload.gender))


@router.get("/thresholds", response_model=ThresholdResponse, summary="Reference bands for a profile")
def reference_thresholds(
    age: Optional[int] = Query(default=None, ge=0, le=150),
    gender: Optional[str] = Query(default=None, description="male|female|unknown"),
):
    return threshold_out(thresholds(age, gender))
