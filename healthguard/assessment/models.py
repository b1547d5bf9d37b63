# -*- coding: utf-8 -*-
"""Assessment domain: Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class BPEvaluateRequest(BaseModel):
    systolic: int = Field(..., ge=0, le=300, description="收缩压 mmHg")
    diastolic: int = Field(..., ge=0, le=200, description="舒张压 mmHg")
    age: Optional[int] = Field(None, ge=0, le=150)
    gender: Optional[str] = None
    bmi: Optional[float] = Field(None, gt=0)


class BPClassificationResponse(BaseModel):
    tier: str = Field(..., description="low|normal|high-normal|grade1|grade2|grade3|elder-acceptable")
    label: str
    color_tag: str = Field(..., description="yellow|green|orange|red|blue")
    advice: str


class HREvaluateRequest(BaseModel):
    heart_rate: int = Field(..., ge=0, le=250)
    age: Optional[int] = Field(None, ge=0, le=150)
    gender: Optional[str] = None


class HRClassificationResponse(BaseModel):
    status: str = Field(..., description="slow|normal|fast|unknown")
    label: str
    color_tag: str
    heart_rate_min: int
    heart_rate_max: int


class ThresholdResponse(BaseModel):
    systolic_high: int
    diastolic_high: int
    heart_rate_min: int
    heart_rate_max: int
