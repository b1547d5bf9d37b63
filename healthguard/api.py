# -*- coding: utf-8 -*-
"""
HealthGuard 趋势服务 API

提供生命体征趋势聚合、血压 / 心率分级与参考阈值查询。
"""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .assessment.api import router as assessment_router
from .config import settings
from .trends.api import router as trends_router

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# 创建应用
app = FastAPI(
    title="HealthGuard 趋势服务",
    description="生命体征趋势聚合、血压分级与参考阈值",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(trends_router)
app.include_router(assessment_router)


@app.get("/api/health")
def health_check():
    """健康检查"""
    return {
        "status": "ok",
        "version": __version__,
        "timestamp": datetime.now().isoformat(),
    }


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logger.info("Starting HealthGuard on %s:%s", settings.host, settings.port)
    uvicorn.run("healthguard.api:app", host=settings.host, port=settings.port, reload=False)
