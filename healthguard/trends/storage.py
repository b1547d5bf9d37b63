# -*- coding: utf-8 -*-
"""Sample and profile collaborators.

The aggregation core never talks to persistence directly. Callers resolve the raw
sample collection (and the optional profile) through one of these sources first:

- JSON files under ``settings.data_root`` (local / offline use)
- the REST wrapper (``GET /vitals``, ``GET /auth/profile``) when
  ``HEALTHGUARD_REMOTE_URL`` is set

``load_samples`` / ``load_profile`` turn every collaborator failure into "no data".
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence

import httpx

from ..assessment.bmi import calculate_bmi
from ..config import settings
from .aggregation import VitalSample

logger = logging.getLogger(__name__)

PROFILE_CACHE_SECONDS = 300.0


@dataclass
class Profile:
    """用户资料，仅用于确定参考阈值"""
    age: Optional[int] = None
    gender: Optional[str] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None

    @property
    def bmi(self) -> Optional[float]:
        info = calculate_bmi(self.weight_kg, self.height_cm)
        return info["bmi"] if info else None

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Profile":
        return cls(
            age=_optional_number(record.get("age"), int),
            gender=str(record["gender"]) if record.get("gender") else None,
            height_cm=_optional_number(record.get("height"), float),
            weight_kg=_optional_number(record.get("weight"), float),
        )


def _optional_number(value: Any, kind: type) -> Any:
    if value is None or value == "":
        return None
    try:
        return kind(float(value))
    except (TypeError, ValueError):
        return None


class SampleSource(Protocol):
    async def get_all(self) -> Sequence[VitalSample]: ...


class ProfileSource(Protocol):
    async def get(self) -> Optional[Profile]: ...


def _read_json(path: Path) -> Any:
    if not path.exists():
        return None
    return json.loads(path.read_text(encoding="utf-8"))


class JsonFileSampleSource:
    """Reads a JSON list of vital records, e.g. an export of the ``vital_records`` table."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path or settings.samples_file).expanduser()

    async def get_all(self) -> List[VitalSample]:
        data = _read_json(self.path)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON list in {self.path}")
        return [VitalSample.from_dict(item) for item in data if isinstance(item, dict)]


class JsonFileProfileSource:
    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path or settings.profile_file).expanduser()

    async def get(self) -> Optional[Profile]:
        data = _read_json(self.path)
        if not isinstance(data, dict):
            return None
        # Cached profiles are stored as {"data": {...}, "timestamp": ...}.
        payload = data.get("data") if isinstance(data.get("data"), dict) else data
        return Profile.from_dict(payload)


class _RemoteSource:
    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or settings.remote_url or "").rstrip("/")
        self.token = token if token is not None else settings.remote_token
        self.timeout = timeout if timeout is not None else settings.remote_timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _get_json(self, path: str) -> Any:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self._headers(),
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            resp = await client.get(path)
            resp.raise_for_status()
            return resp.json()


class RemoteSampleSource(_RemoteSource):
    async def get_all(self) -> List[VitalSample]:
        data = await self._get_json("/vitals")
        if not isinstance(data, list):
            raise ValueError("Unexpected /vitals payload")
        return [VitalSample.from_dict(item) for item in data if isinstance(item, dict)]


class RemoteProfileSource(_RemoteSource):
    async def get(self) -> Optional[Profile]:
        data = await self._get_json("/auth/profile")
        if not isinstance(data, dict):
            return None
        return Profile.from_dict(data)


class CachedProfileSource:
    """Serve the last fetched profile for ``ttl`` seconds, or until ``invalidate``.

    ``ttl=None`` keeps the profile until it is invalidated. An empty profile is
    not cached.
    """

    def __init__(self, source: ProfileSource, ttl: Optional[float] = None) -> None:
        self._source = source
        self._ttl = ttl
        self._cached: Optional[Profile] = None
        self._fetched_at = 0.0

    def _fresh(self) -> bool:
        if self._cached is None:
            return False
        return self._ttl is None or time.monotonic() - self._fetched_at < self._ttl

    async def get(self) -> Optional[Profile]:
        if not self._fresh():
            self._cached = await self._source.get()
            self._fetched_at = time.monotonic()
        return self._cached

    def invalidate(self) -> None:
        self._cached = None


def default_sample_source() -> SampleSource:
    if settings.remote_url:
        return RemoteSampleSource()
    return JsonFileSampleSource()


@lru_cache(maxsize=4)
def _cached_remote_profile(base_url: str, token: Optional[str]) -> CachedProfileSource:
    return CachedProfileSource(RemoteProfileSource(base_url, token), ttl=PROFILE_CACHE_SECONDS)


def default_profile_source() -> ProfileSource:
    if settings.remote_url:
        return _cached_remote_profile(settings.remote_url, settings.remote_token)
    return JsonFileProfileSource()


async def load_samples(source: SampleSource) -> List[VitalSample]:
    try:
        return list(await source.get_all())
    except Exception as exc:
        logger.warning("Failed to load vital samples, treating as empty: %s", exc)
        return []


async def load_profile(source: ProfileSource) -> Optional[Profile]:
    try:
        return await source.get()
    except Exception as exc:
        logger.warning("Failed to load profile, using defaults: %s", exc)
        return None
