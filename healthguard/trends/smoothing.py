from __future__ import annotations

import re
from dataclasses import replace
from typing import List

import numpy as np
import pandas as pd

from .aggregation import VITAL_FIELDS, AggregatedBucket


def parse_smoothing(smooth: str) -> int:
    """Window size from "avg3" / "avg:3" / "avg_3"; 0 for none/raw/unrecognized."""
    key = (smooth or "").lower().strip()
    if key in {"", "none", "raw"}:
        return 0
    match = re.match(r"avg[:_]?(\d+)$", key)
    if match:
        return max(0, int(match.group(1)))
    return 0


def apply_running_average(buckets: List[AggregatedBucket], smooth: str) -> List[AggregatedBucket]:
    """Trailing rolling mean over the bucket series; labels, starts and counts are kept."""
    window = parse_smoothing(smooth)
    if not buckets or window <= 1:
        return list(buckets)

    frame = pd.DataFrame(
        [[getattr(b, name) for name in VITAL_FIELDS] for b in buckets],
        columns=list(VITAL_FIELDS),
        dtype=float,
    )
    rolled = frame.rolling(window=window, min_periods=1).mean()
    # round half up, matching the bucket means
    rounded = np.floor(rolled.to_numpy() + 0.5).astype(int)

    return [
        replace(bucket, **{name: int(rounded[i][j]) for j, name in enumerate(VITAL_FIELDS)})
        for i, bucket in enumerate(buckets)
    ]
