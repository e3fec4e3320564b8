"""時間戳處理工具。

檔案系統時間以整數奈秒保存，避免 float 與 datetime 微秒精度造成的誤差。
"""

from __future__ import annotations

import os
import re
from datetime import datetime, timedelta, timezone
from typing import Tuple

NANOS_PER_SECOND = 1_000_000_000

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_RFC3339_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?"
    r"(Z|z|[+-]\d{2}:\d{2})$"
)


def split_nanos(timestamp_ns: int) -> Tuple[int, int]:
    """拆成 (秒, 奈秒)，奈秒部分永遠落在 [0, 1e9)。"""
    return divmod(timestamp_ns, NANOS_PER_SECOND)


def format_rfc3339_nanos(timestamp_ns: int) -> str:
    seconds, nanos = split_nanos(timestamp_ns)
    moment = _EPOCH + timedelta(seconds=seconds)
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}.{nanos:09d}Z"
    )


def parse_rfc3339_nanos(value: str) -> int:
    match = _RFC3339_PATTERN.match(value)
    if match is None:
        raise ValueError(f"not an RFC 3339 timestamp: {value!r}")

    year, month, day, hour, minute, second = (int(part) for part in match.groups()[:6])
    fraction = match.group(7) or ""
    offset = match.group(8)

    moment = datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    if offset not in {"Z", "z"}:
        sign = -1 if offset[0] == "-" else 1
        offset_delta = timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6]))
        moment -= sign * offset_delta

    delta = moment - _EPOCH
    seconds = delta.days * 86400 + delta.seconds
    return seconds * NANOS_PER_SECOND + int(fraction.ljust(9, "0"))


def created_time_ns(stat_result: os.stat_result) -> int:
    """建立時間；平台沒有 birthtime 時退回 st_ctime。"""
    birthtime_ns = getattr(stat_result, "st_birthtime_ns", None)
    if birthtime_ns is not None:
        return birthtime_ns
    birthtime = getattr(stat_result, "st_birthtime", None)
    if birthtime is not None:
        return round(birthtime * NANOS_PER_SECOND)
    return stat_result.st_ctime_ns


def modified_time_ns(stat_result: os.stat_result) -> int:
    return stat_result.st_mtime_ns
