"""EXIF 原始值轉換為顯示字串。"""

from __future__ import annotations

import re
from typing import Union

ExifValue = Union[bytes, str, int, tuple]

ORIENTATION_DESCRIPTIONS = {
    1: "row 0 at top and column 0 at left",
    2: "row 0 at top and column 0 at right",
    3: "row 0 at bottom and column 0 at right",
    4: "row 0 at bottom and column 0 at left",
    5: "row 0 at left and column 0 at top",
    6: "row 0 at right and column 0 at top",
    7: "row 0 at right and column 0 at bottom",
    8: "row 0 at left and column 0 at bottom",
}

_EXIF_DATETIME = re.compile(rb"^(\d{4}):(\d{2}):(\d{2}) (\d{2}):(\d{2}):(\d{2})$")


def _to_bytes(value: Union[bytes, str]) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def escape_ascii(data: bytes) -> str:
    chars = []
    for byte in data:
        if byte in (0x22, 0x5C):
            chars.append("\\" + chr(byte))
        elif 0x20 <= byte <= 0x7E:
            chars.append(chr(byte))
        else:
            chars.append(f"\\x{byte:02x}")
    return "".join(chars)


def display_ascii(value: Union[bytes, str]) -> str:
    """以雙引號包住每個字串，多個字串以 ", " 串接。"""
    data = _to_bytes(value).rstrip(b"\x00")
    return ", ".join(f'"{escape_ascii(part)}"' for part in data.split(b"\x00"))


def display_datetime(value: Union[bytes, str]) -> str:
    data = _to_bytes(value).rstrip(b"\x00")
    match = _EXIF_DATETIME.match(data)
    if match is None:
        return display_ascii(value)
    year, month, day, hour, minute, second = (part.decode("ascii") for part in match.groups())
    return f"{year}-{month}-{day} {hour}:{minute}:{second}"


def display_orientation(value: ExifValue) -> str:
    if isinstance(value, tuple):
        if not value:
            return display_default(value)
        value = value[0]
    if not isinstance(value, int):
        return display_default(value)
    return ORIENTATION_DESCRIPTIONS.get(value, f"unknown orientation {value}")


def display_default(value: ExifValue) -> str:
    if isinstance(value, (bytes, str)):
        return display_ascii(value)
    if isinstance(value, tuple):
        return ", ".join(display_default(item) for item in value)
    return str(value)
