"""單一影像的 metadata 記錄。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..errors import RecordFormatError

FIELD_ORDER = (
    "filename",
    "size",
    "created_time",
    "modified_time",
    "orientation",
    "capture_time",
    "camera_model",
    "camera_serial",
)
MANDATORY_FIELDS = FIELD_ORDER[:4]
OPTIONAL_FIELDS = FIELD_ORDER[4:]

_MAX_SIZE = 2**64 - 1


@dataclass(frozen=True)
class MetadataRecord:
    filename: str
    size: int
    created_time: str
    modified_time: str
    orientation: str = ""
    capture_time: str = ""
    camera_model: str = ""
    camera_serial: str = ""

    def to_dict(self) -> dict[str, object]:
        """依宣告順序輸出，空字串的 EXIF 欄位直接省略。"""
        data: dict[str, object] = {
            "filename": self.filename,
            "size": self.size,
            "created_time": self.created_time,
            "modified_time": self.modified_time,
        }
        for name in OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value:
                data[name] = value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MetadataRecord":
        missing = [name for name in MANDATORY_FIELDS if name not in data]
        if missing:
            raise RecordFormatError(f"missing field(s): {', '.join(missing)}")

        size = data["size"]
        if isinstance(size, bool) or not isinstance(size, int) or not 0 <= size <= _MAX_SIZE:
            raise RecordFormatError(f"size must be an unsigned 64-bit integer, got {size!r}")

        values: dict[str, Any] = {"size": size}
        for name in FIELD_ORDER:
            if name == "size":
                continue
            value = data.get(name, "")
            if not isinstance(value, str):
                raise RecordFormatError(f"{name} must be a string, got {type(value).__name__}")
            values[name] = value
        return cls(**values)
