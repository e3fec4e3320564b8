"""錯誤類型定義。"""

from __future__ import annotations

from typing import Optional


class ExifSidecarError(Exception):
    """所有擷取流程錯誤的基底類別。"""


class InvalidArgumentError(ExifSidecarError):
    """輸入路徑不符合要求（不存在的副檔名、目錄等）。"""

    def __str__(self) -> str:
        return f"Invalid arguments: {super().__str__()}"


class SidecarIOError(ExifSidecarError):
    """包裝底層 OSError。"""

    def __init__(self, message: str, path: Optional[str] = None, cause: Optional[OSError] = None) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause

    @classmethod
    def from_os_error(cls, exc: OSError, path) -> "SidecarIOError":
        reason = exc.strerror or str(exc)
        return cls(f"{reason}: {path}", path=str(path), cause=exc)


class ExifParseError(ExifSidecarError):
    """EXIF 區段缺少或格式錯誤。"""


class RecordFormatError(ExifSidecarError):
    """JSON sidecar 內容結構不正確。"""
