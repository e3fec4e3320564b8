"""批次處理的錯誤記錄。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    INVALID_ARGUMENT = "E-100"
    IO_ERROR = "E-200"
    EXIF_PARSE = "E-300"
    RECORD_FORMAT = "E-400"


@dataclass
class ProcessError:
    code: str
    message: str
    file_path: Optional[str] = None
