"""錯誤收集工具。"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..errors import ExifParseError, InvalidArgumentError, RecordFormatError, SidecarIOError
from ..models.error_record import ErrorCode, ProcessError


def error_code_for(exc: BaseException) -> ErrorCode:
    if isinstance(exc, InvalidArgumentError):
        return ErrorCode.INVALID_ARGUMENT
    if isinstance(exc, (SidecarIOError, OSError)):
        return ErrorCode.IO_ERROR
    if isinstance(exc, ExifParseError):
        return ErrorCode.EXIF_PARSE
    if isinstance(exc, RecordFormatError):
        return ErrorCode.RECORD_FORMAT
    raise TypeError(f"無對應錯誤代碼: {type(exc).__name__}")


@dataclass
class ErrorHandler:
    """集中管理單次批次的錯誤。"""

    errors: List[ProcessError] = field(default_factory=list)

    def add_exception(self, exc: BaseException, file_path: Optional[str] = None) -> ProcessError:
        error = ProcessError(
            code=error_code_for(exc).value,
            message=str(exc),
            file_path=file_path,
        )
        self.errors.append(error)
        return error
