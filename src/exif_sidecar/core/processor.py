"""逐檔處理流程：檢查、讀取、序列化、寫出。"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..config import ConfigManager
from ..errors import ExifSidecarError
from ..models import ProcessError
from ..utils.error_handler import ErrorHandler
from ..utils.logger import get_logger
from . import record_codec
from .metadata_reader import MetadataReader
from .validator import validate_input


@dataclass
class BatchResult:
    written: List[Path] = field(default_factory=list)
    errors: List[ProcessError] = field(default_factory=list)
    stopped_early: bool = False

    @property
    def success(self) -> bool:
        return not self.errors


class SidecarProcessor:
    def __init__(self, config: Optional[ConfigManager] = None, logger=None) -> None:
        self.config = config or ConfigManager()
        self.logger = logger or get_logger(self.__class__.__name__)
        self.reader = MetadataReader(logger=self.logger)

    def process_file(self, path: Union[str, os.PathLike]) -> Path:
        file_name = os.fspath(path)
        validate_input(file_name, self.config.get("file_extensions.image", [".jpg", ".jpeg"]))
        record = self.reader.read(file_name)
        output_path = record_codec.write_record(record, record_codec.generate_output_file(file_name))
        self.logger.info(f"successfully wrote to {output_path}")
        return output_path

    def run(self, paths: Iterable[Union[str, os.PathLike]]) -> BatchResult:
        stop_on_error = bool(self.config.get("batch.stop_on_error", True))
        error_handler = ErrorHandler()
        result = BatchResult(errors=error_handler.errors)

        for path in paths:
            file_name = os.fspath(path)
            try:
                output_path = self.process_file(file_name)
            except ExifSidecarError as exc:
                error_handler.add_exception(exc, file_path=file_name)
                self.logger.error(f"Processing input [{file_name}] error - {exc}")
                if stop_on_error:
                    result.stopped_early = True
                    break
                continue

            result.written.append(output_path)

        return result
