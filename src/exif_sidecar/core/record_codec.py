"""MetadataRecord 與 JSON sidecar 之間的轉換。"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Union

from ..errors import InvalidArgumentError, RecordFormatError, SidecarIOError
from ..models import MetadataRecord

OUTPUT_EXTENSION = ".json"
JSON_INDENT = 2


def serialize_record(record: MetadataRecord) -> str:
    return json.dumps(record.to_dict(), ensure_ascii=False, indent=JSON_INDENT)


def deserialize_record(text: Union[str, bytes]) -> MetadataRecord:
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise RecordFormatError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise RecordFormatError(f"expected a JSON object, got {type(data).__name__}")
    return MetadataRecord.from_dict(data)


def generate_output_file(path: Union[str, os.PathLike]) -> str:
    """把最後一個 . 之後的副檔名換成 .json。"""
    path_text = os.fspath(path)
    index = path_text.rfind(".")
    if index < 0:
        raise InvalidArgumentError(f"{path_text} has no file extension")
    return path_text[:index] + OUTPUT_EXTENSION


def write_record(record: MetadataRecord, output_path: Union[str, os.PathLike]) -> Path:
    target = Path(output_path)
    try:
        with target.open("w", encoding="utf-8") as handle:
            handle.write(serialize_record(record))
    except OSError as exc:
        raise SidecarIOError.from_os_error(exc, target) from exc
    return target


def read_record(path: Union[str, os.PathLike]) -> MetadataRecord:
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise SidecarIOError.from_os_error(exc, source) from exc
    return deserialize_record(text)
