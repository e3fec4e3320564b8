"""讀取 JPEG 的檔案資訊與 EXIF 標籤。"""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import Any, BinaryIO, Callable, Union

import piexif
from PIL import Image, JpegImagePlugin, UnidentifiedImageError

from ..errors import ExifParseError, SidecarIOError
from ..models import MetadataRecord
from ..utils import exif_display, time_utils
from ..utils.logger import get_logger

EXIF_HEADER = b"Exif\x00\x00"
TRIM_CHARS = ' "'


@dataclass(frozen=True)
class ExtractedTag:
    name: str
    ifd: str
    tag_id: int
    field: str
    render: Callable[[Any], str]


# 只讀 primary image（0th IFD 與其 Exif 子 IFD），不看縮圖的 1st IFD。
EXTRACTED_TAGS = (
    ExtractedTag(
        "Orientation", "0th", piexif.ImageIFD.Orientation, "orientation",
        exif_display.display_orientation,
    ),
    ExtractedTag(
        "Model", "0th", piexif.ImageIFD.Model, "camera_model",
        exif_display.display_ascii,
    ),
    ExtractedTag(
        "DateTimeOriginal", "Exif", piexif.ExifIFD.DateTimeOriginal, "capture_time",
        exif_display.display_datetime,
    ),
    ExtractedTag(
        "BodySerialNumber", "Exif", piexif.ExifIFD.BodySerialNumber, "camera_serial",
        exif_display.display_ascii,
    ),
)


def validate_tiff_header(payload: bytes) -> None:
    """檢查 APP1 payload 的 Exif 識別碼與 TIFF 標頭。"""
    if not payload.startswith(EXIF_HEADER):
        raise ExifParseError("APP1 區段不是 Exif 格式")
    tiff = payload[len(EXIF_HEADER):]
    if len(tiff) < 8:
        raise ExifParseError("TIFF 標頭長度不足")

    byte_order = tiff[:2]
    if byte_order == b"II":
        endian = "<"
    elif byte_order == b"MM":
        endian = ">"
    else:
        raise ExifParseError(f"未知的位元組順序: {byte_order!r}")

    magic, ifd0_offset = struct.unpack(endian + "HL", tiff[2:8])
    if magic != 42:
        raise ExifParseError(f"TIFF magic number 錯誤: {magic}")
    if ifd0_offset < 8 or ifd0_offset + 2 > len(tiff):
        raise ExifParseError(f"IFD0 位移超出範圍: {ifd0_offset}")


class MetadataReader:
    def __init__(self, logger=None) -> None:
        self.logger = logger or get_logger(self.__class__.__name__)

    def read(self, path: Union[str, os.PathLike]) -> MetadataRecord:
        filename = os.fspath(path)
        try:
            handle = open(filename, "rb")
        except OSError as exc:
            raise SidecarIOError.from_os_error(exc, filename) from exc

        with handle:
            try:
                stat_result = os.fstat(handle.fileno())
            except OSError as exc:
                raise SidecarIOError.from_os_error(exc, filename) from exc
            payload = self._read_exif_payload(handle, filename)

        exif_dict = self._decode_exif(payload, filename)
        tag_values = self._extract_tags(exif_dict)

        return MetadataRecord(
            filename=filename,
            size=stat_result.st_size,
            created_time=time_utils.format_rfc3339_nanos(time_utils.created_time_ns(stat_result)),
            modified_time=time_utils.format_rfc3339_nanos(time_utils.modified_time_ns(stat_result)),
            **tag_values,
        )

    def _read_exif_payload(self, handle: BinaryIO, filename: str) -> bytes:
        try:
            try:
                image = Image.open(handle)
            except Image.DecompressionBombError:
                # 像素數量檢查只在 Image.open 進行；JPEG 外掛本身只讀標頭區段。
                handle.seek(0)
                image = JpegImagePlugin.JpegImageFile(handle)
            with image:
                is_jpeg = isinstance(image, JpegImagePlugin.JpegImageFile)
                image_format = image.format
                payload = image.info.get("exif")
        except (UnidentifiedImageError, SyntaxError) as exc:
            raise ExifParseError(f"無法辨識的影像格式: {filename}") from exc
        except OSError as exc:
            raise SidecarIOError.from_os_error(exc, filename) from exc

        # MPO（多影像 JPEG）繼承自 JpegImageFile。
        if not is_jpeg:
            raise ExifParseError(f"不是 JPEG 影像（{image_format}）: {filename}")
        if not payload:
            raise ExifParseError(f"找不到 EXIF 區段: {filename}")
        return payload

    def _decode_exif(self, payload: bytes, filename: str) -> dict[str, Any]:
        validate_tiff_header(payload)
        try:
            return piexif.load(payload)
        except (ValueError, TypeError, struct.error, IndexError, KeyError) as exc:
            raise ExifParseError(f"EXIF 結構損毀: {filename} ({exc})") from exc

    def _extract_tags(self, exif_dict: dict[str, Any]) -> dict[str, str]:
        values: dict[str, str] = {}
        for tag in EXTRACTED_TAGS:
            ifd = exif_dict.get(tag.ifd) or {}
            raw_value = ifd.get(tag.tag_id)
            if raw_value is None:
                continue
            display = tag.render(raw_value)
            self.logger.debug(" %s - %s - %s", tag.name, tag.ifd, display)
            values[tag.field] = display.strip(TRIM_CHARS)
        return values
