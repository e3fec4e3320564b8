"""核心流程模組。"""

from .metadata_reader import EXTRACTED_TAGS, ExtractedTag, MetadataReader
from .processor import BatchResult, SidecarProcessor
from .record_codec import (
    deserialize_record,
    generate_output_file,
    read_record,
    serialize_record,
    write_record,
)
from .validator import validate_input

__all__ = [
    "EXTRACTED_TAGS",
    "ExtractedTag",
    "MetadataReader",
    "BatchResult",
    "SidecarProcessor",
    "deserialize_record",
    "generate_output_file",
    "read_record",
    "serialize_record",
    "write_record",
    "validate_input",
]
