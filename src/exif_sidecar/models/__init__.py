"""資料模型模組。"""

from .error_record import ErrorCode, ProcessError
from .metadata_record import FIELD_ORDER, MANDATORY_FIELDS, OPTIONAL_FIELDS, MetadataRecord

__all__ = [
    "ErrorCode",
    "ProcessError",
    "FIELD_ORDER",
    "MANDATORY_FIELDS",
    "OPTIONAL_FIELDS",
    "MetadataRecord",
]
